"""Immutable keymap built once at startup and passed to the host loop."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional

from modal_engine.editor import EditorMode
from modal_engine.intents import Intent

from .models import Binding, KeyStroke


class KeymapConflictError(RuntimeError):
    """Raised when two bindings claim the same stroke in one mode."""

    def __init__(self, binding: Binding, existing: Binding) -> None:
        super().__init__(f"Binding '{binding.id}' conflicts with '{existing.id}'")
        self.binding = binding
        self.existing = existing


class Keymap:
    """Read-only ``mode -> stroke -> binding`` table."""

    def __init__(self, bindings: Iterable[Binding] = ()) -> None:
        tables: Dict[EditorMode, Dict[KeyStroke, Binding]] = {
            mode: {} for mode in EditorMode
        }
        for binding in bindings:
            table = tables[binding.mode]
            existing = table.get(binding.stroke)
            if existing is not None:
                raise KeymapConflictError(binding, existing)
            table[binding.stroke] = binding
        self._tables: Mapping[EditorMode, Mapping[KeyStroke, Binding]] = (
            MappingProxyType(
                {mode: MappingProxyType(table) for mode, table in tables.items()}
            )
        )

    def __len__(self) -> int:
        return sum(len(table) for table in self._tables.values())

    def __iter__(self) -> Iterator[Binding]:
        for table in self._tables.values():
            yield from table.values()

    def bindings(self, mode: EditorMode) -> Mapping[KeyStroke, Binding]:
        return self._tables[EditorMode(mode)]

    def resolve(self, mode: EditorMode, stroke: KeyStroke) -> Optional[Intent]:
        binding = self._tables[EditorMode(mode)].get(stroke)
        return binding.intent if binding is not None else None

    def with_bindings(self, bindings: Iterable[Binding]) -> "Keymap":
        """Return a new keymap where ``bindings`` override existing strokes."""

        merged: Dict[tuple[EditorMode, KeyStroke], Binding] = {
            (binding.mode, binding.stroke): binding for binding in self
        }
        for binding in bindings:
            merged[(binding.mode, binding.stroke)] = binding
        return Keymap(merged.values())


__all__ = ["Keymap", "KeymapConflictError"]
