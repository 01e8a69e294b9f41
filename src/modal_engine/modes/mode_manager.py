"""Mode manager: owns the mode handlers and dispatches resolved intents."""

from __future__ import annotations

from typing import Dict, Optional, Type

from modal_engine.actions import core as core_actions
from modal_engine.config import EditorConfig
from modal_engine.editor import Editor, EditorMode
from modal_engine.intents import Action, Edit, Intent, ModeChange, Motion, TextInput
from modal_engine.runtime import telemetry

from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .command_mode import CommandMode
from .insert_mode import InsertMode
from .normal_mode import NormalMode
from .quick_menu_mode import QuickMenuMode

_INTENT_TYPES = (Motion, Action, ModeChange, Edit, TextInput)

DEFAULT_MODES: tuple[Type[Mode], ...] = (
    NormalMode,
    InsertMode,
    CommandMode,
    QuickMenuMode,
)


class ModeManager:
    """Routes intents to the active mode and performs mode transitions.

    ``ModeChange`` intents are applied unconditionally; deciding which of
    them are legal in which mode is the keymap's job.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        register_defaults: bool = True,
    ) -> None:
        self.context = context
        self._modes: Dict[EditorMode, Mode] = {}
        self.logger = telemetry.get_logger("modal_engine.modes")
        if register_defaults:
            for mode_cls in DEFAULT_MODES:
                self.register_mode(mode_cls)

    @classmethod
    def create(
        cls,
        editor: Optional[Editor] = None,
        *,
        config: Optional[EditorConfig] = None,
        bus: Optional[ModeBus] = None,
    ) -> "ModeManager":
        context = ModeContext(
            editor=editor or Editor(),
            config=config or EditorConfig(),
            bus=bus or ModeBus(),
        )
        return cls(context)

    @property
    def editor(self) -> Editor:
        return self.context.editor

    @property
    def active_mode(self) -> Mode:
        mode = self._modes.get(self.editor.mode)
        if mode is None:
            raise RuntimeError(f"No handler registered for mode '{self.editor.mode}'")
        return mode

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self.context, *mode_args, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name.value}' already registered")
        self._modes[mode.name] = mode
        return mode

    def switch_mode(self, target: EditorMode) -> None:
        target = EditorMode(target)
        if target not in self._modes:
            raise KeyError(f"Unknown mode '{target}'")
        previous = self.editor.mode
        if previous is target:
            return
        self._modes[previous].on_exit(target)
        self.editor.mode = target
        self._modes[target].on_enter(previous)
        self.context.bus.emit("mode.switch", {"from": previous, "to": target})
        telemetry.record_event(
            "mode.switch", data={"from": previous.value, "to": target.value}
        )

    def handle(self, intent: Intent) -> ModeResult:
        if not isinstance(intent, _INTENT_TYPES):
            raise TypeError(f"Unsupported intent {intent!r}")
        mode = self.active_mode
        with telemetry.span(
            name=f"mode::{mode.name.value}",
            component=True,
            metadata={"intent": _describe(intent), "mode": mode.name.value},
        ):
            if isinstance(intent, ModeChange):
                result = core_actions.apply_mode_change(self.context, intent)
            else:
                result = mode.handle_intent(intent)
        if result.switch_to is not None:
            self.switch_mode(result.switch_to)
        return result


def _describe(intent: Intent) -> str:
    if isinstance(intent, TextInput):
        return f"text:{intent.text!r}"
    return f"{type(intent).__name__.lower()}:{intent.value}"


__all__ = ["DEFAULT_MODES", "ModeManager"]
