"""File load/save collaborator used by the ``edit`` and ``write`` commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from modal_engine.buffer import Buffer, TextDocument
from modal_engine.runtime.telemetry import span


class PersistenceError(RuntimeError):
    """Raised when a buffer cannot be loaded from or written to disk."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


def load(path: str | Path) -> TextDocument:
    """Read ``path`` as UTF-8 without translating line endings."""

    with span("persistence::load", component="persistence", metadata={"path": path}):
        try:
            with open(path, encoding="utf-8", newline="") as handle:
                return TextDocument.from_text(handle.read())
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"could not read {path}: {exc}", path=str(path)) from exc


def save(buffer: Buffer, path: Optional[str | Path] = None) -> Path:
    """Write ``buffer`` to ``path``, falling back to the buffer's own path."""

    target = path if path is not None else buffer.filepath
    if target is None:
        raise PersistenceError("no filepath specified")
    with span("persistence::save", component="persistence", metadata={"path": target}):
        # Encoded up front so an unencodable buffer leaves the file untouched.
        try:
            data = buffer.text.encode("utf-8")
        except UnicodeError as exc:
            raise PersistenceError(
                f"could not encode {target}: {exc}", path=str(target)
            ) from exc
        try:
            with open(target, "wb") as handle:
                handle.write(data)
        except OSError as exc:
            raise PersistenceError(
                f"could not write to {target}: {exc}", path=str(target)
            ) from exc
    return Path(target)


__all__ = ["PersistenceError", "load", "save"]
