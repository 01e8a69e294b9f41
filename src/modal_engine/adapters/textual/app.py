"""Executable Textual app that hosts the modal engine."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use modal_engine.adapters.textual.app"
    ) from exc

from modal_engine import persistence
from modal_engine.buffer import Buffer, BufferView
from modal_engine.config import EditorConfig
from modal_engine.editor import Editor
from modal_engine.modes import ModeManager
from modal_engine.runtime import telemetry

from .controller import TextualEditorAdapter, TextualUIHooks


def create_default_manager(
    paths: Sequence[str] = (), *, config: Optional[EditorConfig] = None
) -> ModeManager:
    """Build a ModeManager with one buffer per path (or a single empty one)."""

    buffers: List[Buffer] = [
        Buffer(name=path, document=persistence.load(path), filepath=path)
        for path in paths
    ]
    editor = Editor(buffers=buffers or [Buffer()])
    return ModeManager.create(editor, config=config or EditorConfig.from_env())


@dataclass
class UIState:
    buffer_text: str = ""
    status_text: str = ""
    command_text: str = ""


class EditorApp(App[None]):
    """Minimal Textual UI embedding the modal engine."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		border: round $accent;
		padding: 1 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#command-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, manager: ModeManager) -> None:
        super().__init__()
        self._state = UIState()
        self.manager = manager
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._command_widget: Static | None = None
        self._logger = telemetry.get_logger("modal_engine.adapters.textual")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view", markup=False)
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line")
        self._command_widget = Static("", id="command-line")
        yield self._status_widget
        yield self._command_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            show_command=self._show_command,
            handle_event=self._handle_event,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(self.manager, hooks)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        try:
            self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        except SystemExit:
            self.exit()
        event.stop()

    def _update_buffer(self, view: BufferView) -> None:
        self._state.buffer_text = _render_cursor(view)
        if self._buffer_widget:
            self._buffer_widget.update(self._state.buffer_text)
        self.sub_title = view.filepath or view.name

    def _update_status(self, status: str) -> None:
        editor = self.manager.editor
        self._state.status_text = f"-- {editor.mode.value.upper()} -- {status}"
        if self._status_widget:
            self._status_widget.update(self._state.status_text)

    def _show_command(self, command: str) -> None:
        self._state.command_text = command
        if self._command_widget:
            self._command_widget.update(command)

    def _handle_event(self, name: str, payload: Any | None) -> None:
        if name == "command.write" and isinstance(payload, dict):
            self._update_status(f"written {payload.get('path')}")

    def _log_line(self, line: str) -> None:
        self._logger.debug(line)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        key = event.key
        if key in {"ctrl+c", "ctrl+q"}:
            return None
        modifiers = []
        if key.startswith("ctrl+") and key != "ctrl+left_square_bracket":
            modifiers.append("ctrl")
        if event.character and len(event.character) == 1 and event.is_printable:
            return (key, event.character, tuple(modifiers))
        return (key, None, tuple(modifiers))


def _render_cursor(view: BufferView) -> str:
    # Cursor drawn as a bar before the character it sits on.
    return view.text[: view.cursor] + "\u258f" + view.text[view.cursor :]


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the modal editor in a terminal.")
    parser.add_argument("paths", nargs="*", help="Files to open, one buffer each")
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "quiet"),
        default="quiet",
        help="telelog preset to configure before starting",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    manager = create_default_manager(args.paths)
    EditorApp(manager).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
