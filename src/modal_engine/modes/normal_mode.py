"""Normal mode: motions, pending operators, and single-key edits."""

from __future__ import annotations

from modal_engine import motions
from modal_engine.actions import core as core_actions
from modal_engine.editor import EditorMode
from modal_engine.intents import Action, Edit, Intent, Motion
from modal_engine.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult, unhandled


class NormalMode(Mode):
    name = EditorMode.NORMAL

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("modal_engine.modes.normal")

    def handle_intent(self, intent: Intent) -> ModeResult:
        if isinstance(intent, Action):
            # A newer operator replaces a pending one; they never stack.
            self.editor.pending_action = intent
            return ModeResult(
                consumed=True, status="operator_pending", message=intent.value
            )

        if isinstance(intent, Motion):
            return self._handle_motion(intent)

        if intent is Edit.DELETE_CHAR:
            return core_actions.delete_char(self.context)

        return unhandled(intent)

    def _handle_motion(self, motion: Motion) -> ModeResult:
        buffer = self.context.buffer
        target = motions.resolve(motion, buffer)
        action = self.editor.pending_action
        if action is None:
            buffer.cursor = target
            return ModeResult(consumed=True, status="motion", message=motion.value)

        self.editor.pending_action = None
        self.logger.debug(f"{action.value} {buffer.cursor}->{target}")
        with telemetry.span(
            "operator::apply",
            component="operator",
            metadata={"action": action.value, "motion": motion.value},
        ):
            return core_actions.apply_operator(self.context, action, target)
