"""Breaking-change question: a yes/no choice followed by a description."""

from enum import Enum

from gitcz.components.confirm import Confirm
from gitcz.components.text_field import TextField
from gitcz.keys import (
    DEFAULT_CONFIRM_KEYMAP,
    DEFAULT_SESSION_KEYMAP,
    ConfirmKeyMap,
    KeyEvent,
    SessionKeyMap,
)

DEFAULT_BREAKING_CONFIRM_PROMPT = "Are there any breaking changes? (y/N)"
DEFAULT_BREAKING_MESSAGE_PROMPT = "Describe breaking changes"


class BreakingPhase(Enum):
    """Phases of the breaking-change question."""

    CONFIRM = "confirm"
    INPUT = "input"
    FINISHED = "finished"


class BreakingChanges:
    """Ask whether the commit breaks compatibility, then ask for details.

    A "no" answer finishes immediately; a "yes" answer opens a text field
    that is finished with the submit key.
    """

    def __init__(
        self,
        confirm_prompt: str = DEFAULT_BREAKING_CONFIRM_PROMPT,
        message_prompt: str = DEFAULT_BREAKING_MESSAGE_PROMPT,
        keymap: SessionKeyMap = DEFAULT_SESSION_KEYMAP,
        confirm_keymap: ConfirmKeyMap = DEFAULT_CONFIRM_KEYMAP,
    ):
        self.phase = BreakingPhase.CONFIRM
        self.confirm = Confirm(prompt=confirm_prompt, keymap=confirm_keymap)
        self.input = TextField(message_prompt, keymap=keymap, submit=keymap.submit)

    def is_finished(self) -> bool:
        return self.phase == BreakingPhase.FINISHED

    def has_breaking_changes(self) -> bool:
        return self.confirm.is_confirmed() and self.confirm.value

    @property
    def value(self) -> str:
        if self.has_breaking_changes():
            return self.input.value
        return ""

    def handle_event(self, event: KeyEvent) -> None:
        if self.phase == BreakingPhase.CONFIRM:
            self.confirm.handle_event(event)
            if self.confirm.is_confirmed():
                if self.confirm.value:
                    self.phase = BreakingPhase.INPUT
                else:
                    self.phase = BreakingPhase.FINISHED
        elif self.phase == BreakingPhase.INPUT:
            self.input.handle_event(event)
            if self.input.is_finished():
                self.phase = BreakingPhase.FINISHED

    def render(self) -> str:
        if self.phase == BreakingPhase.CONFIRM or not self.has_breaking_changes():
            return self.confirm.render()
        return self.confirm.render() + "\n" + self.input.render()
