"""Free-text field with validation-gated submission."""

from typing import Callable, Optional

from gitcz.components.base import VALID, FieldValidationResult, TextBuffer
from gitcz.keys import DEFAULT_SESSION_KEYMAP, KeyBinding, KeyEvent, SessionKeyMap

Validator = Callable[[str], FieldValidationResult]

PROMPT_SEPARATOR = ": "
ERROR_MARK = "✕ "


def always_valid(value: str) -> FieldValidationResult:
    return VALID


class TextField:
    """A single- or multi-line text input.

    Every key event that is not the submit key is forwarded to the buffer
    and the content is re-validated. The submit key finishes the field only
    while the content is acceptable. A finished field ignores input.

    Args:
        prompt: Question shown before the input.
        multiline: Allow line breaks; "enter" then inserts a newline and the
            submit binding finishes the field.
        validator: Predicate over the raw content.
        keymap: Session key bindings.
        submit: Overrides the key that finishes the field.
    """

    def __init__(
        self,
        prompt: str,
        multiline: bool = False,
        validator: Optional[Validator] = None,
        keymap: SessionKeyMap = DEFAULT_SESSION_KEYMAP,
        submit: Optional[KeyBinding] = None,
    ):
        self.prompt = prompt
        self.buffer = TextBuffer(multiline=multiline)
        self.validator = validator or always_valid
        if submit is None:
            submit = keymap.submit if multiline else keymap.enter
        self.submit_binding = submit
        self.finished = False
        self.validation = self.validate()

    @property
    def value(self) -> str:
        return self.buffer.value

    def set_value(self, value: str) -> None:
        self.buffer.set_value(value)
        self.validation = self.validate()

    def validate(self) -> FieldValidationResult:
        return self.validator(self.buffer.value)

    def can_submit(self) -> bool:
        return self.validation.valid

    def is_finished(self) -> bool:
        return self.finished

    def handle_event(self, event: KeyEvent) -> None:
        if self.finished:
            return
        if self.submit_binding.matches(event):
            if self.can_submit():
                self.finished = True
            return
        self.buffer.handle_event(event)
        self.validation = self.validate()

    def render(self) -> str:
        text = self.buffer.render(show_cursor=not self.finished)
        if self.buffer.multiline:
            view = self.prompt + PROMPT_SEPARATOR.rstrip() + "\n" + text
        else:
            view = self.prompt + PROMPT_SEPARATOR + text

        if self.finished:
            return view
        if self.validation.message:
            view += "\n" + ERROR_MARK + self.validation.message
        if self.can_submit():
            view += f"\nPress {self.submit_binding.help_key} to continue"
        return view
