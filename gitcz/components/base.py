"""Shared building blocks for interactive components.

Contains:
- Component: Protocol every stage component implements
- FieldValidationResult: Outcome of validating a text field
- TextBuffer: Editable text with a cursor, single- or multi-line
"""

from dataclasses import dataclass
from typing import Protocol

from gitcz.keys import KeyEvent

CURSOR_CHAR = "█"


class Component(Protocol):
    """A stage of the dialogue driven by key events."""

    def handle_event(self, event: KeyEvent) -> None: ...

    def is_finished(self) -> bool: ...

    def render(self) -> str: ...


@dataclass(frozen=True)
class FieldValidationResult:
    """Result of validating a text field's current content."""

    valid: bool
    message: str = ""


VALID = FieldValidationResult(valid=True)


class TextBuffer:
    """Editable text with a cursor.

    In single-line mode the buffer never contains a line break; in
    multi-line mode "enter" inserts one.
    """

    def __init__(self, multiline: bool = False):
        self.multiline = multiline
        self._value = ""
        self._pos = 0

    @property
    def value(self) -> str:
        return self._value

    @property
    def position(self) -> int:
        return self._pos

    def set_value(self, value: str) -> None:
        if not self.multiline:
            value = value.replace("\n", " ")
        self._value = value
        self._pos = len(value)

    def insert(self, text: str) -> None:
        if not self.multiline:
            text = text.replace("\n", " ")
        self._value = self._value[: self._pos] + text + self._value[self._pos :]
        self._pos += len(text)

    def handle_event(self, event: KeyEvent) -> bool:
        """Apply an editing key to the buffer.

        Returns:
            True if the event changed or moved within the buffer.
        """
        if event.is_printable:
            self.insert(event.text)
        elif event.key == "enter" and self.multiline:
            self.insert("\n")
        elif event.key == "backspace":
            if self._pos == 0:
                return False
            self._value = self._value[: self._pos - 1] + self._value[self._pos :]
            self._pos -= 1
        elif event.key == "delete":
            if self._pos == len(self._value):
                return False
            self._value = self._value[: self._pos] + self._value[self._pos + 1 :]
        elif event.key == "left":
            self._pos = max(0, self._pos - 1)
        elif event.key == "right":
            self._pos = min(len(self._value), self._pos + 1)
        elif event.key == "home":
            self._pos = self._value.rfind("\n", 0, self._pos) + 1
        elif event.key == "end":
            end = self._value.find("\n", self._pos)
            self._pos = len(self._value) if end == -1 else end
        else:
            return False
        return True

    def render(self, show_cursor: bool = True) -> str:
        if not show_cursor:
            return self._value
        return self._value[: self._pos] + CURSOR_CHAR + self._value[self._pos :]
