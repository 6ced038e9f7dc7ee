"""Key events and key bindings.

Contains:
- KeyEvent: A decoded key press handed to components
- KeyBinding: A logical action bound to one or more trigger keys
- SelectorKeyMap, ConfirmKeyMap, SessionKeyMap: Immutable binding tables
- DEFAULT_*_KEYMAP: Default binding tables

Key names follow the terminal adapter's naming: "up", "down", "left",
"right", "tab", "shift+tab", "enter", "esc", "ctrl+c", "alt+enter",
"ctrl+enter", "backspace", "delete", "home", "end" and "space". A printable
character is reported with the character itself as its key name.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyEvent:
    """A single decoded key press.

    Attributes:
        key: Key name ("enter", "up", "a", ...).
        text: Text the key inserts into a buffer ("" for control keys).
    """

    key: str
    text: str = ""

    @classmethod
    def rune(cls, char: str) -> "KeyEvent":
        """Build the event for a printable character."""
        if char == " ":
            return cls("space", " ")
        return cls(char, char)

    @property
    def is_printable(self) -> bool:
        return bool(self.text)


@dataclass(frozen=True)
class KeyBinding:
    """A logical action and the keys that trigger it."""

    keys: tuple[str, ...]
    help_key: str = ""
    help_text: str = ""

    def matches(self, event: KeyEvent) -> bool:
        return event.key in self.keys


@dataclass(frozen=True)
class SelectorKeyMap:
    up: KeyBinding
    down: KeyBinding
    select: KeyBinding
    quit: KeyBinding


@dataclass(frozen=True)
class ConfirmKeyMap:
    toggle: KeyBinding
    affirmative: KeyBinding
    negative: KeyBinding
    select: KeyBinding
    quit: KeyBinding


@dataclass(frozen=True)
class SessionKeyMap:
    """Bindings used by the session and its text fields."""

    quit: KeyBinding
    enter: KeyBinding
    submit: KeyBinding


DEFAULT_SELECTOR_KEYMAP = SelectorKeyMap(
    up=KeyBinding(("k", "up"), "↑/k", "move up"),
    down=KeyBinding(("j", "down"), "↓/j", "move down"),
    select=KeyBinding(("enter", "space"), "enter/space", "select item"),
    quit=KeyBinding(("ctrl+c", "esc"), "Ctrl+C/Esc", "quit"),
)

DEFAULT_CONFIRM_KEYMAP = ConfirmKeyMap(
    toggle=KeyBinding(
        ("tab", "l", "right", "shift+tab", "h", "left"), "←/→", "toggle selection"
    ),
    affirmative=KeyBinding(("y",), "y", "affirmative selection"),
    negative=KeyBinding(("n",), "n", "negative selection"),
    select=KeyBinding(("enter", "space"), "enter/space", "confirm selection"),
    quit=KeyBinding(("ctrl+c", "q", "esc"), "ctrl+c/q/esc", "quit"),
)

DEFAULT_SESSION_KEYMAP = SessionKeyMap(
    quit=KeyBinding(("ctrl+c",), "Ctrl+C", "quit"),
    enter=KeyBinding(("enter",), "Enter", "confirm"),
    submit=KeyBinding(("alt+enter", "ctrl+enter"), "Alt+Enter/Ctrl+Enter", "submit changes"),
)
