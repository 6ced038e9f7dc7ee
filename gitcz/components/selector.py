"""Windowed single-choice list selector.

Only `display_size` items are shown at a time. Moving the cursor past the
middle of the visible window scrolls it by one item. In cyclic mode the
cursor wraps around both ends and the visible window may straddle the end
of the list, in which case the tail of the list is shown before its head.
"""

from typing import Any, Optional, Sequence

from gitcz.components.exceptions import InvalidConfigurationError, QuitRequested
from gitcz.keys import DEFAULT_SELECTOR_KEYMAP, KeyEvent, SelectorKeyMap

DEFAULT_PROMPT = "Select"
CURSOR_MARK = "> "
ITEM_PADDING = "  "


class Selector:
    """Pick one item from a list through a scrolling window.

    Args:
        items: Items to choose from; each is labelled with ``str(item)``.
        display_size: Number of items visible at once.
        prompt: Question shown above the list.
        cyclic: Wrap the cursor around the ends of the list.
        show_selected: Keep showing the chosen item once selected.
        keymap: Key bindings.

    Raises:
        InvalidConfigurationError: If display_size is not positive.
    """

    def __init__(
        self,
        items: Sequence[Any],
        display_size: int,
        prompt: str = DEFAULT_PROMPT,
        cyclic: bool = False,
        show_selected: bool = False,
        keymap: SelectorKeyMap = DEFAULT_SELECTOR_KEYMAP,
    ):
        if display_size < 1:
            raise InvalidConfigurationError("invalid display size, must be positive integer")

        self.items = list(items)
        self.display_size = display_size
        self.prompt = prompt
        self.cyclic = cyclic
        self.show_selected = show_selected
        self.keymap = keymap

        self.cursor = 0
        self.selected = False
        # A window as large as the list covers everything and never moves
        self._size = min(display_size, len(self.items))
        self.window = (0, self._size)

    @property
    def _fixed(self) -> bool:
        return self._size >= len(self.items)

    def _middle(self) -> int:
        return (self.window[0] + self._size // 2) % len(self.items)

    def _shift(self, step: int) -> None:
        start, end = self.window
        if self.cyclic:
            n = len(self.items)
            self.window = ((start + step) % n, (end + step) % n)
        else:
            self.window = (start + step, end + step)

    def move_down(self) -> None:
        if self.selected or not self.items:
            return
        n = len(self.items)
        if self.cyclic:
            self.cursor = (self.cursor + 1) % n
            # Compare window-relative offsets so the test survives wrap-around
            if not self._fixed and (self.cursor - self.window[0]) % n >= self._size // 2:
                self._shift(1)
        else:
            if not self._fixed and self.window[1] != n and self.cursor >= self._middle():
                self._shift(1)
            if self.cursor != n - 1:
                self.cursor += 1

    def move_up(self) -> None:
        if self.selected or not self.items:
            return
        n = len(self.items)
        if self.cyclic:
            self.cursor = (self.cursor - 1) % n
            if not self._fixed:
                self._shift(-1)
        else:
            if not self._fixed and self.window[0] != 0 and self.cursor <= self._middle():
                self._shift(-1)
            if self.cursor != 0:
                self.cursor -= 1

    def select(self) -> None:
        if self.items:
            self.selected = True

    def is_selected(self) -> bool:
        return self.selected

    is_finished = is_selected

    def selected_item(self) -> Optional[Any]:
        if self.selected:
            return self.items[self.cursor]
        return None

    def visible_indices(self) -> list[int]:
        """Indices of the items inside the display window, in display order."""
        if self._fixed:
            return list(range(len(self.items)))
        start, end = self.window
        if start >= end:
            return list(range(start, len(self.items))) + list(range(end))
        return list(range(start, end))

    def handle_event(self, event: KeyEvent) -> None:
        km = self.keymap
        if km.quit.matches(event):
            raise QuitRequested()
        if km.up.matches(event):
            self.move_up()
        elif km.down.matches(event):
            self.move_down()
        elif km.select.matches(event):
            self.select()

    def render(self) -> str:
        question = self.prompt + "> "
        if self.selected:
            if not self.show_selected:
                return ""
            return question + str(self.items[self.cursor])

        lines = []
        for index in self.visible_indices():
            label = str(self.items[index])
            if index == self.cursor:
                lines.append(CURSOR_MARK + label)
            else:
                lines.append(ITEM_PADDING + label)
        return question + "\n" + "\n".join(lines)
