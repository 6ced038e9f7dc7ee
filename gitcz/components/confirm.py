"""Yes/No chooser with explicit confirmation."""

from gitcz.components.exceptions import QuitRequested
from gitcz.keys import DEFAULT_CONFIRM_KEYMAP, ConfirmKeyMap, KeyEvent

DEFAULT_PROMPT = "Confirm"
YES_LABEL = "Yes"
NO_LABEL = "No"


class Confirm:
    """Two-option toggle.

    ``value`` is the highlighted option and ``confirmed`` records that the
    user accepted it. Once confirmed, the chooser stays confirmed.
    """

    def __init__(
        self,
        prompt: str = DEFAULT_PROMPT,
        default: bool = False,
        keymap: ConfirmKeyMap = DEFAULT_CONFIRM_KEYMAP,
    ):
        self.prompt = prompt
        self.value = default
        self.confirmed = False
        self.keymap = keymap

    def is_confirmed(self) -> bool:
        return self.confirmed

    is_finished = is_confirmed

    def handle_event(self, event: KeyEvent) -> None:
        km = self.keymap
        if km.quit.matches(event):
            raise QuitRequested()
        if self.confirmed:
            return
        if km.toggle.matches(event):
            self.value = not self.value
        elif km.affirmative.matches(event):
            self.value = True
            self.confirmed = True
        elif km.negative.matches(event):
            self.value = False
            self.confirmed = True
        elif km.select.matches(event):
            self.confirmed = True

    def render(self) -> str:
        if self.value:
            options = f"[{YES_LABEL}]  {NO_LABEL} "
        else:
            options = f" {YES_LABEL}  [{NO_LABEL}]"
        return self.prompt + "\n" + options
