"""The commit dialogue: runs each stage in turn and assembles the message.

The session owns the CommitData accumulator. Each stage's component is
created when the stage is entered; when the component reports itself
finished its value is copied into CommitData and the next stage, as given
by `next_stage`, is entered. At CONFIRM an accepted message is committed
through the repository collaborator.
"""

from enum import Enum
from typing import Optional

from gitcz.components import (
    BreakingChanges,
    Component,
    Confirm,
    FooterField,
    QuitRequested,
    Selector,
    TextField,
    TicketNumberField,
)
from gitcz.components.breaking import (
    DEFAULT_BREAKING_CONFIRM_PROMPT,
    DEFAULT_BREAKING_MESSAGE_PROMPT,
)
from gitcz.components.footer import DEFAULT_FOOTER_PROMPT
from gitcz.components.ticket_number import DEFAULT_TICKET_PROMPT
from gitcz.config.models import GitczConfig
from gitcz.git.repository import Repository
from gitcz.keys import (
    DEFAULT_CONFIRM_KEYMAP,
    DEFAULT_SELECTOR_KEYMAP,
    DEFAULT_SESSION_KEYMAP,
    ConfirmKeyMap,
    KeyEvent,
    SelectorKeyMap,
    SessionKeyMap,
)
from gitcz.message import CommitData, generate_commit_message
from gitcz.stages import Stage, next_stage

DEFAULT_TYPE_PROMPT = "Select the type of change that you're committing"
DEFAULT_SCOPE_PROMPT = "Enter scope (optional)"
DEFAULT_SUBJECT_PROMPT = "Enter commit subject"
DEFAULT_BODY_PROMPT = "Enter commit body (optional)"
DEFAULT_CONFIRM_PROMPT = "Commit this message?"

ICON_QUESTION = "? "
ICON_ENTERED = "✓ "
PREVIEW_INDENT = "  │ "


class SessionResult(Enum):
    """How a session ended."""

    PENDING = "pending"
    COMMITTED = "committed"
    DECLINED = "declined"
    QUIT = "quit"


def render_preview(message: str) -> str:
    return "\n".join(PREVIEW_INDENT + line for line in message.split("\n"))


class CommitSession:
    """Drives the commit dialogue one key event at a time.

    Args:
        config: Validated configuration.
        repository: Branch lookup and commit collaborator.
        keymap: Session-wide bindings (quit, enter, submit).
        selector_keymap: Bindings for the type list.
        confirm_keymap: Bindings for yes/no questions.

    Raises:
        InvalidConfigurationError: If the type list cannot be built.
    """

    def __init__(
        self,
        config: GitczConfig,
        repository: Repository,
        keymap: SessionKeyMap = DEFAULT_SESSION_KEYMAP,
        selector_keymap: SelectorKeyMap = DEFAULT_SELECTOR_KEYMAP,
        confirm_keymap: ConfirmKeyMap = DEFAULT_CONFIRM_KEYMAP,
    ):
        self.config = config
        self.repository = repository
        self.keymap = keymap
        self.selector_keymap = selector_keymap
        self.confirm_keymap = confirm_keymap

        self.data = CommitData()
        self.result = SessionResult.PENDING
        self.message: Optional[str] = None

        self.stage = Stage.TYPE_SELECT
        self._completed: list[tuple[Stage, Component]] = []
        self._active: Component = self._build_component(self.stage)

    @property
    def finished(self) -> bool:
        return self.result != SessionResult.PENDING

    @property
    def active_component(self) -> Component:
        return self._active

    @property
    def visited_stages(self) -> list[Stage]:
        return [stage for stage, _ in self._completed] + [self.stage]

    def _prompt(self, override: str, default: str) -> str:
        return override or default

    def _build_component(self, stage: Stage) -> Component:
        messages = self.config.messages
        if stage == Stage.TYPE_SELECT:
            return Selector(
                self.config.types,
                self.config.type_display_size,
                prompt=self._prompt(messages.type, DEFAULT_TYPE_PROMPT),
                cyclic=True,
                show_selected=True,
                keymap=self.selector_keymap,
            )
        if stage == Stage.SCOPE:
            return TextField(self._prompt(messages.scope, DEFAULT_SCOPE_PROMPT), keymap=self.keymap)
        if stage == Stage.TICKET_NUMBER:
            return TicketNumberField(
                self.config.ticket_number,
                self.repository,
                prompt=self._prompt(messages.ticket_number, DEFAULT_TICKET_PROMPT),
                keymap=self.keymap,
            )
        if stage == Stage.SUBJECT:
            return TextField(self._prompt(messages.subject, DEFAULT_SUBJECT_PROMPT), keymap=self.keymap)
        if stage == Stage.BODY:
            return TextField(
                self._prompt(messages.body, DEFAULT_BODY_PROMPT),
                multiline=True,
                keymap=self.keymap,
            )
        if stage == Stage.BREAKING:
            return BreakingChanges(
                confirm_prompt=self._prompt(messages.breaking_confirm, DEFAULT_BREAKING_CONFIRM_PROMPT),
                message_prompt=self._prompt(messages.breaking_message, DEFAULT_BREAKING_MESSAGE_PROMPT),
                keymap=self.keymap,
                confirm_keymap=self.confirm_keymap,
            )
        if stage == Stage.FOOTER:
            return FooterField(self._prompt(messages.footer, DEFAULT_FOOTER_PROMPT), keymap=self.keymap)

        # CONFIRM: the commit data is final here, so the preview is fixed
        self.message = generate_commit_message(self.data)
        prompt = self._prompt(messages.confirm_commit, DEFAULT_CONFIRM_PROMPT)
        return Confirm(
            prompt=prompt + "\n" + render_preview(self.message),
            keymap=self.confirm_keymap,
        )

    def _store(self, stage: Stage, component) -> None:
        if stage == Stage.TYPE_SELECT:
            self.data.type = component.selected_item().value
        elif stage == Stage.SCOPE:
            self.data.scope = component.value
        elif stage == Stage.TICKET_NUMBER:
            self.data.ticket_number = component.value
        elif stage == Stage.SUBJECT:
            self.data.subject = component.value
        elif stage == Stage.BODY:
            self.data.body = component.value
        elif stage == Stage.BREAKING:
            self.data.breaking_changes = component.value
            self.data.is_breaking = component.has_breaking_changes()
        elif stage == Stage.FOOTER:
            self.data.footer = component.value

    def handle_event(self, event: KeyEvent) -> None:
        """Process one key event.

        Raises:
            QuitRequested: If a quit key was pressed. Nothing is committed.
            GitError: If the accepted commit fails.
        """
        if self.finished:
            return
        if self.keymap.quit.matches(event):
            raise QuitRequested()

        self._active.handle_event(event)
        if not self._active.is_finished():
            return

        if self.stage == Stage.CONFIRM:
            if self._active.value:
                self.repository.commit(self.message)
                self.result = SessionResult.COMMITTED
            else:
                self.result = SessionResult.DECLINED
            return

        self._store(self.stage, self._active)
        self._completed.append((self.stage, self._active))
        self.stage = next_stage(
            self.stage,
            self.config.skip_questions,
            self.config.ticket_number.enable,
        )
        self._active = self._build_component(self.stage)

    def render(self) -> str:
        """Render completed stages followed by the active one."""
        sections = [ICON_ENTERED + component.render() for _, component in self._completed]
        sections.append(ICON_QUESTION + self._active.render())
        return "\n".join(sections) + "\n"
