"""Ticket number input, optionally pre-filled from the current branch name."""

from typing import Optional

from gitcz.components.base import VALID, FieldValidationResult
from gitcz.components.text_field import TextField
from gitcz.config.models import TicketNumberConfig
from gitcz.git.exceptions import GitError
from gitcz.git.repository import Repository
from gitcz.keys import DEFAULT_SESSION_KEYMAP, SessionKeyMap

DEFAULT_TICKET_PROMPT = "Enter ticket number"
TICKET_GROUP = "ticket_number"

REQUIRED_MESSAGE = "Ticket number is required"
INVALID_FORMAT_MESSAGE = "Invalid ticket number format"


def extract_ticket_from_branch(branch: str, config: TicketNumberConfig) -> Optional[str]:
    """Extract a ticket number from a branch name.

    The extraction pattern must define a named group ``ticket_number``.

    Args:
        branch: The branch name.
        config: Ticket number settings.

    Returns:
        The captured ticket number, or None if nothing was captured.
    """
    pattern = config.from_branch_name.extract_regexp
    if not config.from_branch_name.enable or pattern is None:
        return None
    if TICKET_GROUP not in pattern.groupindex:
        return None

    match = pattern.search(branch)
    if match is None:
        return None
    return match.group(TICKET_GROUP)


def validate_ticket_number(value: str, config: TicketNumberConfig) -> FieldValidationResult:
    """Validate a ticket number against the configured rules.

    A configured match pattern must match the whole trimmed value whenever
    one is given. Without a pattern, a required ticket number only needs
    to be non-empty.
    """
    value = value.strip()
    pattern = config.match_pattern

    if not value:
        if config.required:
            return FieldValidationResult(valid=False, message=REQUIRED_MESSAGE)
        return VALID

    if pattern is not None and pattern.fullmatch(value) is None:
        return FieldValidationResult(valid=False, message=INVALID_FORMAT_MESSAGE)
    return VALID


class TicketNumberField(TextField):
    """Single-line ticket number input.

    Args:
        config: Ticket number settings.
        repository: Source of the current branch name for pre-filling.
        prompt: Question shown before the input.
        keymap: Session key bindings.
    """

    def __init__(
        self,
        config: TicketNumberConfig,
        repository: Repository,
        prompt: str = DEFAULT_TICKET_PROMPT,
        keymap: SessionKeyMap = DEFAULT_SESSION_KEYMAP,
    ):
        self.config = config
        super().__init__(
            prompt,
            validator=lambda value: validate_ticket_number(value, config),
            keymap=keymap,
        )

        prefill = self._prefill_from_branch(repository)
        if prefill:
            self.set_value(prefill)

    def _prefill_from_branch(self, repository: Repository) -> Optional[str]:
        branch_config = self.config.from_branch_name
        if not branch_config.enable or branch_config.extract_regexp is None:
            return None
        try:
            branch = repository.get_current_branch()
        except (GitError, OSError):
            # Pre-filling is a convenience; a missing branch just means no default
            return None
        return extract_ticket_from_branch(branch, self.config)

    @property
    def value(self) -> str:
        """Trimmed ticket number with the configured prefix, or ""."""
        value = self.buffer.value.strip()
        if value and self.config.prefix:
            return self.config.prefix + value
        return value
