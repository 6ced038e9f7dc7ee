"""Footer input validated against the Conventional Commits trailer grammar."""

import re

from gitcz.components.base import VALID, FieldValidationResult
from gitcz.components.text_field import TextField
from gitcz.keys import DEFAULT_SESSION_KEYMAP, SessionKeyMap

DEFAULT_FOOTER_PROMPT = "Enter footer ('word: content' or 'word #content')"

# A single non-blank token followed by ": " or " #"
FOOTER_START_PATTERN = re.compile(r"^\S+(:\s|\s#)")

EMPTY_LINE_MESSAGE = "Footer cannot contain empty line"
START_FORMAT_MESSAGE = "Footer must start with 'word: ' or 'word # ' format"


def validate_footer(value: str) -> FieldValidationResult:
    """Validate footer text.

    The first line must open a trailer; every following line is taken as a
    continuation of it. Blank lines are rejected anywhere.

    Args:
        value: Raw footer text.

    Returns:
        FieldValidationResult for the text. Blank input is valid.
    """
    value = value.strip()
    if not value:
        return VALID

    is_continuation = False
    for line in value.split("\n"):
        if not line:
            return FieldValidationResult(valid=False, message=EMPTY_LINE_MESSAGE)
        if not is_continuation and not FOOTER_START_PATTERN.match(line):
            return FieldValidationResult(valid=False, message=START_FORMAT_MESSAGE)
        is_continuation = True
    return VALID


class FooterField(TextField):
    """Multi-line footer input; an empty footer may always be submitted."""

    def __init__(self, prompt: str = DEFAULT_FOOTER_PROMPT, keymap: SessionKeyMap = DEFAULT_SESSION_KEYMAP):
        super().__init__(prompt, multiline=True, validator=validate_footer, keymap=keymap)

    @property
    def value(self) -> str:
        return self.buffer.value.strip()

    def can_submit(self) -> bool:
        return self.validation.valid or not self.value
