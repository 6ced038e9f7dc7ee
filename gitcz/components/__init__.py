"""Interactive components for the commit dialogue.

This package provides:
- exceptions: QuitRequested, InvalidConfigurationError
- base: Component, FieldValidationResult, TextBuffer
- selector: Selector
- confirm: Confirm
- text_field: TextField, always_valid
- ticket_number: TicketNumberField, extract_ticket_from_branch, validate_ticket_number
- breaking: BreakingChanges, BreakingPhase
- footer: FooterField, validate_footer
"""

from gitcz.components.exceptions import (
    InvalidConfigurationError,
    QuitRequested,
)
from gitcz.components.base import (
    Component,
    FieldValidationResult,
    TextBuffer,
)
from gitcz.components.selector import Selector
from gitcz.components.confirm import Confirm
from gitcz.components.text_field import TextField, always_valid
from gitcz.components.ticket_number import (
    TicketNumberField,
    extract_ticket_from_branch,
    validate_ticket_number,
)
from gitcz.components.breaking import BreakingChanges, BreakingPhase
from gitcz.components.footer import FooterField, validate_footer


__all__ = [
    "InvalidConfigurationError",
    "QuitRequested",
    "Component",
    "FieldValidationResult",
    "TextBuffer",
    "Selector",
    "Confirm",
    "TextField",
    "always_valid",
    "TicketNumberField",
    "extract_ticket_from_branch",
    "validate_ticket_number",
    "BreakingChanges",
    "BreakingPhase",
    "FooterField",
    "validate_footer",
]
