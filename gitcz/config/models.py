"""Data models for gitcz configuration.

Contains:
- TypeValue: One entry of the commit type catalogue
- Messages: Prompt overrides for each question
- FromBranchName: Settings for reading the ticket number from the branch
- TicketNumberConfig: Ticket number question settings
- GitczConfig: Top-level configuration
"""

from re import Pattern
from typing import Optional

from pydantic import BaseModel, field_validator

from gitcz.config.constants import (
    ALLOWED_SKIP_QUESTIONS,
    DEFAULT_TYPE_DISPLAY_SIZE,
    DEFAULT_TYPES,
)


class TypeValue(BaseModel):
    """A commit type.

    Attributes:
        value: Text written into the commit header (e.g., "feat").
        name: Label shown in the type list.
    """

    value: str
    name: str

    def __str__(self) -> str:
        return self.name


class Messages(BaseModel):
    """Prompt overrides. Empty strings keep the built-in prompt."""

    type: str = ""
    scope: str = ""
    ticket_number: str = ""
    subject: str = ""
    body: str = ""
    breaking_confirm: str = ""
    breaking_message: str = ""
    footer: str = ""
    confirm_commit: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        """Treat null prompts as unset."""
        if v is None:
            return ""
        return v


class FromBranchName(BaseModel):
    enable: bool = False
    extract_regexp: Optional[Pattern] = None


class TicketNumberConfig(BaseModel):
    """Ticket number question settings.

    Attributes:
        enable: Ask for a ticket number at all.
        required: Reject an empty ticket number.
        prefix: Prepended to a non-empty ticket number (e.g., "#").
        match_pattern: Pattern a ticket number must fully match.
        from_branch_name: Pre-fill settings.
    """

    enable: bool = False
    required: bool = False
    prefix: str = ""
    match_pattern: Optional[Pattern] = None
    from_branch_name: FromBranchName = FromBranchName()

    @field_validator("from_branch_name", mode="before")
    @classmethod
    def ensure_from_branch_name(cls, v):
        if v is None:
            return FromBranchName()
        return v


class GitczConfig(BaseModel):
    """Top-level gitcz configuration."""

    types: list[TypeValue] = [TypeValue(**t) for t in DEFAULT_TYPES]
    messages: Messages = Messages()
    skip_questions: list[str] = []
    ticket_number: TicketNumberConfig = TicketNumberConfig()
    type_display_size: int = DEFAULT_TYPE_DISPLAY_SIZE

    @field_validator("types", mode="before")
    @classmethod
    def default_types(cls, v):
        """Fall back to the built-in catalogue when no types are given."""
        if v is None:
            return [dict(t) for t in DEFAULT_TYPES]
        return v

    @field_validator("types")
    @classmethod
    def types_must_not_be_empty(cls, v: list[TypeValue]) -> list[TypeValue]:
        if not v:
            raise ValueError("types cannot be empty")
        return v

    @field_validator("messages", "ticket_number", mode="before")
    @classmethod
    def none_to_defaults(cls, v):
        if v is None:
            return {}
        return v

    @field_validator("skip_questions", mode="before")
    @classmethod
    def ensure_skip_list(cls, v):
        if v is None:
            return []
        return v

    @field_validator("skip_questions")
    @classmethod
    def validate_skip_questions(cls, v: list[str]) -> list[str]:
        for question in v:
            if question not in ALLOWED_SKIP_QUESTIONS:
                raise ValueError(f"invalid skip question: {question}")
        return v

    @field_validator("type_display_size")
    @classmethod
    def display_size_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("invalid display size, must be positive integer")
        return v
