"""Stages of the commit dialogue and the order they run in.

Contains:
- Stage: The questions asked, in dialogue order
- next_stage: Pure transition function honouring skipped questions
- stage_sequence: Every stage visited from TYPE_SELECT to CONFIRM
"""

from enum import Enum
from typing import Collection


class Stage(Enum):
    """Dialogue stages; values double as skip_questions entries."""

    TYPE_SELECT = "type_select"
    SCOPE = "scope"
    TICKET_NUMBER = "ticket_number"
    SUBJECT = "subject"
    BODY = "body"
    BREAKING = "breaking"
    FOOTER = "footer"
    CONFIRM = "confirm"


def next_stage(stage: Stage, skip_questions: Collection[str], ticket_enabled: bool) -> Stage:
    """Return the stage that follows `stage`.

    A skipped question falls through to the stage after it. CONFIRM is
    terminal and maps to itself.

    Args:
        stage: The stage just completed.
        skip_questions: Stage names the user opted out of.
        ticket_enabled: Whether the ticket number question is asked.

    Returns:
        The next stage to enter.
    """
    if stage == Stage.TYPE_SELECT:
        if Stage.SCOPE.value not in skip_questions:
            return Stage.SCOPE
        stage = Stage.SCOPE
    if stage == Stage.SCOPE:
        if ticket_enabled:
            return Stage.TICKET_NUMBER
        stage = Stage.TICKET_NUMBER
    if stage == Stage.TICKET_NUMBER:
        return Stage.SUBJECT
    if stage == Stage.SUBJECT:
        if Stage.BODY.value not in skip_questions:
            return Stage.BODY
        stage = Stage.BODY
    if stage == Stage.BODY:
        if Stage.BREAKING.value not in skip_questions:
            return Stage.BREAKING
        stage = Stage.BREAKING
    if stage == Stage.BREAKING:
        if Stage.FOOTER.value not in skip_questions:
            return Stage.FOOTER
    return Stage.CONFIRM


def stage_sequence(skip_questions: Collection[str], ticket_enabled: bool) -> list[Stage]:
    """List the stages visited from TYPE_SELECT through CONFIRM."""
    stages = [Stage.TYPE_SELECT]
    while stages[-1] != Stage.CONFIRM:
        stages.append(next_stage(stages[-1], skip_questions, ticket_enabled))
    return stages
