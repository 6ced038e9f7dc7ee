"""Tests for gitcz.stages module."""

import pytest

from gitcz.stages import Stage, next_stage, stage_sequence


class TestNextStage:
    """Tests for next_stage function."""

    def test_full_sequence_without_skips(self):
        """Test every question is asked when nothing is skipped."""
        assert stage_sequence([], ticket_enabled=True) == [
            Stage.TYPE_SELECT,
            Stage.SCOPE,
            Stage.TICKET_NUMBER,
            Stage.SUBJECT,
            Stage.BODY,
            Stage.BREAKING,
            Stage.FOOTER,
            Stage.CONFIRM,
        ]

    def test_skip_body_and_footer(self):
        """Test skipped questions fall through to the next stage."""
        assert stage_sequence({"body", "footer"}, ticket_enabled=False) == [
            Stage.TYPE_SELECT,
            Stage.SCOPE,
            Stage.SUBJECT,
            Stage.BREAKING,
            Stage.CONFIRM,
        ]

    def test_skip_everything_optional(self):
        """Test the shortest possible dialogue."""
        skip = ["scope", "body", "breaking", "footer"]
        assert stage_sequence(skip, ticket_enabled=False) == [
            Stage.TYPE_SELECT,
            Stage.SUBJECT,
            Stage.CONFIRM,
        ]

    def test_skipped_scope_still_asks_ticket(self):
        """Test skipping scope does not skip the ticket number."""
        assert next_stage(Stage.TYPE_SELECT, ["scope"], ticket_enabled=True) == Stage.TICKET_NUMBER

    def test_ticket_goes_to_subject(self):
        """Test the ticket number is always followed by the subject."""
        assert next_stage(Stage.TICKET_NUMBER, ["scope", "body"], True) == Stage.SUBJECT

    @pytest.mark.parametrize("stage", list(Stage))
    def test_always_reaches_confirm(self, stage):
        """Test every stage eventually leads to CONFIRM."""
        current = stage
        for _ in range(len(Stage)):
            current = next_stage(current, [], True)
        assert current == Stage.CONFIRM

    def test_confirm_is_terminal(self):
        """Test CONFIRM maps to itself."""
        assert next_stage(Stage.CONFIRM, [], True) == Stage.CONFIRM
