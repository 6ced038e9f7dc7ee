"""Tests for gitcz.components.breaking module."""

import pytest

from conftest import press, type_text
from gitcz.components import BreakingChanges, BreakingPhase, QuitRequested


class TestBreakingChanges:
    """Tests for the breaking-change question."""

    def test_starts_in_confirm_phase(self):
        """Test the yes/no question comes first."""
        breaking = BreakingChanges()
        assert breaking.phase == BreakingPhase.CONFIRM
        assert not breaking.is_finished()

    def test_no_finishes_immediately(self):
        """Test answering no skips the description."""
        breaking = BreakingChanges()
        press(breaking, "n")
        assert breaking.is_finished()
        assert not breaking.has_breaking_changes()
        assert breaking.value == ""

    def test_accepting_default_no_finishes(self):
        """Test enter on the default answer finishes without breaking changes."""
        breaking = BreakingChanges()
        press(breaking, "enter")
        assert breaking.is_finished()
        assert not breaking.has_breaking_changes()

    def test_yes_then_description(self):
        """Test answering yes asks for a description."""
        breaking = BreakingChanges()
        press(breaking, "y")
        assert breaking.phase == BreakingPhase.INPUT
        assert breaking.has_breaking_changes()

        type_text(breaking, "removes Y")
        press(breaking, "enter")
        assert breaking.phase == BreakingPhase.INPUT

        press(breaking, "alt+enter")
        assert breaking.is_finished()
        assert breaking.value == "removes Y"

    def test_toggle_then_accept(self):
        """Test toggling to yes and accepting opens the description."""
        breaking = BreakingChanges()
        press(breaking, "tab", "enter")
        assert breaking.phase == BreakingPhase.INPUT

    def test_quit_in_confirm_phase(self):
        """Test quit keys of the yes/no question end the session."""
        breaking = BreakingChanges()
        with pytest.raises(QuitRequested):
            press(breaking, "q")

    def test_letters_typed_in_input_phase(self):
        """Test 'y' and 'n' are ordinary text once describing the change."""
        breaking = BreakingChanges()
        press(breaking, "y")
        type_text(breaking, "yn")
        press(breaking, "ctrl+enter")
        assert breaking.value == "yn"

    def test_render_shows_description_after_yes(self):
        """Test the description input is rendered after answering yes."""
        breaking = BreakingChanges(confirm_prompt="Breaking?", message_prompt="Describe")
        assert "Describe" not in breaking.render()
        press(breaking, "y")
        assert "Describe: " in breaking.render()
