"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from typing import Optional

import pytest

from gitcz.config import GitczConfig
from gitcz.git import GitError
from gitcz.keys import KeyEvent


class FakeRepository:
    """In-memory repository recording commits."""

    def __init__(self, branch: Optional[str] = "main", commit_error: Optional[str] = None):
        self.branch = branch
        self.commit_error = commit_error
        self.commits: list[str] = []
        self.branch_calls = 0

    def get_current_branch(self) -> str:
        self.branch_calls += 1
        if self.branch is None:
            raise GitError("HEAD is not pointing to a branch")
        return self.branch

    def commit(self, message: str) -> None:
        if self.commit_error:
            raise GitError(self.commit_error)
        self.commits.append(message)


def press(component, *keys: str) -> None:
    """Send named key events to a component."""
    for key in keys:
        component.handle_event(KeyEvent(key))


def type_text(component, text: str) -> None:
    """Send one event per character; newlines are sent as "enter"."""
    for char in text:
        if char == "\n":
            component.handle_event(KeyEvent("enter"))
        else:
            component.handle_event(KeyEvent.rune(char))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def fake_repo():
    """Repository on branch 'main' that records commits."""
    return FakeRepository()


@pytest.fixture
def default_config():
    """Configuration with built-in defaults."""
    return GitczConfig()


@pytest.fixture
def sample_config_dict():
    """Configuration dictionary as it would come from YAML."""
    return {
        "types": [
            {"value": "feat", "name": "feat: A new feature"},
            {"value": "fix", "name": "fix: A bug fix"},
            {"value": "docs", "name": "docs: Documentation only changes"},
        ],
        "messages": {"subject": "What changed?"},
        "skip_questions": ["body"],
        "ticket_number": {
            "enable": True,
            "required": True,
            "prefix": "#",
            "match_pattern": r"\d+",
            "from_branch_name": {
                "enable": True,
                "extract_regexp": r"^.+?/(?P<ticket_number>\d+)([-_]\w+)*$",
            },
        },
    }
