"""Repository access used by the commit session.

Contains:
- Repository: The two operations the session needs from version control
- GitRepository: Repository backed by the git command line
"""

from pathlib import Path
from typing import Optional, Protocol

from gitcz.git.branch import get_current_branch
from gitcz.git.commit import commit


class Repository(Protocol):
    def get_current_branch(self) -> str: ...

    def commit(self, message: str) -> None: ...


class GitRepository:
    """Repository backed by the `git` executable.

    Args:
        path: Directory inside the working tree (defaults to the current one).
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = path

    def get_current_branch(self) -> str:
        return get_current_branch(cwd=self.path)

    def commit(self, message: str) -> None:
        commit(message, cwd=self.path)
