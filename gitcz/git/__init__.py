"""Git access for gitcz.

This package provides:
- exceptions: GitError
- runner: _run_git_command, get_repo_root
- branch: get_current_branch
- commit: commit
- repository: Repository, GitRepository
"""

from gitcz.git.exceptions import GitError
from gitcz.git.runner import _run_git_command, get_repo_root
from gitcz.git.branch import get_current_branch
from gitcz.git.commit import commit
from gitcz.git.repository import GitRepository, Repository


__all__ = [
    "GitError",
    "_run_git_command",
    "get_repo_root",
    "get_current_branch",
    "commit",
    "GitRepository",
    "Repository",
]
