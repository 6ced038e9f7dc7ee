"""Git branch utilities."""

from pathlib import Path
from typing import Optional

from gitcz.git.exceptions import GitError
from gitcz.git.runner import _run_git_command


def get_current_branch(cwd: Optional[Path] = None) -> str:
    """Get the current branch name.

    Returns:
        The short name of the checked-out branch.

    Raises:
        GitError: If HEAD does not point to a branch.
    """
    branch = _run_git_command(["branch", "--show-current"], cwd=cwd)
    if not branch or branch == "HEAD":
        raise GitError("HEAD is not pointing to a branch")
    return branch
