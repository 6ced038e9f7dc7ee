"""Creating commits."""

from pathlib import Path
from typing import Optional

from gitcz.git.runner import _run_git_command


def commit(message: str, cwd: Optional[Path] = None) -> str:
    """Commit the staged changes with the given message.

    The message is passed on stdin and committed verbatim, so git does not
    strip or re-wrap it.

    Args:
        message: Full commit message.
        cwd: Directory inside the repository.

    Returns:
        The output of `git commit`.

    Raises:
        GitError: If the commit fails (e.g., nothing staged).
    """
    return _run_git_command(
        ["commit", "--cleanup=verbatim", "-F", "-"],
        cwd=cwd,
        input_text=message,
    )
