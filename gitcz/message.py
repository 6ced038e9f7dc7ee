"""Commit data collected by the dialogue and message assembly.

Format:
    <type>(<scope>)!: <ticket> <subject>

    <body>

    BREAKING CHANGE: <description>
    <footer>
"""

from dataclasses import dataclass

BREAKING_CHANGE_TOKEN = "BREAKING CHANGE"


@dataclass
class CommitData:
    """Values collected from the user, one field per completed stage."""

    type: str = ""
    scope: str = ""
    ticket_number: str = ""
    subject: str = ""
    body: str = ""
    breaking_changes: str = ""
    footer: str = ""
    is_breaking: bool = False


def render_header(data: CommitData) -> str:
    header = data.type
    if data.scope:
        header += f"({data.scope})"
    if data.is_breaking:
        header += "!"
    header += ":"
    if data.ticket_number:
        header += " " + data.ticket_number
    return header + " " + data.subject


def generate_commit_message(data: CommitData) -> str:
    """Render collected commit data as a Conventional Commits message.

    Args:
        data: The collected commit data.

    Returns:
        The commit message, without a trailing newline.

    Example output:
        feat(api)!: add X

        BREAKING CHANGE: removes Y
        Closes: #1
    """
    parts = [render_header(data)]

    if data.body:
        parts.extend(["", data.body])

    has_footer = False
    if data.breaking_changes:
        parts.append("")
        parts.append(f"{BREAKING_CHANGE_TOKEN}: {data.breaking_changes}")
        has_footer = True

    if data.footer:
        if not has_footer:
            parts.append("")
        parts.append(data.footer)

    return "\n".join(parts)
