"""CLI entry point for gitcz.

This module provides the main CLI application that combines all commands
into a single unified interface.
"""

import typer

from gitcz.cli.init import init_config
from gitcz.cli.list_types import types_command
from gitcz.cli.main import main_command

# Main application
app = typer.Typer(
    name="git-cz",
    help="git-cz: Conventional Commits message builder",
    add_completion=False,
)

app.command("init")(init_config)
app.command("types")(types_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "init_config",
    "types_command",
    "main_command",
]
