"""Main CLI command: run the commit dialogue."""

from pathlib import Path
from typing import Optional

import typer

from gitcz import __version__
from gitcz.components import InvalidConfigurationError
from gitcz.config import ConfigError, resolve_config
from gitcz.git import GitError, GitRepository, get_repo_root
from gitcz.session import CommitSession, SessionResult
from gitcz.ui import run_session


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-cz {__version__}")
        raise typer.Exit(0)


def main_command(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file path (default: <repo>/.gitcz/config.yaml, else built-in defaults)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Compose a Conventional Commits message interactively and commit it."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    try:
        repo_root = get_repo_root()
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    try:
        cfg = resolve_config(repo_root, config)
        session = CommitSession(cfg, GitRepository(repo_root))
    except (ConfigError, InvalidConfigurationError) as e:
        typer.echo(f"Error loading config: {e}", err=True)
        raise typer.Exit(1)

    try:
        result = run_session(session)
    except GitError as e:
        typer.echo("Commit failed!", err=True)
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    if result == SessionResult.COMMITTED:
        typer.echo("Committed.", err=True)
    elif result == SessionResult.DECLINED:
        typer.echo("Commit cancelled.", err=True)
