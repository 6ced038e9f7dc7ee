"""CLI command for listing the configured commit types."""

from pathlib import Path
from typing import Optional

import typer

from gitcz.config import ConfigError, resolve_config
from gitcz.git import GitError, get_repo_root


def types_command(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file path",
    ),
) -> None:
    """List the commit types offered by the type question."""
    try:
        repo_root = get_repo_root()
    except GitError:
        # Listing types works outside a repository with built-in defaults
        repo_root = None

    try:
        cfg = resolve_config(repo_root, config)
    except ConfigError as e:
        typer.echo(f"Error loading config: {e}", err=True)
        raise typer.Exit(1)

    width = max(len(t.value) for t in cfg.types)
    for t in cfg.types:
        typer.echo(f"  {t.value.ljust(width)}  {t.name}")
