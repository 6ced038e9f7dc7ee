"""CLI command for writing a starter configuration file."""

import typer

from gitcz.config import get_config_file, save_default_config
from gitcz.git import GitError, get_repo_root


def init_config(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing configuration file",
    ),
) -> None:
    """Write the default configuration to .gitcz/config.yaml in this repository."""
    try:
        repo_root = get_repo_root()
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    config_file = get_config_file(repo_root)
    if config_file.exists() and not force:
        typer.echo(f"Configuration already exists at {config_file}", err=True)
        typer.echo("Use --force to overwrite it.", err=True)
        raise typer.Exit(1)

    try:
        save_default_config(config_file)
    except OSError as e:
        typer.echo(f"Error saving configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Configuration saved to {config_file}")
