"""Loading and saving the gitcz configuration file.

The configuration lives in <repo root>/.gitcz/config.yaml unless a path is
given explicitly. Without a file the built-in defaults are used.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from gitcz.config.constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME, DEFAULT_CONFIG
from gitcz.config.exceptions import ConfigError
from gitcz.config.models import GitczConfig


def get_config_file(repo_root: Path) -> Path:
    """Return path to the repository's config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .gitcz/config.yaml.
    """
    return repo_root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _format_validation_error(error: ValidationError) -> str:
    messages = []
    for item in error.errors():
        msg = item["msg"].removeprefix("Value error, ")
        location = ".".join(str(part) for part in item["loc"])
        messages.append(f"{location}: {msg}" if location else msg)
    return "; ".join(messages)


def parse_config(data: Optional[dict]) -> GitczConfig:
    """Validate a configuration dictionary.

    Args:
        data: Parsed YAML content (None for an empty file).

    Returns:
        GitczConfig instance.

    Raises:
        ConfigError: If the content is not a valid configuration.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping")
    try:
        return GitczConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(_format_validation_error(e))


def load_config(path: Path) -> GitczConfig:
    """Load a configuration file.

    Args:
        path: Path to a YAML configuration file.

    Returns:
        GitczConfig instance.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"config file not found: {path}")
    except OSError as e:
        raise ConfigError(f"failed to read {path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}")
    return parse_config(data)


def resolve_config(repo_root: Optional[Path], path: Optional[Path] = None) -> GitczConfig:
    """Load the configuration that applies to this run.

    Priority: explicit path > repository config file > built-in defaults.

    Args:
        repo_root: Repository root, or None outside a repository.
        path: Explicit configuration path from the command line.

    Returns:
        GitczConfig instance.
    """
    if path is not None:
        return load_config(path)
    if repo_root is not None:
        config_file = get_config_file(repo_root)
        if config_file.exists():
            return load_config(config_file)
    return GitczConfig()


def save_default_config(path: Path) -> None:
    """Write the default configuration to path, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(
            DEFAULT_CONFIG,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
