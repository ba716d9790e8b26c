"""Configuration loading utilities."""

from pathlib import Path
from typing import Any

import yaml


def get_project_root() -> Path:
    """Get the project root directory."""
    current = Path(__file__).resolve()
    # Navigate up from src/po2csv/utils to project root
    for parent in current.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    return Path.cwd()


def resolve_path(path: str | Path) -> Path:
    """Resolve a path against the working directory, then the project root."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        path = get_project_root() / path
    return path


def load_config(config_path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file.

    Args:
        config_path: Path to the YAML config file (absolute or relative to project root)

    Returns:
        Dictionary containing the configuration; empty for an empty file

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    path = resolve_path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        return yaml.safe_load(f) or {}
