"""Converter configuration."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from .utils.config_loader import load_config, resolve_path
from .utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = "configs/po2csv.yaml"


@dataclass
class ConverterConfig:
    """Complete converter configuration."""

    # Input
    encoding: str = "utf-8-sig"

    # Output
    output_dir: Optional[str] = None
    preview_chars: int = 1000

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "ConverterConfig":
        """Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML config file

        Returns:
            ConverterConfig instance
        """
        logger.debug(f"Loading config from {yaml_path}")
        return cls.from_dict(load_config(yaml_path))

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ConverterConfig":
        """Create config from dictionary.

        Args:
            config_dict: Configuration dictionary, flat or sectioned

        Returns:
            ConverterConfig instance
        """
        config_dict = dict(config_dict)

        # Handle nested 'input' section
        if "input" in config_dict:
            input_config = config_dict.pop("input") or {}
            if "encoding" in input_config:
                config_dict["encoding"] = input_config["encoding"]

        # Handle nested 'output' section
        if "output" in config_dict:
            output_config = config_dict.pop("output") or {}
            if "dir" in output_config:
                config_dict["output_dir"] = output_config["dir"]
            if "preview_chars" in output_config:
                config_dict["preview_chars"] = output_config["preview_chars"]

        # Handle nested 'logging' section
        if "logging" in config_dict:
            logging_config = config_dict.pop("logging") or {}
            if "level" in logging_config:
                config_dict["log_level"] = logging_config["level"]
            if "file" in logging_config:
                config_dict["log_file"] = logging_config["file"]

        # Handle nested 'server' section
        if "server" in config_dict:
            server_config = config_dict.pop("server") or {}
            for key in ("host", "port"):
                if key in server_config:
                    config_dict[key] = server_config[key]

        # Filter out unknown keys
        known_fields = {f.name for f in fields(cls)}
        filtered_dict = {k: v for k, v in config_dict.items() if k in known_fields}

        return cls(**filtered_dict)

    @classmethod
    def load(cls, config_path: Optional[str | Path] = None) -> "ConverterConfig":
        """Load from an explicit path, else from the bundled config file.

        Falls back to dataclass defaults when no path is given and the
        bundled file is missing.
        """
        if config_path is None:
            default_path = resolve_path(DEFAULT_CONFIG_PATH)
            if not default_path.exists():
                return cls()
            config_path = default_path
        return cls.from_yaml(config_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to sectioned dictionary, the layout used in YAML files."""
        return {
            "input": {"encoding": self.encoding},
            "output": {
                "dir": self.output_dir,
                "preview_chars": self.preview_chars,
            },
            "logging": {"level": self.log_level, "file": self.log_file},
            "server": {"host": self.host, "port": self.port},
        }
