"""
Configuration of the interactive shell.

Values come from an optional YAML file; command-line flags
in program.py override them.
"""

import logging
import yaml

from dataclasses import dataclass, fields
from pathlib import Path


@dataclass(frozen=True)
class ShellConfig:
    prompt: str = "gs> "
    show_prompt: bool = True
    log_level: str = "WARNING"
    log_file: str | None = None
    plot_file: str = "hull.png"

    def __post_init__(self):
        """Validate configuration."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level.upper() not in valid_levels:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(valid_levels)}"
            )
        if not self.plot_file:
            raise ValueError("plot_file must not be empty")

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level.upper())


def load_config(config_path: str) -> ShellConfig:
    """
    Load shell configuration from a YAML file.

    Args:
        config_path: Path to YAML file

    Returns:
        ShellConfig built from the file contents

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If YAML is invalid or contains unknown keys
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config in {config_path} must be a mapping")

    known = {f.name for f in fields(ShellConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys in {config_path}: {sorted(unknown)}")

    return ShellConfig(**data)
