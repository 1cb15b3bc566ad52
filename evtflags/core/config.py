"""Configuration loading for evtflags.

Configuration is read from TOML files and supplies default event flags
(prepended to those given with --events) and output settings.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import tomli

from evtflags.utils.git import find_git_root

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "evtflags.toml"

OUTPUT_FORMATS = ("text", "json")


class ConfigError(Exception):
    """Exception raised for configuration errors.

    Attributes:
        line: Line number where the error occurred (if known)
        path: Path to the offending config file (if known)
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        path: Optional[Path] = None
    ):
        self.line = line
        self.path = path

        location = []
        if path:
            location.append(f"Error in {path}")
        if line is not None:
            location.append(f"at line {line}")
        if location:
            message = f"{' '.join(location)}: {message}"

        super().__init__(message)


def _section(data: dict, name: str) -> dict:
    """Return the [name] table of data, or {} when it is absent."""
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a table")
    return section


@dataclass
class EventsConfig:
    """Default event flags applied before any given on the command line."""

    default: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "EventsConfig":
        default = data.get("default", [])
        if isinstance(default, str):
            default = [default]
        if not isinstance(default, list) or not all(
            isinstance(flag, str) for flag in default
        ):
            raise ConfigError("events.default must be a list of strings")
        return cls(default=list(default))


@dataclass
class OutputConfig:
    """Output configuration settings."""

    color: bool = True
    format: str = "text"

    @classmethod
    def from_dict(cls, data: dict) -> "OutputConfig":
        output_format = data.get("format", "text")
        if output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"output.format must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got '{output_format}'"
            )
        color = data.get("color", True)
        if not isinstance(color, bool):
            raise ConfigError(f"output.color must be true or false, got '{color}'")
        return cls(color=color, format=output_format)


@dataclass
class Config:
    """Complete evtflags configuration.

    Attributes:
        events: Default event flags
        output: Output settings like color and format
    """

    events: EventsConfig = field(default_factory=EventsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create Config from a dictionary parsed from TOML."""
        return cls(
            events=EventsConfig.from_dict(_section(data, "events")),
            output=OutputConfig.from_dict(_section(data, "output")),
        )


class ConfigLoader:
    """Loader for evtflags TOML configuration files.

    Example usage:
        loader = ConfigLoader()
        config = loader.load(Path("evtflags.toml"))

        # Or merge every discovered config file
        config = loader.load_merged()
    """

    def load(self, path: Optional[Path]) -> Config:
        """Load configuration from a single TOML file.

        Args:
            path: Path to the TOML file, or None for defaults

        Returns:
            Config with values from the file or defaults

        Raises:
            ConfigError: If the file contains invalid TOML or values
            FileNotFoundError: If the file does not exist
        """
        if path is None:
            return Config()

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        return self._from_data(self._read(path), path)

    def discover_configs(self, start_path: Optional[Path] = None) -> list[Path]:
        """Find config files, lowest precedence first.

        Precedence order (lowest to highest):
        1. User config: ~/.config/evtflags/config.toml
        2. Git root: <git_root>/evtflags.toml
        3. Local: <start_path>/evtflags.toml

        Args:
            start_path: Directory for the local config. Defaults to the
                current working directory.

        Returns:
            Existing config file paths, without duplicates.
        """
        start_path = Path.cwd() if start_path is None else Path(start_path).resolve()

        candidates = [
            Path(os.path.expanduser("~")) / ".config" / "evtflags" / "config.toml",
        ]
        git_root = find_git_root(start_path)
        if git_root:
            candidates.append(git_root / CONFIG_FILENAME)
        candidates.append(start_path / CONFIG_FILENAME)

        configs: list[Path] = []
        seen: set[Path] = set()
        for candidate in candidates:
            if not candidate.exists():
                continue
            resolved = candidate.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            configs.append(candidate)

        return configs

    def load_merged(self, start_path: Optional[Path] = None) -> Config:
        """Load and deep-merge all discovered config files.

        Later (higher precedence) files override earlier ones; values
        a file leaves unset fall through to earlier files or defaults.

        Raises:
            ConfigError: If any config file is invalid.
        """
        merged: dict = {}
        for config_path in self.discover_configs(start_path):
            logger.debug("Loading config %s", config_path)
            merged = self._deep_merge(merged, self._read(config_path))

        return self._from_data(merged, None)

    def _read(self, path: Path) -> dict:
        try:
            return tomli.loads(path.read_text(encoding="utf-8"))
        except tomli.TOMLDecodeError as e:
            raise ConfigError(
                str(e), line=self._extract_line_number(str(e)), path=path
            ) from e

    def _from_data(self, data: dict, path: Optional[Path]) -> Config:
        try:
            return Config.from_dict(data)
        except ConfigError as e:
            if e.path is None and path is not None:
                raise ConfigError(str(e), path=path) from e
            raise

    def _extract_line_number(self, error_message: str) -> Optional[int]:
        """Pull the line number out of a tomli error message, if present."""
        match = re.search(r"line (\d+)", error_message, re.IGNORECASE)
        if match:
            return int(match.group(1))
        return None

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Merge override into a copy of base, recursing into tables.

        Lists and scalar values are replaced, not concatenated.
        """
        result = base.copy()
        for key, value in override.items():
            if isinstance(result.get(key), dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result
