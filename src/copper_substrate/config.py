"""
Configuration file support for copper-substrate.

Provides hierarchical configuration loading from:
1. Project config: .copper-substrate.toml or copper-substrate.toml in project root
2. User config: ~/.config/copper-substrate/config.toml

Project config overrides user config, and both override the built-in
defaults. The footprint serializer never loads configuration itself: callers
load a ``Config`` and pass ``config.footprint`` explicitly.
"""

import sys
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError
from .sexp.node import DEFAULT_PRECISION

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

# Config file names to search for in project directories
CONFIG_FILENAMES = [".copper-substrate.toml", "copper-substrate.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "copper-substrate" / "config.toml"

# All known config keys for validation
KNOWN_KEYS = {
    "footprint": {"format_version", "generator", "generator_version", "precision"},
}


@dataclass
class FootprintConfig:
    """Header tokens and number precision of generated footprints."""

    format_version: int = 20250401
    generator: str = "custom_pcb_tool"
    generator_version: str = "1.0"
    precision: int = DEFAULT_PRECISION


@dataclass
class Config:
    """Merged configuration from all sources."""

    footprint: FootprintConfig = field(default_factory=FootprintConfig)

    # Track which file each setting came from
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)

        Returns:
            Merged configuration object

        Raises:
            ConfigurationError: If a config file is unreadable or invalid
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            user_data = _load_toml_file(USER_CONFIG_PATH)
            _merge_config(config, user_data, str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            project_data = _load_toml_file(project_config)
            _merge_config(config, project_data, str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.

    Args:
        start_dir: Directory to start searching from

    Returns:
        Path to config file if found, None otherwise
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Stop at .git directory (project root)
        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """
    Load a TOML file.

    Args:
        path: Path to TOML file

    Returns:
        Parsed TOML data

    Raises:
        ConfigurationError: If the file can't be read or isn't valid TOML
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Invalid TOML in {path}: {e}",
            context={"file": str(path)},
            suggestions=["Check the file with a TOML validator"],
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read config file {path}: {e}", context={"file": str(path)}
        ) from e


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into Config object.

    Args:
        config: Config object to update
        data: Raw config data from TOML
        source: Source file path (for tracking)
        sources: Dict to update with source info
    """
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    if "footprint" in data:
        fp_data = data["footprint"]
        _warn_unknown_keys(fp_data, KNOWN_KEYS["footprint"], "footprint", source)

        if "format_version" in fp_data:
            config.footprint.format_version = _expect(
                fp_data, "format_version", int, "footprint", source
            )
            sources["footprint.format_version"] = source
        if "generator" in fp_data:
            config.footprint.generator = _expect(fp_data, "generator", str, "footprint", source)
            sources["footprint.generator"] = source
        if "generator_version" in fp_data:
            config.footprint.generator_version = _expect(
                fp_data, "generator_version", str, "footprint", source
            )
            sources["footprint.generator_version"] = source
        if "precision" in fp_data:
            precision = _expect(fp_data, "precision", int, "footprint", source)
            if not 0 <= precision <= 9:
                raise ConfigurationError(
                    f"footprint.precision must be between 0 and 9, got {precision}",
                    context={"file": source},
                )
            config.footprint.precision = precision
            sources["footprint.precision"] = source


def _expect(data: dict[str, Any], key: str, kind: type, section: str, source: str) -> Any:
    """Return ``data[key]`` or raise if it has the wrong type."""
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ConfigurationError(
            f"Config key '{section}.{key}' must be {kind.__name__}, got {type(value).__name__}",
            context={"file": source, "value": value},
        )
    return value


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def generate_template() -> str:
    """
    Generate a template config file with all options documented.

    Returns:
        Template TOML string
    """
    return """# copper-substrate configuration file
# Place as .copper-substrate.toml in project root or
# ~/.config/copper-substrate/config.toml for user defaults

[footprint]
# File format version written to the (version ...) header
# format_version = 20250401

# Generator name and version written to the header
# generator = "custom_pcb_tool"
# generator_version = "1.0"

# Decimal places for coordinates and sizes (KiCad resolution is 6)
# precision = 6
"""


def get_config_paths() -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    project_config = _find_project_config(Path.cwd())

    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": project_config,
    }
