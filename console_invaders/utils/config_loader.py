"""
Configuration Loader - Load and validate configuration from YAML.

A single config.yaml holds three sections:
- game: simulation constants (InvadersConfig)
- display: which sink to use and how to size it
- logging: log level and file

Missing sections or keys fall back to defaults; unknown keys are ignored.
"""
import yaml
from pathlib import Path
from typing import Optional, Any
from dataclasses import dataclass, field, asdict

from ..invaders.config import InvadersConfig


@dataclass
class DisplayConfig:
    """Display settings."""
    backend: str = "pygame"  # "pygame" or "terminal"
    font_size: int = 18
    fps: int = 60  # Frame cap for the pygame window (0 = uncapped)
    terminal_refresh: int = 30  # Terminal refreshes per second


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: str = "logs/invaders.log"


@dataclass
class Config:
    """Complete application configuration."""
    game: InvadersConfig = field(default_factory=InvadersConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Look for config.yaml in the working directory and the project root."""
    possible_paths = [
        Path("config.yaml"),
        Path(__file__).parent.parent.parent / "config.yaml",
        Path.cwd() / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path
    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to project root config.yaml)

    Returns:
        Config object with all settings

    Raises:
        ValueError: If the game section describes a layout that does not fit
    """
    if config_path is None:
        found = _find_config_file()
        config_path = str(found) if found else None

    if config_path is None or not Path(config_path).exists():
        print("[Config] No config file found, using defaults")
        return Config()

    # Load YAML
    with open(config_path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()

    # Build config object
    config = Config()

    if 'game' in data:
        config.game = InvadersConfig.from_dict(data['game'] or {})
        config.game.validate()

    if 'display' in data:
        config.display = _dict_to_dataclass(data['display'], DisplayConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    return config


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
