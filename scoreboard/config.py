"""
Configuration loader and flag store
"""
import logging
import os
from pathlib import Path
from typing import Dict, Optional

import yaml

from scoreboard.models import DEFAULT_FLAGS, FLAG_VALUES, ConfigFlag, Settings


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = str(Path(__file__).resolve().parent.parent / "config" / "scoreboard.yaml")


def get_config_path() -> str:
    """Settings file path, overridable with SCOREBOARD_CONFIG"""
    return os.environ.get("SCOREBOARD_CONFIG", DEFAULT_CONFIG_PATH)


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load settings from YAML file

    Args:
        config_path: Path to config file (default from get_config_path())

    Returns:
        Settings object
    """
    path = Path(config_path or get_config_path())

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return Settings(**data)


class ConfigStore:
    """
    Runtime view of the feature toggles

    Values are kept as strings and compared literally ('0', '1', '2').
    """

    def __init__(self, flags: Optional[Dict[str, str]] = None):
        self._flags: Dict[str, str] = dict(DEFAULT_FLAGS)
        if flags:
            self._flags.update({name: str(value) for name, value in flags.items()})

    def get(self, name: str) -> ConfigFlag:
        """Get a flag; unknown names raise KeyError"""
        return ConfigFlag(name=name, value=self._flags[name])

    def set(self, name: str, value: str) -> ConfigFlag:
        """
        Change a known flag

        Raises:
            KeyError: unknown flag
            ValueError: value not allowed for this flag
        """
        if name not in self._flags:
            raise KeyError(name)
        allowed = FLAG_VALUES.get(name)
        value = str(value)
        if allowed is not None and value not in allowed:
            raise ValueError(f"Invalid value {value!r} for {name}, expected one of {allowed}")
        self._flags[name] = value
        logger.info(f"⚙️  Flag {name} set to {value}")
        return self.get(name)

    def flags(self) -> Dict[str, str]:
        return dict(self._flags)


def save_flags(flags: Dict[str, str], config_path: Optional[str] = None) -> None:
    """
    Write flag values back into the config file

    Args:
        flags: Flag name -> value
        config_path: Path to config file
    """
    path = Path(config_path or get_config_path())

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    # Read current config
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    # Update
    data['flags'] = dict(flags)

    # Write back
    with open(path, 'w', encoding='utf-8') as f:
        yaml.dump(data, f, default_flow_style=False, allow_unicode=True)

    logger.info(f"✅ Saved flags to {path}")
