"""Configuration file loading utilities."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TERMCLOCK_CONFIG"
DEFAULT_CONFIG_PATH = "termclock.yml"
FALLBACK_CONFIG_PATH = "conf.yaml"


def get_config_path(load_env: bool = True) -> Path:
    """Get path to the configuration file.

    Args:
        load_env: Whether to load a .env file before reading TERMCLOCK_CONFIG.

    Returns:
        The path from TERMCLOCK_CONFIG if set, else termclock.yml when it
        exists in the working directory, else conf.yaml.
    """
    if load_env:
        load_dotenv()

    if env_path := os.getenv(CONFIG_ENV_VAR):
        return Path(env_path)

    if Path(DEFAULT_CONFIG_PATH).exists():
        return Path(DEFAULT_CONFIG_PATH)

    return Path(FALLBACK_CONFIG_PATH)


def load_yaml_config(
    config_path: Optional[Union[str, Path]] = None,
    load_env: bool = True,
) -> Optional[dict]:
    """Load the YAML configuration file.

    A missing file, a YAML syntax error or a document that is not a mapping
    all mean "no file settings"; the caller falls back to defaults.

    Args:
        config_path: Path to config file. If None, uses get_config_path().
        load_env: Whether to load .env file first.

    Returns:
        Configuration dictionary, or None if no usable file was found.
    """
    if config_path is None:
        config_path = get_config_path(load_env=load_env)
    else:
        config_path = Path(config_path)

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.debug(f"No config file at {config_path}")
        return None
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Ignoring unreadable config file {config_path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {config_path}: not a mapping")
        return None

    return data

