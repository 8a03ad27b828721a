"""Dashboard settings: defaults, YAML file values and command-line overrides.

Every field is resolved on its own, highest precedence first:
command-line override > config file > default. A value that fails
validation counts as absent for that field only.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

from termclock.shared.config import load_yaml_config
from termclock.shared.errors import ValidationFailure

logger = logging.getLogger(__name__)

DEFAULT_DEVICE_CODE = "SENS-FARM01"
DEFAULT_TODO_LIMIT = 4
TODO_REFRESH_INTERVAL = 5  # seconds, not configurable

# Terminal color names accepted in the config file and on the command line,
# mapped to rich color strings.
COLORS: Dict[str, str] = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "yello": "yellow",
    "blue": "blue",
    "magenta": "magenta",
    "cyan": "cyan",
    "white": "bright_white",
    "gray": "white",
    "grey": "white",
    "darkgray": "bright_black",
    "darkgrey": "bright_black",
    "lightred": "bright_red",
    "lightgreen": "bright_green",
    "lightyellow": "bright_yellow",
    "lightblue": "bright_blue",
    "lightmagenta": "bright_magenta",
    "lightcyan": "bright_cyan",
    "orange": "#ffa500",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """Immutable settings snapshot, rebuilt only on startup or reload."""

    # Clock scaling
    time_scale_x: int = 2
    time_scale_y: int = 2
    date_scale_x: int = 1

    # Colors (rich color strings)
    time_color: str = "bright_white"
    date_color: str = "yellow"
    todos_color: str = "bright_white"

    chime_enabled: bool = True

    # HTTP API
    api_base_url: Optional[str] = None
    device_code: str = DEFAULT_DEVICE_CODE
    temp_refresh_interval: int = 5  # seconds

    # MySQL
    mysql_url: Optional[str] = None
    todo_db_url: Optional[str] = None

    # Todos
    todo_ip_filter: Optional[str] = None
    todos_file: Optional[str] = None
    todo_task_max_chars: Optional[int] = None
    todo_limit: int = DEFAULT_TODO_LIMIT

    # Layout: share of the screen height given to the clock
    main_window_percent: int = 80

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = "termclock.log"

    # File given with --config, re-read by the config-file API provider.
    # Set by load_config, never by the file itself.
    config_path: Optional[str] = None

    def __post_init__(self):
        for name in ("time_scale_x", "time_scale_y", "date_scale_x"):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be >= 1")
        if not 0 <= self.main_window_percent <= 100:
            raise ValueError("main_window_percent must be within 0..100")

    @property
    def todo_database_url(self) -> Optional[str]:
        """Database for todos; falls back to the temperature database."""
        return self.todo_db_url or self.mysql_url


def parse_color(name: str) -> Optional[str]:
    """Map a color name to a rich color string, or None if unknown."""
    return COLORS.get(name.strip().lower())


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationFailure(f"expected a string, got {value!r}")
    value = value.strip()
    if not value:
        raise ValidationFailure("empty string")
    return value


def _positive_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValidationFailure(f"expected a positive integer, got {value!r}")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError as e:
            raise ValidationFailure(f"not an integer: {value!r}", e) from e
    if not isinstance(value, int) or value <= 0:
        raise ValidationFailure(f"expected a positive integer, got {value!r}")
    return value


def _percent(value: Any) -> int:
    value = _positive_int(value)
    if value > 100:
        raise ValidationFailure(f"percentage above 100: {value}")
    return value


def _color(value: Any) -> str:
    color = parse_color(_string(value))
    if color is None:
        raise ValidationFailure(f"unknown color {value!r}")
    return color


def _boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValidationFailure(f"expected true or false, got {value!r}")
    return value


def _log_level(value: Any) -> str:
    level = _string(value).upper()
    if level not in LOG_LEVELS:
        raise ValidationFailure(f"unknown log level {value!r}")
    return level


FIELD_PARSERS: Dict[str, Callable[[Any], Any]] = {
    "time_scale_x": _positive_int,
    "time_scale_y": _positive_int,
    "date_scale_x": _positive_int,
    "time_color": _color,
    "date_color": _color,
    "todos_color": _color,
    "chime_enabled": _boolean,
    "api_base_url": _string,
    "device_code": _string,
    "temp_refresh_interval": _positive_int,
    "mysql_url": _string,
    "todo_db_url": _string,
    "todo_ip_filter": _string,
    "todos_file": _string,
    "todo_task_max_chars": _positive_int,
    "todo_limit": _positive_int,
    "main_window_percent": _percent,
    "log_level": _log_level,
    "log_file": _string,
}


def validate_values(raw: Optional[Mapping[str, Any]], source: str) -> Dict[str, Any]:
    """Keep the recognized keys whose values pass validation.

    Unknown keys and None values are dropped silently; invalid values are
    dropped with a warning.
    """
    values: Dict[str, Any] = {}
    if not raw:
        return values

    for key, parser in FIELD_PARSERS.items():
        if raw.get(key) is None:
            continue
        try:
            values[key] = parser(raw[key])
        except ValidationFailure as e:
            logger.warning(f"Ignoring {source} value for {key}: {e}")

    return values


def resolve_config(
    file_values: Optional[Mapping[str, Any]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Config:
    """Build a Config from file values and overrides. Pure; never raises.

    Args:
        file_values: Raw mapping parsed from the YAML config file.
        overrides: Raw command-line values; None means "not given".

    Returns:
        The resolved configuration snapshot.
    """
    values = validate_values(file_values, "config file")
    values.update(validate_values(overrides, "command-line"))
    return Config(**values)


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> Config:
    """Read the config file and resolve it against overrides.

    Args:
        config_path: Explicit config file. If None, TERMCLOCK_CONFIG or the
            conventional default path is used.
        overrides: Command-line values.

    Returns:
        The resolved configuration snapshot.
    """
    file_values = load_yaml_config(config_path)
    config = resolve_config(file_values, overrides)
    if config_path is not None:
        config = replace(config, config_path=str(config_path))
    logger.info(
        f"Loaded config: api={config.api_base_url or '-'} device={config.device_code} "
        f"temp_interval={config.temp_refresh_interval}s"
    )
    return config
