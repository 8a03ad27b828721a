"""Temperature providers.

Resolution order: HTTP API from the settings snapshot, HTTP API from the
config file as it is on disk now, MySQL, then the public wttr.in service.
Each provider returns the cached display string, e.g. "23.4℃".
"""

import logging
from typing import Optional

from termclock.config.settings import DEFAULT_DEVICE_CODE, Config, validate_values
from termclock.shared import http
from termclock.shared.config import load_yaml_config
from termclock.shared.database import DashboardStorage, DBConfig
from termclock.shared.errors import ConfigurationAbsent, ProtocolFailure
from termclock.shared.models import CELSIUS, ApiResponse, TemperatureRow, format_celsius

from .base import ProviderChain

logger = logging.getLogger(__name__)

TEMPERATURE_PATH = "/habitat/raw/list"
WTTR_URL = "https://wttr.in/"
WTTR_PARAMS = {"format": "%t"}


def fetch_temperature_api(base_url: str, device_code: str) -> str:
    """Read the newest temperature for a device from the HTTP API.

    Raises:
        TransportFailure: If the API cannot be reached.
        ProtocolFailure: On a non-zero code, no rows or a malformed body.
    """
    payload = {"device_code": device_code, "page": {"num": 1, "size": 1}}
    body = http.ApiClient(base_url).post_json(TEMPERATURE_PATH, payload)
    response = ApiResponse.parse(body, TemperatureRow.from_dict)

    if not response.ok:
        raise ProtocolFailure(f"API returned code {response.code}: {response.msg}")
    if not response.rows:
        raise ProtocolFailure(f"No temperature rows for device {device_code}")

    return format_celsius(response.rows[0].values.temp)


def from_api(config: Config) -> Optional[str]:
    if not config.api_base_url:
        raise ConfigurationAbsent("api_base_url not configured")
    return fetch_temperature_api(config.api_base_url, config.device_code)


def from_config_file_api(config: Config) -> Optional[str]:
    """Retry the API with the base URL/device pair currently in the file."""
    # .env was loaded at startup
    raw = load_yaml_config(config.config_path, load_env=False)
    file_values = validate_values(raw, "config file")
    base_url = file_values.get("api_base_url")
    if not base_url:
        raise ConfigurationAbsent("no api_base_url in config file")

    device_code = file_values.get("device_code", DEFAULT_DEVICE_CODE)
    if (base_url, device_code) == (config.api_base_url, config.device_code):
        raise ConfigurationAbsent("config file API is the one already tried")

    return fetch_temperature_api(base_url, device_code)


def from_mysql(config: Config) -> Optional[str]:
    if not config.mysql_url:
        raise ConfigurationAbsent("mysql_url not configured")
    try:
        db_config = DBConfig.from_url(config.mysql_url)
    except ValueError as e:
        raise ConfigurationAbsent(f"Unusable mysql_url: {e}", e) from e

    temp = DashboardStorage(db_config).get_latest_temperature()
    if temp is None:
        logger.debug("No temperature in t_sensors from the last 5 minutes")
        return None
    return format_celsius(temp)


def from_wttr(config: Config) -> Optional[str]:
    text = http.get_text(WTTR_URL, params=WTTR_PARAMS).strip()
    if not text:
        raise ProtocolFailure("wttr.in returned an empty body")
    return text.replace("°C", CELSIUS)


def build_temperature_chain() -> ProviderChain[str]:
    return ProviderChain(
        "temperature",
        [
            ("api", from_api),
            ("api_file", from_config_file_api),
            ("mysql", from_mysql),
            ("wttr", from_wttr),
        ],
    )
