"""Shared utilities for termclock."""

from .config import get_config_path, load_yaml_config
from .database import DBConfig, DashboardStorage
from .errors import (
    ConfigurationAbsent,
    ProtocolFailure,
    ProviderError,
    TransportFailure,
    ValidationFailure,
)
from .logging import setup_logging

__all__ = [
    "get_config_path",
    "load_yaml_config",
    "DBConfig",
    "DashboardStorage",
    "ConfigurationAbsent",
    "ProtocolFailure",
    "ProviderError",
    "TransportFailure",
    "ValidationFailure",
    "setup_logging",
]
