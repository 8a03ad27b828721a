"""Configuration for the dashboard."""

from .settings import Config, load_config, parse_color, resolve_config

__all__ = ["Config", "load_config", "parse_color", "resolve_config"]
