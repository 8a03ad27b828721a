"""Data providers for the dashboard's temperature and todo values."""

from .base import Provider, ProviderChain
from .temperature import build_temperature_chain
from .todos import build_todo_chain

__all__ = ["Provider", "ProviderChain", "build_temperature_chain", "build_todo_chain"]
