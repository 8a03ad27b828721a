"""Ordered fallback chain of data providers."""

import logging
from typing import Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

from termclock.config.settings import Config
from termclock.shared.errors import ConfigurationAbsent, ProviderError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# A provider returns a value, None for "nothing here", or raises ProviderError.
Provider = Callable[[Config], Optional[T]]


class ProviderChain(Generic[T]):
    """Tries providers in order and returns the first value produced.

    A failing provider is never retried within a pass and its failure never
    escapes: the chain logs it and moves on. When every provider fails the
    chain returns its default.
    """

    def __init__(
        self,
        name: str,
        providers: Sequence[Tuple[str, Provider]],
        default: Optional[T] = None,
    ):
        self.name = name
        self.providers: List[Tuple[str, Provider]] = list(providers)
        self.default = default

    def resolve(self, config: Config) -> Optional[T]:
        """Run the chain once against a configuration snapshot."""
        for provider_name, provider in self.providers:
            try:
                value = provider(config)
            except ConfigurationAbsent as e:
                logger.debug(f"{self.name}/{provider_name} skipped: {e}")
                continue
            except ProviderError as e:
                logger.warning(f"{self.name}/{provider_name} failed: {e}")
                continue
            except Exception:
                logger.exception(f"{self.name}/{provider_name} raised unexpectedly")
                continue

            if value is not None:
                logger.debug(f"{self.name} resolved by {provider_name}")
                return value

        logger.info(f"{self.name}: no provider produced a value")
        return self.default
