"""Exception classes for data provider failures.

Providers raise these; the provider chain catches every one of them and moves
on to the next provider, so none of them ever reaches the display loop.
"""

from typing import Optional


class ProviderError(Exception):
    """Base class for a provider that could not produce a value."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        """Initialize with failure details.

        Args:
            message: Human-readable description of the failure.
            original_error: The underlying exception, if any.
        """
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class TransportFailure(ProviderError):
    """Network or database connection error, including timeouts."""

    pass


class ProtocolFailure(ProviderError):
    """Non-success status code or malformed/unexpected payload."""

    pass


class ConfigurationAbsent(ProviderError):
    """A setting or file the provider needs is not there."""

    pass


class ValidationFailure(ProviderError):
    """A setting is present but fails its positivity/non-empty check."""

    pass
