"""Blocking HTTP helpers built on aiohttp.

The dashboard loop is synchronous, so each call runs its own short-lived
event loop and session. Every call is bounded by the client timeout.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from .errors import ProtocolFailure, TransportFailure

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0


class ApiClient:
    """Client for one HTTP base URL."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def post_json(self, path: str, payload: dict) -> Any:
        """POST a JSON body and return the decoded JSON response.

        Raises:
            TransportFailure: On connection errors or timeout.
            ProtocolFailure: On non-2xx status or a body that is not JSON.
        """
        return asyncio.run(_request("POST", self.url(path), self.timeout, json_body=payload))


def get_text(url: str, params: Optional[Dict[str, str]] = None, timeout: float = DEFAULT_TIMEOUT) -> str:
    """GET a plain-text resource.

    Raises:
        TransportFailure: On connection errors or timeout.
        ProtocolFailure: On non-2xx status.
    """
    return asyncio.run(_request("GET", url, timeout, params=params))


async def _request(
    method: str,
    url: str,
    timeout: float,
    json_body: Optional[dict] = None,
    params: Optional[Dict[str, str]] = None,
) -> Any:
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    logger.debug(f"{method} {url}")
    try:
        async with aiohttp.ClientSession(timeout=client_timeout) as session:
            async with session.request(method, url, json=json_body, params=params) as response:
                response.raise_for_status()
                if json_body is None:
                    return await response.text()
                return await response.json(content_type=None)
    except aiohttp.ClientResponseError as e:
        raise ProtocolFailure(f"{method} {url} returned {e.status}", e) from e
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise TransportFailure(f"{method} {url} failed: {e!r}", e) from e
    except ValueError as e:
        raise ProtocolFailure(f"{method} {url} returned invalid JSON", e) from e
