"""Base protocol for next-response sources.

A source adapter takes a strategy payload and returns a full next response
from one provider. Adapters do a single attempt: no retries. Any failure
(network, HTTP status, unparseable body) is raised as AdapterFailure.

To add a source:
1. Subclass SourceAdapter in a new module under sidebarunlock/sources/
2. Add a strategy for it in sidebarunlock/strategies.py
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from sidebarunlock.config import DEFAULT_TIMEOUT
from sidebarunlock.errors import AdapterFailure
from sidebarunlock.models import ContentDocument

logger = logging.getLogger(__name__)


class SourceAdapter(ABC):
    """Interface for fetching a next response from a provider.

    Example:
        class MyAdapter(SourceAdapter):
            @property
            def name(self) -> str:
                return "my_source"

            def fetch(self, payload: dict) -> ContentDocument:
                return {...}
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in logs and errors."""
        pass

    @abstractmethod
    def fetch(self, payload: dict[str, Any]) -> ContentDocument:
        """Fetch a next response.

        Args:
            payload: Strategy-specific request parameters.

        Returns:
            The next response as a nested mapping.

        Raises:
            AdapterFailure: If the provider could not be reached or returned
                something that is not a next response.
        """
        pass


class HttpSourceAdapter(SourceAdapter):
    """Shared plumbing for adapters backed by an httpx client."""

    def __init__(self, client: httpx.Client | None = None, timeout: float = DEFAULT_TIMEOUT):
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def _send(self, request: httpx.Request) -> Any:
        """Send a request and decode its JSON body."""
        logger.debug(f"[{self.name}] {request.method} {request.url}")
        try:
            response = self._client.send(request)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise AdapterFailure(self.name, f"request failed: {e}") from e

        try:
            return response.json()
        except json.JSONDecodeError as e:
            raise AdapterFailure(self.name, f"invalid JSON response: {e}") from e

    def close(self) -> None:
        self._client.close()
