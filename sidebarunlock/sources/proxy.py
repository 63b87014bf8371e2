"""Account proxy adapter.

The proxy holds the session cookies of an age-verified account server-side
and relays the next request with them, so it also works against strong
restrictions. Slower than the watch endpoint, and rate limited.
"""

import logging
from typing import Any

import httpx

from sidebarunlock.config import DEFAULT_PROXY_HOST, DEFAULT_TIMEOUT
from sidebarunlock.errors import AdapterFailure
from sidebarunlock.models import ContentDocument
from sidebarunlock.sources.base import HttpSourceAdapter

logger = logging.getLogger(__name__)


class AccountProxyAdapter(HttpSourceAdapter):
    """Adapter for the account proxy's /getNext endpoint.

    Payload keys are sent verbatim as query parameters: videoId, clientName,
    clientVersion, hl, isEmbed, isConfirmed. None values are dropped.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        host: str = DEFAULT_PROXY_HOST,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        super().__init__(client=client, timeout=timeout)
        self.host = host.rstrip("/")

    @property
    def name(self) -> str:
        return "account_proxy"

    def fetch(self, payload: dict[str, Any]) -> ContentDocument:
        params = {k: v for k, v in payload.items() if v is not None}
        request = self._client.build_request("GET", f"{self.host}/getNext", params=params)
        data = self._send(request)

        if not isinstance(data, dict):
            raise AdapterFailure(self.name, f"unexpected body type: {type(data).__name__}")

        if data.get("errorMessage"):
            logger.warning(f"Account proxy rejected {payload.get('videoId')}: {data['errorMessage']}")
            raise AdapterFailure(self.name, f"proxy error: {data['errorMessage']}")

        return data
