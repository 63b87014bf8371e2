"""Watch page adapter.

Re-requests the watch page in its JSON ("pbj") form with the session's XSRF
token. Only works against weak age restrictions, but is cheap.
"""

import logging
from typing import Any

import httpx

from sidebarunlock.config import DEFAULT_TIMEOUT
from sidebarunlock.errors import AdapterFailure
from sidebarunlock.models import ContentDocument
from sidebarunlock.sources.base import HttpSourceAdapter

logger = logging.getLogger(__name__)

YOUTUBE_BASE_URL = "https://www.youtube.com"


class WatchEndpointAdapter(HttpSourceAdapter):
    """Adapter for the same-origin /watch endpoint.

    Payload keys:
        videoId: video to request
        session_token: XSRF token of the current session (may be None)
        clientName, clientVersion: sent as X-YouTube-Client-* headers
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        base_url: str = YOUTUBE_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        super().__init__(client=client, timeout=timeout)
        self.base_url = base_url.rstrip("/")

    @property
    def name(self) -> str:
        return "watch"

    def fetch(self, payload: dict[str, Any]) -> ContentDocument:
        video_id = payload.get("videoId")
        if not video_id:
            raise AdapterFailure(self.name, "payload has no videoId")

        request = self._client.build_request(
            "POST",
            f"{self.base_url}/watch",
            params={"v": video_id, "pbj": "1"},
            data={"session_token": payload.get("session_token") or ""},
            headers=_client_headers(payload),
        )
        parts = self._send(request)
        logger.debug(f"Watch page returned {len(parts) if isinstance(parts, list) else 1} part(s) for {video_id}")
        return _extract_response(parts, self.name)


def _client_headers(payload: dict[str, Any]) -> dict[str, str]:
    headers = {}
    if payload.get("clientName"):
        headers["X-YouTube-Client-Name"] = str(payload["clientName"])
    if payload.get("clientVersion"):
        headers["X-YouTube-Client-Version"] = str(payload["clientVersion"])
    return headers


def _extract_response(parts: Any, adapter: str) -> ContentDocument:
    """Pick the next response out of a pbj body.

    The body is a list of parts ("page", "player", "response", ...); only
    the one carrying "response" is the next response.
    """
    if isinstance(parts, dict):
        parts = [parts]
    if not isinstance(parts, list):
        raise AdapterFailure(adapter, f"unexpected body type: {type(parts).__name__}")

    for part in parts:
        if isinstance(part, dict) and isinstance(part.get("response"), dict):
            return part["response"]

    raise AdapterFailure(adapter, "no next response in watch page body")
