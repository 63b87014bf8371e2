"""Unlock strategies, in priority order.

Each strategy pairs a request payload with the adapter that sends it. New
strategies are added by appending to StrategyBuilder.build(), never by
branching in the resolver.
"""

from sidebarunlock.document import get_video_id
from sidebarunlock.models import ContentDocument, SessionContext, Strategy
from sidebarunlock.sources.base import SourceAdapter


class StrategyBuilder:
    """Builds the ordered strategy list for a next response.

    Pure: no I/O happens here, and the same inputs always give the same
    strategies.
    """

    def __init__(self, watch: SourceAdapter, proxy: SourceAdapter):
        self.watch = watch
        self.proxy = proxy

    def build(self, document: ContentDocument, session: SessionContext) -> list[Strategy]:
        """Return strategies for document, cheapest first.

        Raises:
            MissingIdentifier: If the document has no video id.
        """
        video_id = get_video_id(document)

        return [
            # Same-origin /watch retry. Only beats weak age restrictions.
            # Tried even without a session token.
            Strategy(
                name="Watch Endpoint",
                payload={
                    "videoId": video_id,
                    "clientName": session.client_name,
                    "clientVersion": session.client_version,
                    "session_token": session.session_token,
                },
                adapter=self.watch,
            ),
            # Account proxy holding the cookies of an age-verified account.
            Strategy(
                name="Account Proxy",
                payload={
                    "videoId": video_id,
                    "clientName": session.client_name,
                    "clientVersion": session.client_version,
                    "hl": session.hl,
                    "isEmbed": int(session.is_embed),
                    "isConfirmed": int(session.is_confirmed),
                },
                adapter=self.proxy,
            ),
        ]
