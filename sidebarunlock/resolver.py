"""Fallback resolution of restricted next responses.

The resolver walks the strategy list in order and stops at the first
response whose sidebar is not empty. A failing strategy never aborts the
walk: its error is logged and the next strategy is tried. Strategies run one
at a time because later ones are slower and more expensive.
"""

import logging

from sidebarunlock.cache import ResolutionCache
from sidebarunlock.document import get_video_id
from sidebarunlock.inspector import SidebarInspector
from sidebarunlock.models import CacheStatus, ContentDocument, SessionContext
from sidebarunlock.strategies import StrategyBuilder

logger = logging.getLogger(__name__)


class FallbackResolver:
    """Resolves a next response through the strategy list, with caching.

    Usage:
        resolver = FallbackResolver(builder, inspector, session)
        unlocked = resolver.resolve(original)
    """

    def __init__(
        self,
        builder: StrategyBuilder,
        inspector: SidebarInspector,
        session: SessionContext,
        cache: ResolutionCache | None = None,
    ):
        self.builder = builder
        self.inspector = inspector
        self.session = session
        self.cache = cache if cache is not None else ResolutionCache()

    def resolve(self, document: ContentDocument) -> ContentDocument:
        """Return the best next response obtainable for document's video.

        The result may still have an empty sidebar if every strategy failed;
        callers check with the inspector.

        Raises:
            MissingIdentifier: If document has no video id. No adapter is
                invoked in that case.
        """
        video_id = get_video_id(document)

        with self.cache.lock:
            cached = self.cache.get(video_id)
            if cached is not None:
                logger.info(f"Using cached next response for {video_id} ({cached.status.value})")
                return cached.document

            resolved = self._run_strategies(document)
            status = CacheStatus.EXHAUSTED if self.inspector.is_sidebar_empty(resolved) else CacheStatus.RESOLVED
            self.cache.put(video_id, resolved, status)

        return resolved

    def _run_strategies(self, document: ContentDocument) -> ContentDocument:
        strategies = self.builder.build(document, self.session)

        # A failed fetch keeps the previous attempt's response
        resolved: ContentDocument = {}
        for index, strategy in enumerate(strategies, start=1):
            logger.info(f"Trying Sidebar Unlock Method #{index} ({strategy.name})")

            try:
                resolved = strategy.fetch()
            except Exception as e:
                logger.error(f"Sidebar Unlock Method {index} failed with exception: {e}")

            if not self.inspector.is_sidebar_empty(resolved):
                logger.info(f"Sidebar Unlock Method #{index} ({strategy.name}) succeeded")
                break

        return resolved
