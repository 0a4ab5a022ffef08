"""Route Cache — process-wide cache of listing renders, keyed by route path.

Invariants:
    - invalidate(route) drops the cached value; the next get() misses
    - A miss is recomputed by the caller and stored with put()
    - Invalidating an uncached route is a no-op
    - put() with a generation stores nothing if the route was invalidated since that
      generation was read: a listing computed before a mutation never outlives it

Design Decisions:
    - Module-level singleton (route_cache) mirrors a framework's shared render cache;
      handlers never see it directly, they receive it as a ViewInvalidator
    - Single-process only: no cross-worker invalidation
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class RouteCache:
    """In-memory route -> rendered value map with explicit invalidation."""

    def __init__(self):
        self._entries: dict[str, Any] = {}
        self.invalidations: dict[str, int] = {}

    def get(self, route: str) -> Any | None:
        return self._entries.get(route)

    def generation(self, route: str) -> int:
        """Invalidation count for route; read before computing a value to put()."""
        return self.invalidations.get(route, 0)

    def put(self, route: str, value: Any, generation: int | None = None) -> None:
        if generation is not None and generation != self.generation(route):
            logger.debug("Stale render discarded", extra={"route": route})
            return
        self._entries[route] = value

    def invalidate(self, route: str) -> None:
        """Mark route stale; recomputed on next access."""
        self._entries.pop(route, None)
        self.invalidations[route] = self.invalidations.get(route, 0) + 1
        logger.debug("Route invalidated", extra={"route": route})

    def clear(self) -> None:
        self._entries.clear()
        self.invalidations.clear()


route_cache = RouteCache()
