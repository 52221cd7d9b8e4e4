"""View Cache — in-process cache of rendered read views with path-based invalidation.

Invariants:
    - An entry is served only while it is fresh; revalidate(path) makes the next read recompute
    - revalidate on a path nothing has cached yet only bumps its revalidation count
    - Keys are normalized paths ("/dashboard/invoices/" == "/dashboard/invoices")

Design Decisions:
    - Process-local dict: single-process uvicorn, state lost on restart,
      nothing to coordinate across workers
    - Stale flag instead of eviction: readers can tell "never computed" from "invalidated"
    - get_view_cache is the FastAPI dependency; tests override it with a fresh ViewCache
    - This service only writes: invoice mutations call revalidate. get_or_compute and
      is_stale are the read side, used by the listing renderer that runs in the same
      process and is not part of this package
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)


@dataclass
class CachedView:
    value: Any
    computed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    stale: bool = False


def normalize_path(path: str) -> str:
    return "/" + path.strip("/")


class ViewCache:
    """Cached read views keyed by path."""

    def __init__(self) -> None:
        self._entries: dict[str, CachedView] = {}
        self.revalidations: dict[str, int] = {}

    async def get_or_compute(
        self, path: str, compute: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Return the cached value for path, recomputing it if missing or stale."""
        key = normalize_path(path)
        entry = self._entries.get(key)
        if entry is not None and not entry.stale:
            return entry.value
        value = await compute()
        self._entries[key] = CachedView(value=value)
        return value

    def revalidate(self, path: str) -> None:
        """Mark the view at path stale so the next read recomputes it."""
        key = normalize_path(path)
        entry = self._entries.get(key)
        if entry is not None:
            entry.stale = True
        self.revalidations[key] = self.revalidations.get(key, 0) + 1
        logger.info(f"Revalidated view {key}", extra={"path": key})

    def is_stale(self, path: str) -> bool:
        """True when path has never been computed or was invalidated since."""
        entry = self._entries.get(normalize_path(path))
        return entry is None or entry.stale


# Singleton (one per process)
view_cache = ViewCache()


def get_view_cache() -> ViewCache:
    """FastAPI dependency for the process-wide view cache."""
    return view_cache
