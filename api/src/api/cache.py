"""Per-user cache of query results.

Entries are keyed by (user_id, partition, args). Mutation routes name the
partitions they make stale and drop them for that user after a successful
write. Only successful results are stored.
"""

import threading
from collections import OrderedDict
from enum import Enum
from typing import Callable, Hashable, Tuple

from fastapi import Request
from loguru import logger

from storage.service.result import ActionResult


class CachePartition(str, Enum):
    TODAY = "today"
    DATE = "date"
    SEARCH = "search"
    LIST = "list"
    MONTH = "month"
    CATEGORIES = "categories"


TASK_PARTITIONS: Tuple[CachePartition, ...] = (
    CachePartition.TODAY,
    CachePartition.DATE,
    CachePartition.SEARCH,
    CachePartition.LIST,
    CachePartition.MONTH,
)
ALL_PARTITIONS: Tuple[CachePartition, ...] = tuple(CachePartition)


class QueryCache:
    def __init__(self, max_entries: int = 1024):
        self.max_entries = max_entries
        self._entries: "OrderedDict[tuple, ActionResult]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_load(self, user_id: int, partition: CachePartition, key: Hashable,
                    loader: Callable[[], ActionResult]) -> ActionResult:
        cache_key = (user_id, partition, key)
        with self._lock:
            if cache_key in self._entries:
                self._entries.move_to_end(cache_key)
                return self._entries[cache_key]
        result = loader()
        if result.success:
            with self._lock:
                self._entries[cache_key] = result
                while len(self._entries) > self.max_entries:
                    self._entries.popitem(last=False)
        return result

    def invalidate(self, user_id: int, *partitions: CachePartition) -> int:
        targets = set(partitions)
        with self._lock:
            stale = [k for k in self._entries if k[0] == user_id and k[1] in targets]
            for k in stale:
                del self._entries[k]
        if stale:
            logger.debug("Invalidated {} cache entries user_id={} partitions={}",
                         len(stale), user_id, sorted(p.value for p in targets))
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


def get_cache(request: Request) -> QueryCache:
    return request.app.state.query_cache
