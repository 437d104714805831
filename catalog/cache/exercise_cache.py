import asyncio
import time
from datetime import datetime, timezone
from typing import Callable

from loguru import logger

from catalog.cache.paging import FetchPage, Sleep, ThrottledPager
from catalog.exceptions import InitializationError, NotInitializedError
from catalog.schemas import CacheStats, ExerciseTemplate

DEFAULT_TTL = 60 * 60 * 24
DEFAULT_PAGE_SIZE = 100
DEFAULT_PAGE_DELAY = 0.1


def _consume_refresh_error(task: "asyncio.Task[None]") -> None:
    # joined callers may all be cancelled before a failed refresh settles
    if not task.cancelled():
        task.exception()


class ExerciseCache:
    """In-memory snapshot of the full exercise catalog.

    The snapshot is swapped as a single tuple after a complete paginated fetch,
    so readers never observe a partially refreshed catalog. Overlapping
    ``initialize`` calls share one in-flight refresh.
    """

    def __init__(
        self,
        *,
        ttl: float = DEFAULT_TTL,
        page_size: int = DEFAULT_PAGE_SIZE,
        page_delay: float = DEFAULT_PAGE_DELAY,
        clock: Callable[[], float] = time.time,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.ttl = ttl
        self.page_size = page_size
        self.page_delay = page_delay
        self._clock = clock
        self._sleep = sleep
        self._items: tuple[ExerciseTemplate, ...] = ()
        self._last_refreshed: float = 0.0
        self._ready = False
        self._refresh_task: asyncio.Task[None] | None = None

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def is_stale(self) -> bool:
        return self._clock() - self._last_refreshed > self.ttl

    async def initialize(self, fetch_page: FetchPage, force_refresh: bool = False) -> None:
        if self._ready and not self.is_stale and not force_refresh:
            logger.debug(f"Exercise cache is fresh ({len(self._items)} exercises)")
            return

        task = self._refresh_task
        if task is None or task.done():
            task = asyncio.create_task(self._refresh(fetch_page))
            task.add_done_callback(_consume_refresh_error)
            self._refresh_task = task
        else:
            logger.debug("Joining in-flight exercise cache refresh")

        await asyncio.shield(task)

    async def _refresh(self, fetch_page: FetchPage) -> None:
        logger.info("Initializing exercise cache by fetching all exercises...")
        buffer: list[ExerciseTemplate] = []
        pager = ThrottledPager(fetch_page, page_size=self.page_size, delay=self.page_delay, sleep=self._sleep)

        try:
            async for page in pager:
                buffer.extend(page.exercise_templates)
        except Exception as exc:  # noqa: BLE001
            logger.error(f"Failed to initialize exercise cache: {exc}")
            raise InitializationError(exc) from exc

        self._items = tuple(buffer)
        self._last_refreshed = self._clock()
        self._ready = True
        logger.info(f"Exercise cache initialized with {len(buffer)} exercises")

    def get_items(self) -> tuple[ExerciseTemplate, ...]:
        if not self._ready:
            raise NotInitializedError()
        return self._items

    def get_stats(self) -> CacheStats:
        if not self._ready:
            return CacheStats(count=len(self._items), ready=False)
        return CacheStats(
            count=len(self._items),
            ready=True,
            last_refreshed=datetime.fromtimestamp(self._last_refreshed, tz=timezone.utc),
            age_ms=max(0, int((self._clock() - self._last_refreshed) * 1000)),
        )

    def clear(self) -> None:
        self._items = ()
        self._last_refreshed = 0.0
        self._ready = False
        logger.info("Exercise cache cleared")
