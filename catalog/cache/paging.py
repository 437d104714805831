import asyncio
from typing import Any, Awaitable, Callable

from loguru import logger

from catalog.schemas import ExerciseTemplatePage

FetchPage = Callable[[int, int], Awaitable[ExerciseTemplatePage | dict[str, Any]]]
Sleep = Callable[[float], Awaitable[Any]]


class ThrottledPager:
    """Async iterator over every page of a paginated source.

    Page 1 is fetched first to learn ``page_count``; pages 2..page_count are
    then fetched one at a time with ``delay`` seconds awaited before each.
    A pager can be iterated only once.
    """

    def __init__(
        self,
        fetch_page: FetchPage,
        *,
        page_size: int = 100,
        delay: float = 0.1,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._fetch_page = fetch_page
        self.page_size = page_size
        self.delay = delay
        self._sleep = sleep
        self._next_page = 1
        self._total_pages: int | None = None
        self._started = False

    @property
    def total_pages(self) -> int | None:
        return self._total_pages

    def __aiter__(self) -> "ThrottledPager":
        if self._started:
            raise RuntimeError("ThrottledPager cannot be restarted")
        self._started = True
        return self

    async def __anext__(self) -> ExerciseTemplatePage:
        if self._total_pages is not None and self._next_page > self._total_pages:
            raise StopAsyncIteration

        page = self._next_page
        if page > 1 and self.delay > 0:
            await self._sleep(self.delay)

        if self._total_pages is not None:
            logger.debug(f"Fetching exercise page {page} of {self._total_pages}")
        raw = await self._fetch_page(page, self.page_size)
        data = raw if isinstance(raw, ExerciseTemplatePage) else ExerciseTemplatePage.model_validate(raw)

        if self._total_pages is None:
            self._total_pages = data.page_count or 1
            logger.info(f"Found {self._total_pages} pages of exercises to fetch")

        self._next_page += 1
        return data
