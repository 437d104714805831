import pytest

from catalog.cache.paging import ThrottledPager
from catalog.schemas import ExerciseTemplatePage
from tests.conftest import FakeCatalogSource, RecordingSleep, make_exercise


@pytest.mark.asyncio
async def test_pager_yields_every_page_then_stops():
    source = FakeCatalogSource([make_exercise(f"E{index}") for index in range(7)])
    sleep = RecordingSleep()
    pager = ThrottledPager(source, page_size=3, delay=0.25, sleep=sleep)

    pages = [page async for page in pager]

    assert [page.page for page in pages] == [1, 2, 3]
    assert all(isinstance(page, ExerciseTemplatePage) for page in pages)
    assert pager.total_pages == 3
    assert source.calls == [(1, 3), (2, 3), (3, 3)]


@pytest.mark.asyncio
async def test_pager_sleeps_between_fetches_only():
    source = FakeCatalogSource([make_exercise(f"E{index}") for index in range(4)])
    sleep = RecordingSleep()
    pager = ThrottledPager(source, page_size=1, delay=0.1, sleep=sleep)

    async for _ in pager:
        pass

    assert sleep.delays == [0.1, 0.1, 0.1]


@pytest.mark.asyncio
async def test_pager_is_lazy():
    source = FakeCatalogSource([make_exercise(f"E{index}") for index in range(4)])
    pager = ThrottledPager(source, page_size=2, delay=0, sleep=RecordingSleep())

    iterator = pager.__aiter__()
    assert source.calls == []
    first = await iterator.__anext__()

    assert first.page == 1
    assert source.calls == [(1, 2)]


@pytest.mark.asyncio
async def test_pager_total_pages_defaults_to_one():
    calls = []

    async def fetch_page(page: int, page_size: int) -> dict:
        calls.append(page)
        return {"page_count": None, "exercise_templates": None}

    pager = ThrottledPager(fetch_page, delay=0, sleep=RecordingSleep())
    pages = [page async for page in pager]

    assert calls == [1]
    assert pager.total_pages == 1
    assert pages[0].exercise_templates == []


@pytest.mark.asyncio
async def test_pager_cannot_be_restarted():
    source = FakeCatalogSource([make_exercise("Plank")])
    pager = ThrottledPager(source, delay=0, sleep=RecordingSleep())

    async for _ in pager:
        pass

    with pytest.raises(RuntimeError):
        async for _ in pager:
            pass
    assert len(source.calls) == 1


@pytest.mark.asyncio
async def test_pager_propagates_fetch_errors():
    source = FakeCatalogSource([make_exercise(f"E{index}") for index in range(3)], page_count=3, fail_on_page=2)
    pager = ThrottledPager(source, page_size=1, delay=0, sleep=RecordingSleep())

    seen = []
    with pytest.raises(RuntimeError, match="boom on page 2"):
        async for page in pager:
            seen.append(page.page)

    assert seen == [1]
