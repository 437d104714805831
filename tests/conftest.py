import asyncio
from types import SimpleNamespace
from typing import Any

import pytest

from catalog.cache.exercise_cache import ExerciseCache
from catalog.schemas import ExerciseTemplate, ExerciseTemplatePage
from catalog.search.engine import SearchEngine


def make_exercise(
    title: str,
    type: str = "weight_reps",
    primary: str = "",
    secondary: list[str] | None = None,
    **extra: Any,
) -> ExerciseTemplate:
    return ExerciseTemplate(
        title=title,
        type=type,
        primary_muscle_group=primary,
        secondary_muscle_groups=secondary,
        **extra,
    )


class FakeClock:
    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSleep:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class FakeCatalogSource:
    """Serves a fixed list of exercises in pages, recording every request."""

    def __init__(
        self,
        exercises: list[ExerciseTemplate],
        *,
        page_count: int | None = None,
        fail_on_page: int | None = None,
    ) -> None:
        self.exercises = exercises
        self.page_count = page_count
        self.fail_on_page = fail_on_page
        self.calls: list[tuple[int, int]] = []

    async def __call__(self, page: int, page_size: int) -> ExerciseTemplatePage:
        self.calls.append((page, page_size))
        if self.fail_on_page == page:
            raise RuntimeError(f"boom on page {page}")
        start = (page - 1) * page_size
        chunk = self.exercises[start : start + page_size]
        total = self.page_count
        if total is None:
            total = max(1, -(-len(self.exercises) // page_size))
        return ExerciseTemplatePage(page=page, page_count=total, exercise_templates=chunk)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def cache(clock: FakeClock, sleep: RecordingSleep) -> ExerciseCache:
    return ExerciseCache(clock=clock, sleep=sleep)


@pytest.fixture
def sample_exercises() -> list[ExerciseTemplate]:
    return [
        make_exercise("Barbell Bench Press", type="barbell", primary="chest", secondary=["triceps", "shoulders"]),
        make_exercise("Dumbbell Curl", type="dumbbell", primary="biceps", secondary=["forearms"]),
        make_exercise("Hammer Curl", type="dumbbell", primary="biceps", secondary=["forearms"]),
        make_exercise("Squat", type="barbell", primary="quadriceps", secondary=["glutes", "hamstrings"]),
        make_exercise("Lat Pulldown", type="cable", primary="lats", secondary=["biceps"]),
        make_exercise("Triceps Pushdown", type="cable", primary="triceps"),
        make_exercise("Plank", type="duration", primary="abdominals"),
    ]


@pytest.fixture
def source(sample_exercises: list[ExerciseTemplate]) -> FakeCatalogSource:
    return FakeCatalogSource(sample_exercises)


@pytest.fixture
def ready_cache(cache: ExerciseCache, source: FakeCatalogSource) -> ExerciseCache:
    asyncio.run(cache.initialize(source))
    return cache


@pytest.fixture
def engine(ready_cache: ExerciseCache) -> SearchEngine:
    return SearchEngine(ready_cache)


@pytest.fixture
def api_settings() -> SimpleNamespace:
    return SimpleNamespace(
        HEVY_API_URL="https://api.test",
        HEVY_API_KEY="test-key",
        API_MAX_RETRIES=2,
        API_RETRY_INITIAL_DELAY=0.0,
        API_RETRY_BACKOFF_FACTOR=2.0,
        API_RETRY_MAX_DELAY=0.0,
        API_TIMEOUT=5,
    )
