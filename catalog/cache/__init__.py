from catalog.cache.exercise_cache import ExerciseCache
from catalog.cache.paging import FetchPage, ThrottledPager

__all__ = ["ExerciseCache", "FetchPage", "ThrottledPager"]
