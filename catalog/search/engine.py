import re
from typing import Iterable

from loguru import logger

from catalog.cache.exercise_cache import ExerciseCache
from catalog.schemas import ExerciseTemplate
from catalog.search.synonyms import DEFAULT_SYNONYMS, ExpandedQuery, SynonymTable

TITLE_SUBSTRING_SCORE = (50, 30)
TITLE_WORD_SCORE = (100, 60)
TITLE_START_BONUS = 30
TITLE_EARLY_BONUS = 15
TITLE_EARLY_WINDOW = 10
TYPE_SCORE = (40, 25)
PRIMARY_MUSCLE_SCORE = (30, 20)
SECONDARY_MUSCLE_SCORE = (20, 10)
FULL_COVERAGE_BONUS = 50
PHRASE_BONUS = 200


def tokenize(query: str) -> list[str]:
    return query.lower().strip().split()


def _weight(scores: tuple[int, int], original: bool) -> int:
    return scores[0] if original else scores[1]


def _title_score(title: str, token: str, original: bool) -> int:
    index = title.find(token)
    if index < 0:
        return 0
    if re.search(rf"\b{re.escape(token)}\b", title):
        score = _weight(TITLE_WORD_SCORE, original)
    else:
        score = _weight(TITLE_SUBSTRING_SCORE, original)
    if index == 0:
        score += TITLE_START_BONUS
    elif index < TITLE_EARLY_WINDOW:
        score += TITLE_EARLY_BONUS
    return score


def score_exercise(exercise: ExerciseTemplate, expanded: ExpandedQuery) -> float:
    """Relevance of ``exercise`` for an expanded query; zero means no match."""
    title = exercise.title.lower()
    exercise_type = exercise.type.lower()
    primary = exercise.primary_muscle_group.lower()
    secondary = [muscle.lower() for muscle in exercise.secondary_muscle_groups]

    score = 0.0
    matched: set[str] = set()
    for token in expanded.tokens:
        original = expanded.is_original(token)
        hit = False

        title_score = _title_score(title, token, original)
        if title_score:
            score += title_score
            hit = True
        if token in exercise_type:
            score += _weight(TYPE_SCORE, original)
            hit = True
        if token in primary:
            score += _weight(PRIMARY_MUSCLE_SCORE, original)
            hit = True
        if any(token in muscle for muscle in secondary):
            score += _weight(SECONDARY_MUSCLE_SCORE, original)
            hit = True

        if hit:
            matched.add(token)

    total = len(expanded.originals)
    covered = sum(1 for token in set(expanded.originals) if expanded.sources.get(token, {token}) & matched)
    if covered < total:
        score *= covered / total
    elif total > 1:
        score += FULL_COVERAGE_BONUS

    if " ".join(expanded.originals) in title:
        score += PHRASE_BONUS

    return score


def _matches_muscle_group(exercise: ExerciseTemplate, muscle_group: str) -> bool:
    if exercise.primary_muscle_group.lower() == muscle_group:
        return True
    return any(muscle.lower() == muscle_group for muscle in exercise.secondary_muscle_groups)


def apply_filters(
    exercises: Iterable[ExerciseTemplate],
    *,
    muscle_group: str | None = None,
    exercise_type: str | None = None,
) -> list[ExerciseTemplate]:
    results = list(exercises)
    if muscle_group:
        normalized_muscle = muscle_group.lower()
        results = [exercise for exercise in results if _matches_muscle_group(exercise, normalized_muscle)]
    if exercise_type:
        normalized_type = exercise_type.lower()
        results = [exercise for exercise in results if exercise.type.lower() == normalized_type]
    return results


class SearchEngine:
    def __init__(self, cache: ExerciseCache, synonyms: SynonymTable = DEFAULT_SYNONYMS) -> None:
        self.cache = cache
        self.synonyms = synonyms

    def rank(self, query: str) -> list[tuple[ExerciseTemplate, float]]:
        """Scored snapshot entries for ``query``, best first; unscored snapshot order for an empty query."""
        items = self.cache.get_items()
        tokens = tokenize(query)
        if not tokens:
            return [(exercise, 0.0) for exercise in items]

        expanded = self.synonyms.expand(tokens)
        scored = [(exercise, score_exercise(exercise, expanded)) for exercise in items]
        ranked = sorted((pair for pair in scored if pair[1] > 0), key=lambda pair: pair[1], reverse=True)
        logger.debug(f"search tokens={list(expanded.tokens)} matched={len(ranked)}/{len(items)}")
        return ranked

    def search(
        self,
        query: str,
        *,
        muscle_group: str | None = None,
        exercise_type: str | None = None,
    ) -> list[ExerciseTemplate]:
        ranked = [exercise for exercise, _ in self.rank(query)]
        return apply_filters(ranked, muscle_group=muscle_group, exercise_type=exercise_type)
