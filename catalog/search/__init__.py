from catalog.search.engine import SearchEngine, apply_filters, score_exercise, tokenize
from catalog.search.synonyms import DEFAULT_SYNONYMS, ExpandedQuery, SynonymTable

__all__ = [
    "DEFAULT_SYNONYMS",
    "ExpandedQuery",
    "SearchEngine",
    "SynonymTable",
    "apply_filters",
    "score_exercise",
    "tokenize",
]
