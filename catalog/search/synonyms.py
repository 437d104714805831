from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping


@dataclass(frozen=True)
class ExpandedQuery:
    """Original query tokens plus everything their synonyms add."""

    originals: tuple[str, ...]
    tokens: tuple[str, ...]
    sources: Mapping[str, frozenset[str]] = field(default_factory=dict)

    def is_original(self, token: str) -> bool:
        return token in self.originals


class SynonymTable:
    """Canonical short forms mapped to their longer aliases.

    Lookup is symmetric: a canonical key and any of its aliases all resolve to
    the whole group.
    """

    def __init__(self, entries: Mapping[str, Iterable[str]]) -> None:
        self._entries: dict[str, tuple[str, ...]] = {}
        index: dict[str, list[str]] = {}
        for canonical, aliases in entries.items():
            key = canonical.strip().lower()
            group = tuple(dict.fromkeys(alias.strip().lower() for alias in aliases if alias.strip()))
            self._entries[key] = group
            for term in (key, *group):
                index.setdefault(term, [])
                if key not in index[term]:
                    index[term].append(key)
        self._index = MappingProxyType({term: tuple(keys) for term, keys in index.items()})

    def __contains__(self, token: object) -> bool:
        return token in self._index

    def __len__(self) -> int:
        return len(self._entries)

    def group(self, token: str) -> tuple[str, ...]:
        """Every term sharing an entry with ``token``; just ``token`` when it has none."""
        keys = self._index.get(token)
        if not keys:
            return (token,)
        terms: list[str] = []
        for key in keys:
            terms.append(key)
            terms.extend(self._entries[key])
        return tuple(dict.fromkeys(terms))

    def expand(self, tokens: Iterable[str]) -> ExpandedQuery:
        originals = tuple(tokens)
        expanded: dict[str, None] = {}
        sources: dict[str, frozenset[str]] = {}
        for token in originals:
            group = self.group(token)
            sources[token] = frozenset(group) | {token}
            for term in (token, *group):
                expanded.setdefault(term, None)
        return ExpandedQuery(originals=originals, tokens=tuple(expanded), sources=MappingProxyType(sources))


DEFAULT_SYNONYMS = SynonymTable(
    {
        "db": ("dumbbell", "dumbell", "dumbbells"),
        "bb": ("barbell", "barbells"),
        "machine": ("machines", "smith"),
        "cable": ("cables", "pulley"),
        "lat": ("lats", "latissimus"),
        "bi": ("bicep", "biceps"),
        "tri": ("tricep", "triceps"),
        "leg": ("legs", "quadriceps", "quads", "hamstrings"),
        "chest": ("pec", "pecs", "pectoral", "pectorals"),
        "back": ("upper back", "lower back", "lats"),
        "shoulder": ("shoulders", "delt", "delts", "deltoid", "deltoids"),
    }
)
