"""
Bag‑of‑words term‑frequency vectors.

A :class:`TermVector` maps each normalized token to the number of
times it occurs in one token list.  Frequencies are local to that
list; there is no corpus‑wide (IDF) weighting.

Vectors are built from exactly one source.  A vacancy vector comes
from the skills HR authored for the vacancy and a candidate vector
comes from the tokens parsed out of the candidate's résumé.  The type
deliberately offers no way to add or merge two vectors.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, Iterator, Mapping, Optional

from ..resume.extract_skills import normalize_token

logger = logging.getLogger(__name__)

VACANCY_SOURCE = "vacancy"
CANDIDATE_SOURCE = "candidate"


def term_frequencies(tokens: Iterable[str]) -> Dict[str, int]:
    """Count normalized tokens, keeping first‑occurrence order.

    Blank tokens are dropped.
    """
    counts: Dict[str, int] = {}
    for token in tokens:
        if not isinstance(token, str):
            continue
        key = normalize_token(token)
        if not key:
            continue
        counts[key] = counts.get(key, 0) + 1
    return counts


class TermVector:
    """Immutable token → frequency mapping built from a single source."""

    def __init__(self, counts: Mapping[str, int], source: str) -> None:
        for token, count in counts.items():
            if not isinstance(count, int) or isinstance(count, bool) or count < 0:
                raise ValueError(f"Invalid frequency {count!r} for token {token!r}")
        self._counts: Dict[str, int] = dict(counts)
        self.source = source

    @classmethod
    def from_vacancy_skills(cls, skills: Optional[Iterable[str]]) -> "TermVector":
        """Build a vacancy vector strictly from its HR‑authored skills."""
        return cls(term_frequencies(skills or []), VACANCY_SOURCE)

    @classmethod
    def from_candidate_tokens(cls, tokens: Optional[Iterable[str]]) -> "TermVector":
        """Build a candidate vector strictly from its parsed résumé tokens."""
        return cls(term_frequencies(tokens or []), CANDIDATE_SOURCE)

    def __getitem__(self, token: str) -> int:
        return self._counts.get(token, 0)

    def __contains__(self, token: object) -> bool:
        return token in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermVector):
            return NotImplemented
        return self.source == other.source and self._counts == other._counts

    def __repr__(self) -> str:
        return f"TermVector(source={self.source!r}, counts={self._counts!r})"

    def squared_norm(self) -> int:
        return sum(count * count for count in self._counts.values())

    def magnitude(self) -> float:
        return math.sqrt(self.squared_norm())

    def as_dict(self) -> Dict[str, int]:
        return dict(self._counts)
