"""
Cosine similarity scoring and match explanations.

Scores compare a vacancy vector with a candidate vector.  Each score
comes with an explanation listing the overlapping tokens and how much
each one contributed to the dot product, so HR can see why a
candidate ranks where it does.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, TypeVar

from .vectorize import TermVector

logger = logging.getLogger(__name__)

TOP_CONTRIBUTIONS = 15

T = TypeVar("T")


def cosine_similarity(a: TermVector, b: TermVector) -> float:
    """Cosine similarity of two term‑frequency vectors.

    Returns ``0.0`` when either vector has zero magnitude.  The result
    is clamped to ``[0, 1]``; frequencies are never negative so only
    floating point noise is clipped.
    """
    norm_a = a.squared_norm()
    norm_b = b.squared_norm()
    if not norm_a or not norm_b:
        return 0.0
    # Tokens missing from either side contribute nothing to the dot product.
    dot = sum(a[token] * b[token] for token in a if token in b)
    score = dot / math.sqrt(norm_a * norm_b)
    return max(0.0, min(1.0, score))


@dataclass
class Contribution:
    token: str
    vacancy_weight: int
    candidate_weight: int
    product: int

    def to_dict(self) -> Dict[str, object]:
        return {
            "token": self.token,
            "vacancyWeight": self.vacancy_weight,
            "candidateWeight": self.candidate_weight,
            "product": self.product,
        }


@dataclass
class Explanation:
    """Why a candidate scored what it scored.

    Attributes:
        overlap: Tokens present in both vectors, in candidate order.
        contributions: Per‑token weight products, largest first.
        vacancy_tokens: Number of distinct tokens in the vacancy vector.
        candidate_tokens: Number of distinct tokens in the candidate vector.
    """

    overlap: List[str] = field(default_factory=list)
    contributions: List[Contribution] = field(default_factory=list)
    vacancy_tokens: int = 0
    candidate_tokens: int = 0

    def to_dict(self) -> Dict[str, object]:
        return {
            "overlap": list(self.overlap),
            "contributions": [c.to_dict() for c in self.contributions],
            "vacancyTokens": self.vacancy_tokens,
            "candidateTokens": self.candidate_tokens,
        }


def explain_match(
    vacancy_vector: TermVector,
    candidate_vector: TermVector,
    top_n: int = TOP_CONTRIBUTIONS,
) -> Explanation:
    """Explain the overlap between a vacancy and a candidate vector.

    Args:
        vacancy_vector: Vector built from the vacancy's skills.
        candidate_vector: Vector built from the candidate's parsed tokens.
        top_n: Maximum number of contributions to keep.

    Returns:
        An :class:`Explanation`.  Contributions are sorted by descending
        product; equal products keep overlap order.
    """
    overlap = [token for token in candidate_vector if token in vacancy_vector]
    contributions = [
        Contribution(
            token=token,
            vacancy_weight=vacancy_vector[token],
            candidate_weight=candidate_vector[token],
            product=vacancy_vector[token] * candidate_vector[token],
        )
        for token in overlap
    ]
    contributions.sort(key=lambda c: c.product, reverse=True)
    return Explanation(
        overlap=overlap,
        contributions=contributions[:top_n],
        vacancy_tokens=len(vacancy_vector),
        candidate_tokens=len(candidate_vector),
    )


def order_by_score(items: Sequence[T]) -> List[T]:
    """Sort scored items by descending ``score``.

    Ties are broken by ``applied_at`` ascending.  Items without a
    timestamp come after timestamped ones and otherwise keep the order
    they were given in.
    """
    return sorted(
        items,
        key=lambda item: (
            -item.score,  # type: ignore[attr-defined]
            item.applied_at is None,  # type: ignore[attr-defined]
            item.applied_at or "",  # type: ignore[attr-defined]
        ),
    )
