"""
Vacancy ranking orchestrator.

Ties the ranking stages together for one vacancy request: load the
vacancy and its candidates, build the term‑frequency vectors, score
and explain every candidate, annotate skill inconsistencies across
applications and sort.

Access is decided once, here, rather than by the caller.  Only ADMIN
and HR callers receive the ranked list; everyone else gets the
vacancy metadata alone, because the explanations would reveal other
applicants' skill profiles.  The result is one of two view types,
:class:`RestrictedView` or :class:`FullView`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Union

from ..recruitment.schema import Candidate, Role, Vacancy
from ..recruitment.store import CandidateStore, VacancyNotFoundError
from .inconsistency import (
    MAX_DIFF_TOKENS,
    InconsistencyReport,
    collect_baselines,
    detect_inconsistency,
)
from .similarity import TOP_CONTRIBUTIONS, Explanation, cosine_similarity, explain_match, order_by_score
from .vectorize import TermVector

logger = logging.getLogger(__name__)

MODEL_NAME = "bag-of-words tf + cosine"
FULL_VIEW_ROLES = frozenset({Role.ADMIN, Role.HR})


@dataclass
class RankedCandidate:
    """A candidate with its score, explanation and inconsistency report."""

    candidate: Candidate
    score: float
    explanation: Explanation
    inconsistency: InconsistencyReport = field(default_factory=InconsistencyReport)

    @property
    def applied_at(self) -> Optional[str]:
        return self.candidate.applied_at

    @property
    def inconsistent(self) -> bool:
        return self.inconsistency.inconsistent

    def to_dict(self) -> Dict[str, object]:
        data = self.candidate.to_dict()
        data["score"] = self.score
        data["explanation"] = self.explanation.to_dict()
        data["inconsistent"] = self.inconsistency.inconsistent
        if self.inconsistency.diffs is not None:
            data["diffs"] = self.inconsistency.diffs.to_dict()
        return data


@dataclass
class RestrictedView:
    """Vacancy metadata only."""

    vacancy: Vacancy

    def to_dict(self) -> Dict[str, object]:
        return {"vacancy": self.vacancy.to_dict()}


@dataclass
class FullView:
    """Vacancy metadata plus the ranked candidate list."""

    vacancy: Vacancy
    candidates: List[RankedCandidate] = field(default_factory=list)
    model: str = MODEL_NAME

    @property
    def stats(self) -> Dict[str, int]:
        return {"totalCandidates": len(self.candidates)}

    def to_dict(self) -> Dict[str, object]:
        return {
            "vacancy": self.vacancy.to_dict(),
            "candidates": [c.to_dict() for c in self.candidates],
            "stats": self.stats,
            "model": self.model,
        }


ViewResult = Union[RestrictedView, FullView]


def can_view_ranking(role: Union[Role, str, None]) -> bool:
    """Whether a caller with ``role`` may see the ranked candidates.

    Unknown role names are treated like an unauthenticated caller.
    """
    return Role.parse(role) in FULL_VIEW_ROLES


def rank_candidates(
    vacancy: Vacancy,
    candidates: Iterable[Candidate],
    other_applications: Iterable[Candidate] = (),
    top_contributions: int = TOP_CONTRIBUTIONS,
    diff_limit: int = MAX_DIFF_TOKENS,
) -> List[RankedCandidate]:
    """Score, explain and sort the candidates of a vacancy.

    Args:
        vacancy: The vacancy whose HR‑authored skills form the query vector.
        candidates: Applications to ``vacancy``, in storage order.
        other_applications: Applications by the same emails to other
            vacancies; they form the inconsistency baselines.
        top_contributions: Maximum contributions kept per explanation.
        diff_limit: Maximum tokens kept per inconsistency diff list.

    Returns:
        Ranked candidates, best score first.
    """
    vacancy_vector = TermVector.from_vacancy_skills(vacancy.skills)
    baselines = collect_baselines(other_applications)
    ranked: List[RankedCandidate] = []
    for candidate in candidates:
        candidate_vector = TermVector.from_candidate_tokens(candidate.parsed_words)
        report = detect_inconsistency(
            candidate.parsed_words,
            baselines.get(candidate.email.lower(), set()),
            limit=diff_limit,
        )
        ranked.append(
            RankedCandidate(
                candidate=candidate,
                score=cosine_similarity(vacancy_vector, candidate_vector),
                explanation=explain_match(vacancy_vector, candidate_vector, top_contributions),
                inconsistency=report,
            )
        )
    return order_by_score(ranked)


def vacancy_details(
    store: CandidateStore,
    vacancy_id: str,
    caller_role: Union[Role, str, None] = None,
    top_contributions: int = TOP_CONTRIBUTIONS,
    diff_limit: int = MAX_DIFF_TOKENS,
) -> ViewResult:
    """Return the vacancy view appropriate for the caller.

    Args:
        store: Where vacancies and candidates are read from.
        vacancy_id: Id of the vacancy to rank.
        caller_role: Role of the caller, or ``None`` when unauthenticated.
        top_contributions: Maximum contributions kept per explanation.
        diff_limit: Maximum tokens kept per inconsistency diff list.

    Returns:
        A :class:`FullView` for ADMIN and HR callers, otherwise a
        :class:`RestrictedView`.

    Raises:
        VacancyNotFoundError: If the vacancy does not exist.
    """
    vacancy = store.get_vacancy(vacancy_id)
    if vacancy is None:
        raise VacancyNotFoundError(vacancy_id)
    role = Role.parse(caller_role)
    logger.info(
        "Vacancy %s requested by role %s",
        vacancy_id, role.value if role else "unauthenticated",
    )
    if role not in FULL_VIEW_ROLES:
        if caller_role is not None and role is None:
            logger.warning("Unknown caller role %r; returning vacancy only", caller_role)
        return RestrictedView(vacancy=vacancy)

    candidates = store.list_candidates(vacancy_id)
    emails = {c.email.lower() for c in candidates}
    others = store.find_other_applications(emails, exclude_vacancy_id=vacancy_id)
    ranked = rank_candidates(
        vacancy,
        candidates,
        others,
        top_contributions=top_contributions,
        diff_limit=diff_limit,
    )
    logger.info("Ranked %d candidates for vacancy %s", len(ranked), vacancy_id)
    return FullView(vacancy=vacancy, candidates=ranked)
