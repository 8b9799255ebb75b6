"""Tests for the vacancy ranking orchestrator.

The shared ``store`` fixture holds a backend and a frontend vacancy.
Alice applied to both with different résumé skills, Bob only to the
backend one.
"""

from __future__ import annotations

import math

import pytest  # type: ignore

from talentrank.rank.vacancy_rank import (
    FullView,
    RestrictedView,
    can_view_ranking,
    rank_candidates,
    vacancy_details,
)
from talentrank.recruitment.schema import Candidate, Role, Vacancy
from talentrank.recruitment.store import InMemoryStore, VacancyNotFoundError


@pytest.mark.parametrize("role", [None, Role.CANDIDATE, "EMPLOYEE", "candidate", "superuser", ""])
def test_non_hr_callers_get_vacancy_only(store, role) -> None:
    view = vacancy_details(store, "v-backend", role)
    assert isinstance(view, RestrictedView)
    data = view.to_dict()
    assert set(data) == {"vacancy"}
    assert data["vacancy"]["id"] == "v-backend"
    assert data["vacancy"]["skills"] == ["Python", "SQL", "Docker"]


@pytest.mark.parametrize("role", [Role.HR, Role.ADMIN, "hr", " admin "])
def test_hr_and_admin_get_ranking(store, role) -> None:
    view = vacancy_details(store, "v-backend", role)
    assert isinstance(view, FullView)
    assert view.stats == {"totalCandidates": 2}
    assert view.to_dict()["model"] == "bag-of-words tf + cosine"


def test_can_view_ranking() -> None:
    assert can_view_ranking("HR")
    assert can_view_ranking(Role.ADMIN)
    assert not can_view_ranking(Role.EMPLOYEE)
    assert not can_view_ranking(None)
    assert not can_view_ranking("root")


@pytest.mark.parametrize("role", [None, "HR"])
def test_missing_vacancy_raises(store, role) -> None:
    with pytest.raises(VacancyNotFoundError) as excinfo:
        vacancy_details(store, "v-missing", role)
    assert excinfo.value.vacancy_id == "v-missing"


def test_backend_ranking_scores_and_inconsistency(store) -> None:
    view = vacancy_details(store, "v-backend", "HR")
    bob, alice = view.candidates
    assert bob.candidate.id == "c2"
    assert bob.score == pytest.approx(1.0)
    assert bob.inconsistent is False
    assert alice.candidate.id == "c1"
    assert alice.score == pytest.approx(2 / math.sqrt(6))
    assert alice.explanation.overlap == ["python", "sql"]
    assert alice.inconsistent is True
    assert alice.inconsistency.diffs.added == ["python", "sql"]
    assert alice.inconsistency.diffs.missing == ["docker", "react"]


def test_frontend_ranking_uses_case_insensitive_email(store) -> None:
    view = vacancy_details(store, "v-frontend", Role.ADMIN)
    (alice,) = view.candidates
    assert alice.score == pytest.approx(1 / math.sqrt(6))
    assert alice.explanation.overlap == ["react"]
    assert alice.inconsistency.diffs.added == ["docker", "react"]
    assert alice.inconsistency.diffs.missing == ["python", "sql"]


def test_candidate_wire_format(store) -> None:
    data = vacancy_details(store, "v-backend", "HR").to_dict()
    assert set(data) == {"vacancy", "candidates", "stats", "model"}
    bob, alice = data["candidates"]
    assert "diffs" not in bob
    assert bob["inconsistent"] is False
    assert alice["diffs"] == {"added": ["python", "sql"], "missing": ["docker", "react"]}
    for key in ("id", "email", "firstName", "parsedWords", "appliedAt", "score", "explanation"):
        assert key in alice


def test_ranking_does_not_write(store) -> None:
    before = [c.to_dict() for c in store.list_candidates("v-backend") + store.list_candidates("v-frontend")]
    vacancy_details(store, "v-backend", "HR")
    vacancy_details(store, "v-frontend", "HR")
    after = [c.to_dict() for c in store.list_candidates("v-backend") + store.list_candidates("v-frontend")]
    assert before == after


def test_ranking_is_deterministic(store) -> None:
    first = vacancy_details(store, "v-backend", "HR").to_dict()
    second = vacancy_details(store, "v-backend", "HR").to_dict()
    assert first == second


def test_vacancy_without_skills_scores_zero() -> None:
    vacancy = Vacancy(id="v-empty", title="Generalist", skills=[])
    candidates = [
        Candidate(id="a", vacancy_id="v-empty", email="a@example.com", parsed_words=["python"]),
        Candidate(id="b", vacancy_id="v-empty", email="b@example.com", parsed_words=[]),
    ]
    ranked = rank_candidates(vacancy, candidates)
    assert [r.score for r in ranked] == [0.0, 0.0]
    assert [r.candidate.id for r in ranked] == ["a", "b"]
    assert all(r.explanation.overlap == [] for r in ranked)


def test_ties_are_broken_by_application_time() -> None:
    vacancy = Vacancy(id="v1", title="Backend", skills=["Python"])
    store = InMemoryStore(
        [vacancy],
        [
            Candidate(id="undated", vacancy_id="v1", email="u@example.com", parsed_words=["python"]),
            Candidate(
                id="late", vacancy_id="v1", email="l@example.com", parsed_words=["python"],
                applied_at="2024-02-01T00:00:00+00:00",
            ),
            Candidate(
                id="early", vacancy_id="v1", email="e@example.com", parsed_words=["python"],
                applied_at="2024-01-01T00:00:00+00:00",
            ),
        ],
    )
    view = vacancy_details(store, "v1", "HR")
    assert [r.candidate.id for r in view.candidates] == ["early", "late", "undated"]


def test_vacancy_vector_ignores_description() -> None:
    vacancy = Vacancy(id="v1", title="Backend", skills=["Python"], description="Kubernetes and Go")
    candidate = Candidate(id="a", vacancy_id="v1", email="a@example.com", parsed_words=["kubernetes", "go"])
    (ranked,) = rank_candidates(vacancy, [candidate])
    assert ranked.score == 0.0
