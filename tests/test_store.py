"""Tests for the vacancy/candidate stores."""

from __future__ import annotations

import json
from pathlib import Path

import pytest  # type: ignore

from talentrank.recruitment.schema import Candidate, Role, Vacancy
from talentrank.recruitment.store import JsonFileStore


def test_json_store_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "state" / "store.json"
    store = JsonFileStore(str(path))
    assert store.list_vacancies() == []
    vacancy = Vacancy(id="v1", title="Backend", skills=["Python"], department_id="d1")
    candidate = Candidate(
        id="c1", vacancy_id="v1", email="a@example.com", first_name="Ann",
        parsed_words=["python"], applied_at="2024-01-01T00:00:00+00:00",
    )
    store.save_vacancy(vacancy)
    store.save_candidate(candidate)
    assert path.exists()

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw["vacancies"][0]["departmentId"] == "d1"
    assert raw["candidates"][0]["parsedWords"] == ["python"]

    reopened = JsonFileStore(str(path))
    assert reopened.get_vacancy("v1") == vacancy
    assert reopened.list_candidates("v1") == [candidate]


def test_save_candidate_replaces_same_id(store) -> None:
    candidate = store.find_candidate("v-backend", "bob@example.com")
    candidate.status = "SCREENING"
    store.save_candidate(candidate)
    assert len(store.list_candidates("v-backend")) == 2
    assert store.find_candidate("v-backend", "BOB@example.com").status == "SCREENING"


def test_other_applications_match_email_case_insensitively(store) -> None:
    others = store.find_other_applications({"alice@example.com"}, exclude_vacancy_id="v-backend")
    assert [c.id for c in others] == ["c3"]
    assert store.find_other_applications(set(), exclude_vacancy_id="v-backend") == []


def test_email_seen(store) -> None:
    assert store.email_seen("ALICE@EXAMPLE.COM")
    assert not store.email_seen("nobody@example.com")


def test_unknown_statuses_are_rejected() -> None:
    with pytest.raises(ValueError):
        Vacancy(id="v1", title="Backend", status="ARCHIVED")
    with pytest.raises(ValueError):
        Candidate(id="c1", vacancy_id="v1", email="a@example.com", status="PENDING")


def test_role_parse() -> None:
    assert Role.parse(" hr ") is Role.HR
    assert Role.parse(Role.ADMIN) is Role.ADMIN
    assert Role.parse("owner") is None
    assert Role.parse(None) is None
