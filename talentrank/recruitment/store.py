"""
Storage collaborator for vacancies and candidates.

The ranking core only reads through the :class:`CandidateStore`
interface, so any relational or document store can sit behind it.
Two small implementations are provided: an in‑memory store used by
tests and embedding applications, and a JSON file store used by the
command line interface.
"""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from .schema import Candidate, Vacancy

logger = logging.getLogger(__name__)


class VacancyNotFoundError(LookupError):
    """Raised when a vacancy id does not resolve to a stored vacancy."""

    def __init__(self, vacancy_id: str) -> None:
        super().__init__(f"Vacancy not found: {vacancy_id}")
        self.vacancy_id = vacancy_id


class CandidateStore(ABC):
    """Abstract base class for vacancy/candidate storage."""

    @abstractmethod
    def get_vacancy(self, vacancy_id: str) -> Optional[Vacancy]:
        raise NotImplementedError

    @abstractmethod
    def list_vacancies(self) -> List[Vacancy]:
        raise NotImplementedError

    @abstractmethod
    def save_vacancy(self, vacancy: Vacancy) -> Vacancy:
        raise NotImplementedError

    @abstractmethod
    def list_candidates(self, vacancy_id: str) -> List[Candidate]:
        """Return the candidates of one vacancy in storage order."""
        raise NotImplementedError

    @abstractmethod
    def find_candidate(self, vacancy_id: str, email: str) -> Optional[Candidate]:
        raise NotImplementedError

    @abstractmethod
    def find_other_applications(self, emails: Iterable[str], exclude_vacancy_id: str) -> List[Candidate]:
        """Return applications by any of ``emails`` to vacancies other than ``exclude_vacancy_id``.

        Emails are compared case‑insensitively.
        """
        raise NotImplementedError

    @abstractmethod
    def email_seen(self, email: str) -> bool:
        """Whether any application, for any vacancy, uses ``email``."""
        raise NotImplementedError

    @abstractmethod
    def save_candidate(self, candidate: Candidate) -> Candidate:
        """Insert a candidate, or replace the stored one with the same id."""
        raise NotImplementedError


class InMemoryStore(CandidateStore):
    """Store keeping vacancies and candidates in insertion‑ordered lists."""

    def __init__(
        self,
        vacancies: Optional[Iterable[Vacancy]] = None,
        candidates: Optional[Iterable[Candidate]] = None,
    ) -> None:
        self._vacancies: List[Vacancy] = list(vacancies or [])
        self._candidates: List[Candidate] = list(candidates or [])

    def get_vacancy(self, vacancy_id: str) -> Optional[Vacancy]:
        for vacancy in self._vacancies:
            if vacancy.id == vacancy_id:
                return vacancy
        return None

    def list_vacancies(self) -> List[Vacancy]:
        return list(self._vacancies)

    def save_vacancy(self, vacancy: Vacancy) -> Vacancy:
        for i, existing in enumerate(self._vacancies):
            if existing.id == vacancy.id:
                self._vacancies[i] = vacancy
                break
        else:
            self._vacancies.append(vacancy)
        self._flush()
        return vacancy

    def list_candidates(self, vacancy_id: str) -> List[Candidate]:
        return [c for c in self._candidates if c.vacancy_id == vacancy_id]

    def find_candidate(self, vacancy_id: str, email: str) -> Optional[Candidate]:
        key = email.lower()
        for candidate in self._candidates:
            if candidate.vacancy_id == vacancy_id and candidate.email.lower() == key:
                return candidate
        return None

    def find_other_applications(self, emails: Iterable[str], exclude_vacancy_id: str) -> List[Candidate]:
        keys = {email.lower() for email in emails}
        if not keys:
            return []
        return [
            c
            for c in self._candidates
            if c.vacancy_id != exclude_vacancy_id and c.email.lower() in keys
        ]

    def email_seen(self, email: str) -> bool:
        key = email.lower()
        return any(c.email.lower() == key for c in self._candidates)

    def save_candidate(self, candidate: Candidate) -> Candidate:
        for i, existing in enumerate(self._candidates):
            if existing.id == candidate.id:
                self._candidates[i] = candidate
                break
        else:
            self._candidates.append(candidate)
        self._flush()
        return candidate

    def _flush(self) -> None:
        """Persist after a write; nothing to do in memory."""


class JsonFileStore(InMemoryStore):
    """In‑memory store mirrored to a JSON document on disk.

    The document has two lists, ``vacancies`` and ``candidates``, in
    the camelCase wire format of :mod:`talentrank.recruitment.schema`.
    A missing file is treated as an empty store and created on the
    first write.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        vacancies: List[Vacancy] = []
        candidates: List[Candidate] = []
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f) or {}
            vacancies = [Vacancy.from_dict(v) for v in data.get("vacancies", [])]
            candidates = [Candidate.from_dict(c) for c in data.get("candidates", [])]
            logger.debug(
                "Loaded %d vacancies and %d candidates from %s",
                len(vacancies), len(candidates), path,
            )
        super().__init__(vacancies, candidates)

    def to_dict(self) -> Dict[str, object]:
        return {
            "vacancies": [v.to_dict() for v in self._vacancies],
            "candidates": [c.to_dict() for c in self._candidates],
        }

    def _flush(self) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.debug("Wrote store to %s", self.path)
