"""
Apply / re‑apply flow.

This is the one place where skill tokens are written.  Each
application runs the résumé through the text and skill extractors and
stores the resulting ``parsed_words`` on the candidate.  Applying a
second time to the same vacancy with the same email updates the
existing candidate instead of creating a new one.
"""

from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from ..resume.extract_skills import extract_skills
from ..resume.extract_text import extract_document_text
from .schema import Candidate, ResumeDocument
from .store import CandidateStore, VacancyNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class ApplicationResult:
    candidate: Candidate
    created: bool


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


def parse_resume_tokens(document: ResumeDocument) -> List[str]:
    """Extract the sorted skill tokens of a résumé document.

    A missing, unreadable or unsupported file yields an empty list.
    """
    if not os.path.exists(document.path):
        logger.warning("Résumé file not found: %s", document.path)
        return []
    text = extract_document_text(document)
    if not text.strip():
        logger.warning("No text extracted from résumé file: %s", document.path)
        return []
    tokens = sorted(extract_skills(text))
    logger.info(
        "Extracted %d skills from résumé %s: %s",
        len(tokens), document.original_filename or document.path, ", ".join(tokens[:10]),
    )
    return tokens


def _resolve_resume(resume_path: str, upload_dir: Optional[str]) -> ResumeDocument:
    path = resume_path
    if upload_dir and not os.path.isabs(path):
        path = os.path.join(upload_dir, path)
    return ResumeDocument(path=os.path.abspath(path), original_filename=os.path.basename(resume_path))


def apply_to_vacancy(
    store: CandidateStore,
    vacancy_id: str,
    email: str,
    resume_path: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    cover_letter: Optional[str] = None,
    upload_dir: Optional[str] = None,
) -> ApplicationResult:
    """Create or update the application of ``email`` to a vacancy.

    Args:
        store: Candidate store to read from and write to.
        vacancy_id: Vacancy being applied to.
        email: Applicant email; trimmed and lowercased before use.
        resume_path: Uploaded résumé.  Relative paths are resolved
            against ``upload_dir``.
        first_name: Optional first name.
        last_name: Optional last name.
        cover_letter: Optional cover letter text.
        upload_dir: Directory holding uploaded résumés.

    Returns:
        An :class:`ApplicationResult` with the stored candidate and
        whether it was newly created.

    Raises:
        VacancyNotFoundError: If the vacancy does not exist.
        ValueError: If ``email`` is blank.
    """
    if store.get_vacancy(vacancy_id) is None:
        raise VacancyNotFoundError(vacancy_id)
    email = (email or "").strip().lower()
    if not email:
        raise ValueError("Email is required")
    first_name = (first_name or "").strip()
    last_name = (last_name or "").strip()

    parsed_words: List[str] = []
    stored_resume: Optional[str] = None
    if resume_path:
        document = _resolve_resume(resume_path, upload_dir)
        stored_resume = resume_path
        parsed_words = parse_resume_tokens(document)

    existing = store.find_candidate(vacancy_id, email)
    if existing is not None:
        existing.first_name = first_name or existing.first_name
        existing.last_name = last_name or existing.last_name
        existing.cover_letter = cover_letter if cover_letter is not None else existing.cover_letter
        existing.resume_path = stored_resume or existing.resume_path
        if parsed_words:
            existing.parsed_words = parsed_words
        store.save_candidate(existing)
        logger.info("Updated application %s of %s to vacancy %s", existing.id, email, vacancy_id)
        return ApplicationResult(candidate=existing, created=False)

    candidate = Candidate(
        id=uuid.uuid4().hex,
        vacancy_id=vacancy_id,
        email=email,
        first_name=first_name,
        last_name=last_name,
        status="APPLIED",
        cover_letter=cover_letter,
        resume_path=stored_resume,
        parsed_words=parsed_words,
        duplicate=store.email_seen(email),
        applied_at=_utcnow(),
    )
    store.save_candidate(candidate)
    logger.info("Created application %s of %s to vacancy %s", candidate.id, email, vacancy_id)
    return ApplicationResult(candidate=candidate, created=True)
