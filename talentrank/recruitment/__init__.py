"""
Recruitment data model, storage and the apply flow.

The ranking core reads vacancies and candidates through the store
defined here.  The apply flow is the only writer of a candidate's
parsed résumé tokens.
"""

from .schema import Candidate, ResumeDocument, Role, Vacancy  # noqa: F401
from .store import (  # noqa: F401
    CandidateStore,
    InMemoryStore,
    JsonFileStore,
    VacancyNotFoundError,
)
from .apply import ApplicationResult, apply_to_vacancy, parse_resume_tokens  # noqa: F401
