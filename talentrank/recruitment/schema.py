# recruitment/schema.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

VACANCY_STATUSES = ("OPEN", "ON_HOLD", "CLOSED")
CANDIDATE_STATUSES = ("APPLIED", "SCREENING", "INTERVIEW", "OFFER", "HIRED", "REJECTED")


class Role(str, Enum):
    ADMIN = "ADMIN"
    HR = "HR"
    EMPLOYEE = "EMPLOYEE"
    CANDIDATE = "CANDIDATE"

    @classmethod
    def parse(cls, value: object) -> Optional["Role"]:
        """Coerce a role name to a :class:`Role`; unknown values give ``None``."""
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class ResumeDocument:
    path: str
    original_filename: str = ""

    @property
    def extension(self) -> str:
        name = self.original_filename or self.path
        return os.path.splitext(name)[1].lower()

    @property
    def kind(self) -> str:      # 'pdf' | 'txt' | 'other'
        ext = self.extension
        if ext == ".pdf":
            return "pdf"
        if ext == ".txt":
            return "txt"
        return "other"


@dataclass
class Vacancy:
    id: str
    title: str
    skills: List[str] = field(default_factory=list)     # HR-authored, ground truth for ranking
    description: Optional[str] = None
    status: str = "OPEN"
    department_id: Optional[str] = None
    position_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.status not in VACANCY_STATUSES:
            raise ValueError(f"Unknown vacancy status: {self.status!r}")

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "skills": list(self.skills),
            "status": self.status,
            "departmentId": self.department_id,
            "positionId": self.position_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Vacancy":
        return cls(
            id=str(data["id"]),
            title=str(data.get("title", "")),
            skills=list(data.get("skills") or []),
            description=data.get("description"),
            status=str(data.get("status") or "OPEN"),
            department_id=data.get("departmentId"),
            position_id=data.get("positionId"),
        )


@dataclass
class Candidate:
    id: str
    vacancy_id: str
    email: str                    # cross-application correlation key
    first_name: str = ""
    last_name: str = ""
    status: str = "APPLIED"
    cover_letter: Optional[str] = None
    resume_path: Optional[str] = None
    parsed_words: List[str] = field(default_factory=list)
    duplicate: bool = False
    applied_at: Optional[str] = None   # ISO8601

    def __post_init__(self) -> None:
        if self.status not in CANDIDATE_STATUSES:
            raise ValueError(f"Unknown candidate status: {self.status!r}")

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def to_dict(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "vacancyId": self.vacancy_id,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "status": self.status,
            "coverLetter": self.cover_letter,
            "resumePath": self.resume_path,
            "parsedWords": list(self.parsed_words),
            "duplicate": self.duplicate,
            "appliedAt": self.applied_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "Candidate":
        return cls(
            id=str(data["id"]),
            vacancy_id=str(data["vacancyId"]),
            email=str(data.get("email", "")),
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
            status=str(data.get("status") or "APPLIED"),
            cover_letter=data.get("coverLetter"),
            resume_path=data.get("resumePath"),
            parsed_words=list(data.get("parsedWords") or []),
            duplicate=bool(data.get("duplicate", False)),
            applied_at=data.get("appliedAt"),
        )
