"""Shared fixtures for the TalentRank test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest

from talentrank.recruitment.schema import Candidate, Vacancy
from talentrank.recruitment.store import InMemoryStore


def _pdf_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(lines: Iterable[str]) -> bytes:
    """Build a minimal single-page PDF showing ``lines`` in Helvetica."""
    shown = " ".join(f"({_pdf_escape(line)}) Tj T*" for line in lines)
    stream = f"BT /F1 12 Tf 14 TL 72 720 Td {shown} ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"
    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n".encode()
    return bytes(out)


@pytest.fixture
def write_pdf(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a generated PDF résumé into ``tmp_path``."""

    def _write(lines: Iterable[str], name: str = "resume.pdf") -> Path:
        path = tmp_path / name
        path.write_bytes(build_pdf(lines))
        return path

    return _write


@pytest.fixture
def store() -> InMemoryStore:
    """Store with two vacancies and a few applications.

    ``alice`` applied to both vacancies with different skills; ``bob``
    only applied to the backend vacancy.
    """
    backend = Vacancy(id="v-backend", title="Backend Engineer", skills=["Python", "SQL", "Docker"])
    frontend = Vacancy(id="v-frontend", title="Frontend Engineer", skills=["React", "Node", "SQL"])
    candidates = [
        Candidate(
            id="c1", vacancy_id="v-backend", email="alice@example.com",
            first_name="Alice", last_name="Smith",
            parsed_words=["python", "sql"], applied_at="2024-01-01T09:00:00+00:00",
        ),
        Candidate(
            id="c2", vacancy_id="v-backend", email="bob@example.com",
            first_name="Bob", parsed_words=["python", "docker", "sql"],
            applied_at="2024-01-02T09:00:00+00:00",
        ),
        Candidate(
            id="c3", vacancy_id="v-frontend", email="Alice@Example.com",
            first_name="Alice", last_name="Smith",
            parsed_words=["react", "docker"], applied_at="2024-01-03T09:00:00+00:00",
        ),
    ]
    return InMemoryStore([backend, frontend], candidates)
