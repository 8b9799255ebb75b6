"""
Résumé text and skill extraction.

This package converts an uploaded résumé into plain text and then into
a set of lowercase skill tokens.  Extraction never raises: a file that
cannot be read simply yields no text and therefore no skills.
"""

from .extract_text import extract_document_text, extract_text  # noqa: F401
from .extract_skills import (  # noqa: F401
    SkillsSection,
    extract_skills,
    locate_skills_section,
    normalize_token,
)
