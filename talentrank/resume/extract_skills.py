"""
Skill extraction from résumé text.

The extractor turns raw résumé text into a set of lowercase skill
tokens.  It works in stages, most specific first:

1. Locate a "skills" section by its header.  Without a header, build
   an ad hoc section from windows of lines around known technology
   keywords.  Without any keyword, the whole text is the section.
2. Match the per‑category term patterns against the section and then
   against the full text.
3. Add single words from the section that belong to the technology
   keyword vocabulary.
4. If nothing matched at all, scan the whole text for the broader
   fallback vocabulary.

The vocabulary itself lives in :mod:`talentrank.resume.skill_patterns`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Pattern, Set

from . import skill_patterns

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"[\w.+-]+@\w+\.[\w.-]+")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")
_HEADER_RES: List[Pattern[str]] = [
    re.compile(rf"^[ \t]*{header}[ \t]*(?::|\r?$)", re.IGNORECASE | re.MULTILINE)
    for header in skill_patterns.SECTION_HEADER_PATTERNS
]
_SECTION_END_RE = re.compile(skill_patterns.SECTION_END_PATTERN, re.MULTILINE)


@dataclass
class SkillsSection:
    """The part of a résumé treated as its skills section.

    ``method`` records how the section was found: ``"header"`` for an
    explicit skills header, ``"window"`` for keyword windows and
    ``"full"`` when the whole text had to be used.
    """

    text: str
    method: str


def normalize_token(token: str) -> str:
    """Lowercase a token and collapse its whitespace."""
    return " ".join(token.split()).lower()


def compile_patterns(table: Mapping[str, Iterable[str]]) -> Dict[str, Pattern[str]]:
    """Compile a category → term patterns table into one regex per category.

    Boundaries are written as lookarounds rather than ``\\b`` so that
    terms ending in symbols such as ``c++`` and ``c#`` still match.
    """
    compiled: Dict[str, Pattern[str]] = {}
    for category, terms in table.items():
        alternatives = "|".join(terms)
        compiled[category] = re.compile(
            rf"(?<![\w])(?:{alternatives})(?![\w+#])", re.IGNORECASE
        )
    return compiled


SKILL_REGEXES = compile_patterns(skill_patterns.SKILL_PATTERNS)


def match_patterns(text: str, patterns: Mapping[str, Pattern[str]]) -> Set[str]:
    """Return every normalized term matched by any category pattern."""
    found: Set[str] = set()
    if not text:
        return found
    for pattern in patterns.values():
        for match in pattern.finditer(text):
            found.add(normalize_token(match.group(0)))
    return found


def _keyword_windows(text: str) -> str:
    lines = text.split("\n")
    window: List[str] = []
    for i, line in enumerate(lines):
        lowered = line.lower()
        if any(keyword in lowered for keyword in skill_patterns.WINDOW_KEYWORDS):
            start = max(0, i - skill_patterns.WINDOW_LINES_BEFORE)
            end = min(len(lines), i + skill_patterns.WINDOW_LINES_AFTER)
            window.extend(lines[start:end])
    return "\n".join(window)


def locate_skills_section(text: str) -> SkillsSection:
    """Find the skills section of a résumé.

    The earliest matching skills header wins.  The section runs from
    just after the header to the next all‑caps header or the end of
    the text.
    """
    header = None
    for header_re in _HEADER_RES:
        match = header_re.search(text)
        if match and (header is None or match.start() < header.start()):
            header = match
    if header is not None:
        start = header.end()
        end_match = _SECTION_END_RE.search(text, start)
        end = end_match.start() if end_match else len(text)
        return SkillsSection(text=text[start:end], method="header")

    window = _keyword_windows(text)
    if window:
        return SkillsSection(text=window, method="window")
    return SkillsSection(text=text, method="full")


def _keyword_words(section: str) -> Set[str]:
    cleaned = _NON_ALNUM_RE.sub(" ", EMAIL_RE.sub(" ", section).lower())
    return {
        word
        for word in cleaned.split()
        if len(word) > 2 and word in skill_patterns.TECH_KEYWORDS
    }


def extract_skills_fallback(text: str) -> Set[str]:
    """Scan the whole text for the broad fallback vocabulary."""
    found: Set[str] = set()
    lowered = text.lower()
    for term in skill_patterns.FALLBACK_TERMS:
        if term in lowered:
            found.add(term)
    for word in text.split():
        cleaned = re.sub(r"[^a-zA-Z0-9]", "", word).lower()
        if len(cleaned) > 2 and cleaned in skill_patterns.FALLBACK_TERMS:
            found.add(cleaned)
    return found


def extract_skills(text: str) -> Set[str]:
    """Extract normalized skill tokens from résumé text.

    Args:
        text: Raw résumé text as produced by the text extractor.

    Returns:
        A set of lowercase skill tokens.  Empty or blank input yields
        an empty set.
    """
    if not text or not text.strip():
        return set()

    section = locate_skills_section(text)
    logger.debug(
        "Skills section located by %s (%d of %d characters)",
        section.method, len(section.text), len(text),
    )

    found = match_patterns(section.text, SKILL_REGEXES)
    found |= match_patterns(text, SKILL_REGEXES)
    found |= _keyword_words(section.text)

    if not found:
        found = extract_skills_fallback(text)
        logger.debug("Pattern extraction found nothing; fallback found %d skills", len(found))

    logger.debug("Extracted %d skills: %s", len(found), ", ".join(sorted(found)))
    return found
