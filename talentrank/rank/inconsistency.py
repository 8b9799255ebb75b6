"""
Cross‑application skill inconsistency detection.

When the same applicant (same email) applies to several vacancies,
the skills parsed from each submission should agree.  This stage
compares a candidate's current tokens against the union of the tokens
from the applicant's other applications and reports what was added
or dropped.  It is purely an annotation on the ranking output and
never modifies stored tokens.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

from ..recruitment.schema import Candidate
from ..resume.extract_skills import normalize_token

logger = logging.getLogger(__name__)

MAX_DIFF_TOKENS = 10


@dataclass
class SkillDiff:
    added: List[str] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {"added": list(self.added), "missing": list(self.missing)}


@dataclass
class InconsistencyReport:
    inconsistent: bool = False
    diffs: Optional[SkillDiff] = None


def _token_set(tokens: Iterable[str]) -> Set[str]:
    return {key for key in (normalize_token(t) for t in tokens) if key}


def collect_baselines(others: Iterable[Candidate]) -> Dict[str, Set[str]]:
    """Union the parsed tokens of other applications per lowercase email."""
    baselines: Dict[str, Set[str]] = {}
    for other in others:
        key = other.email.lower()
        baselines.setdefault(key, set()).update(_token_set(other.parsed_words))
    return baselines


def detect_inconsistency(
    current: Iterable[str],
    baseline: Iterable[str],
    limit: int = MAX_DIFF_TOKENS,
) -> InconsistencyReport:
    """Compare a candidate's tokens with the baseline from other applications.

    Args:
        current: Tokens parsed for the application being ranked.
        baseline: Union of tokens from the applicant's other applications.
        limit: Maximum number of tokens reported in each diff list.

    Returns:
        An :class:`InconsistencyReport`.  Without a baseline the
        candidate is never flagged.  Diff lists are sorted
        alphabetically before being capped.
    """
    current_set = _token_set(current)
    baseline_set = _token_set(baseline)
    if not baseline_set:
        return InconsistencyReport()
    added = sorted(current_set - baseline_set)
    missing = sorted(baseline_set - current_set)
    if not added and not missing:
        return InconsistencyReport()
    return InconsistencyReport(
        inconsistent=True,
        diffs=SkillDiff(added=added[:limit], missing=missing[:limit]),
    )
