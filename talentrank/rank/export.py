"""
Export of ranked candidate lists.

Writes a :class:`FullView` either as the JSON document returned to the
application layer or as a flat CSV table for spreadsheets.
"""

from __future__ import annotations

import json
import logging

import pandas as pd

from .vacancy_rank import FullView, ViewResult

logger = logging.getLogger(__name__)

RANKING_COLUMNS = [
    "rank",
    "candidate_id",
    "email",
    "name",
    "score",
    "overlap",
    "inconsistent",
    "added",
    "missing",
]


def ranking_frame(view: FullView) -> pd.DataFrame:
    """Flatten a ranked view into one row per candidate."""
    rows = []
    for position, ranked in enumerate(view.candidates, start=1):
        diffs = ranked.inconsistency.diffs
        rows.append(
            {
                "rank": position,
                "candidate_id": ranked.candidate.id,
                "email": ranked.candidate.email,
                "name": ranked.candidate.full_name,
                "score": round(ranked.score, 4),
                "overlap": "; ".join(ranked.explanation.overlap),
                "inconsistent": ranked.inconsistent,
                "added": "; ".join(diffs.added) if diffs else "",
                "missing": "; ".join(diffs.missing) if diffs else "",
            }
        )
    return pd.DataFrame(rows, columns=RANKING_COLUMNS)


def export_ranking_csv(view: FullView, out_path: str) -> pd.DataFrame:
    """Write a ranked view to CSV and return the written frame."""
    df = ranking_frame(view)
    df.to_csv(out_path, index=False)
    logger.info("Exported %d ranked candidates to %s", len(df), out_path)
    return df


def save_view_json(view: ViewResult, out_path: str) -> None:
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(view.to_dict(), f, indent=2)
    logger.info("Wrote vacancy view to %s", out_path)
