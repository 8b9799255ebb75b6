"""
Ranking subsystem for TalentRank.

The `rank` package turns stored candidate tokens into a ranked,
explained candidate list for one vacancy.  The stages are:

* `vectorize` – Builds bag‑of‑words term‑frequency vectors from the
  vacancy's skills and from each candidate's parsed tokens.
* `similarity` – Computes cosine similarity between the two vectors
  and explains which tokens contributed.
* `inconsistency` – Flags applicants whose parsed skills differ
  between their applications.
* `vacancy_rank` – Orchestrates the above for a vacancy and decides
  what the caller is allowed to see.
* `export` – Writes ranked views to JSON or CSV.
"""

from .vectorize import TermVector, term_frequencies  # noqa: F401
from .similarity import cosine_similarity, explain_match, order_by_score  # noqa: F401
from .inconsistency import collect_baselines, detect_inconsistency  # noqa: F401
from .vacancy_rank import (  # noqa: F401
    FullView,
    RankedCandidate,
    RestrictedView,
    ViewResult,
    can_view_ranking,
    rank_candidates,
    vacancy_details,
)
