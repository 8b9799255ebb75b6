"""
TalentRank package.

This package ranks the candidates who applied to a vacancy by how well
their résumé skills match the skills HR authored for the vacancy.  Each
submodule implements one step of the pipeline:

1. **resume** – Extract plain text from an uploaded résumé (PDF or
   plain text) and turn it into a set of normalized skill tokens.
   The tokens are computed once at application time and stored on
   the candidate as ``parsed_words``.
2. **rank** – Build term‑frequency vectors for the vacancy and each
   candidate, score them with cosine similarity, explain the overlap,
   flag candidates whose skills changed across applications and sort
   the result.
3. **recruitment** – Data model (vacancies, candidates, roles), a
   small store used as the persistence collaborator, and the
   apply / re‑apply flow that feeds parsed tokens into the store.
4. **cli** – Command line entry point wiring together the above
   components.

The ranking itself is a pure read over stored data: nothing is
written while a vacancy is ranked.
"""

__version__ = "0.1.0"
