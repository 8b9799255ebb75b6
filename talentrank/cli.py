"""
Command line interface for TalentRank.

This module exposes subcommands for each step of the recruitment
ranking workflow: extracting skills from a résumé, registering
vacancies, applying candidates, ranking a vacancy and printing a
human‑readable report.  The CLI is intentionally lightweight and
delegates the work to the `resume`, `recruitment` and `rank`
packages.  State is kept in a JSON file store whose location comes
from the configuration (see :mod:`talentrank.config`).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List

from .config import Settings, configure_logging, load_settings
from .rank.export import export_ranking_csv, save_view_json
from .rank.vacancy_rank import FullView, vacancy_details
from .recruitment.apply import apply_to_vacancy
from .recruitment.schema import ResumeDocument, Vacancy
from .recruitment.store import JsonFileStore, VacancyNotFoundError
from .resume.extract_skills import extract_skills, locate_skills_section
from .resume.extract_text import extract_document_text

logger = logging.getLogger("talentrank.cli")


def _open_store(settings: Settings) -> JsonFileStore:
    return JsonFileStore(settings.store_path)


def _split_skills(raw: str) -> List[str]:
    return [s.strip() for s in raw.split(",") if s.strip()]


def cmd_resume_parse(args: argparse.Namespace, settings: Settings) -> int:
    """Extract skill tokens from a résumé file and print or save them."""
    document = ResumeDocument(path=args.file)
    text = extract_document_text(document)
    tokens = sorted(extract_skills(text))
    section = locate_skills_section(text)
    payload = {"file": args.file, "section": section.method, "skills": tokens}
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        logger.info("Résumé skills written to %s", args.out)
    else:
        print(json.dumps(payload, indent=2))
    return 0


def cmd_vacancy_add(args: argparse.Namespace, settings: Settings) -> int:
    store = _open_store(settings)
    vacancy = Vacancy(
        id=args.id,
        title=args.title,
        skills=_split_skills(args.skills),
        description=args.description,
        status=args.status,
    )
    store.save_vacancy(vacancy)
    logger.info("Saved vacancy %s with %d skills", vacancy.id, len(vacancy.skills))
    return 0


def cmd_vacancy_list(args: argparse.Namespace, settings: Settings) -> int:
    store = _open_store(settings)
    for vacancy in store.list_vacancies():
        count = len(store.list_candidates(vacancy.id))
        print(f"{vacancy.id}\t{vacancy.status}\t{vacancy.title}\t{count} candidates\t{', '.join(vacancy.skills)}")
    return 0


def cmd_apply(args: argparse.Namespace, settings: Settings) -> int:
    store = _open_store(settings)
    result = apply_to_vacancy(
        store,
        args.vacancy,
        args.email,
        resume_path=args.resume,
        first_name=args.first_name,
        last_name=args.last_name,
        cover_letter=args.cover_letter,
        upload_dir=settings.upload_dir,
    )
    print(json.dumps({"created": result.created, "candidate": result.candidate.to_dict()}, indent=2))
    return 0


def cmd_rank(args: argparse.Namespace, settings: Settings) -> int:
    """Rank a vacancy's candidates and print or save the view."""
    store = _open_store(settings)
    view = vacancy_details(
        store,
        args.vacancy,
        args.role,
        top_contributions=settings.top_contributions,
        diff_limit=settings.diff_limit,
    )
    if args.out:
        save_view_json(view, args.out)
    else:
        print(json.dumps(view.to_dict(), indent=2))
    if args.csv:
        if isinstance(view, FullView):
            export_ranking_csv(view, args.csv)
        else:
            logger.warning("Caller role may not see candidates; CSV export skipped")
    return 0


def cmd_report(args: argparse.Namespace, settings: Settings) -> int:
    """Print a short ranking report."""
    store = _open_store(settings)
    view = vacancy_details(
        store,
        args.vacancy,
        args.role,
        top_contributions=settings.top_contributions,
        diff_limit=settings.diff_limit,
    )
    print(f"{view.vacancy.title} ({view.vacancy.id}) – skills: {', '.join(view.vacancy.skills)}")
    if not isinstance(view, FullView):
        print("   Candidate ranking is only available to ADMIN and HR.")
        return 0
    limit = args.limit or len(view.candidates)
    for i, ranked in enumerate(view.candidates[:limit]):
        name = ranked.candidate.full_name or ranked.candidate.email
        print(f"{i+1:02d}. {name} <{ranked.candidate.email}> – {ranked.score:.2%}")
        print(f"   Overlap: {', '.join(ranked.explanation.overlap) or '-'}")
        diffs = ranked.inconsistency.diffs
        if diffs is not None:
            print(f"   Inconsistent: added {', '.join(diffs.added) or '-'}; missing {', '.join(diffs.missing) or '-'}")
        print()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="talentrank", description="TalentRank CLI")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--store", help="Path to the JSON store (overrides config)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Resume parse
    resume_parser = subparsers.add_parser("resume", help="Résumé related commands")
    resume_sub = resume_parser.add_subparsers(dest="subcommand", required=True)
    parse_resume_cmd = resume_sub.add_parser("parse", help="Extract skills from a résumé file")
    parse_resume_cmd.add_argument("--file", required=True, help="Path to résumé file (pdf or txt)")
    parse_resume_cmd.add_argument("--out", help="Path to output JSON file")
    parse_resume_cmd.set_defaults(func=cmd_resume_parse)

    # Vacancies
    vacancy_parser = subparsers.add_parser("vacancy", help="Vacancy commands")
    vacancy_sub = vacancy_parser.add_subparsers(dest="subcommand", required=True)
    add_cmd = vacancy_sub.add_parser("add", help="Create or replace a vacancy")
    add_cmd.add_argument("--id", required=True, help="Vacancy id")
    add_cmd.add_argument("--title", required=True, help="Vacancy title")
    add_cmd.add_argument("--skills", default="", help="Comma separated skills")
    add_cmd.add_argument("--description", help="Vacancy description")
    add_cmd.add_argument("--status", default="OPEN", choices=["OPEN", "ON_HOLD", "CLOSED"])
    add_cmd.set_defaults(func=cmd_vacancy_add)
    list_cmd = vacancy_sub.add_parser("list", help="List vacancies")
    list_cmd.set_defaults(func=cmd_vacancy_list)

    # Apply
    apply_cmd = subparsers.add_parser("apply", help="Apply (or re-apply) to a vacancy")
    apply_cmd.add_argument("--vacancy", required=True, help="Vacancy id")
    apply_cmd.add_argument("--email", required=True, help="Applicant email")
    apply_cmd.add_argument("--resume", help="Résumé file (relative paths resolve against the upload dir)")
    apply_cmd.add_argument("--first-name", dest="first_name")
    apply_cmd.add_argument("--last-name", dest="last_name")
    apply_cmd.add_argument("--cover-letter", dest="cover_letter")
    apply_cmd.set_defaults(func=cmd_apply)

    # Rank
    rank_cmd = subparsers.add_parser("rank", help="Rank the candidates of a vacancy")
    rank_cmd.add_argument("--vacancy", required=True, help="Vacancy id")
    rank_cmd.add_argument("--role", help="Caller role (ADMIN, HR, EMPLOYEE, CANDIDATE)")
    rank_cmd.add_argument("--out", help="Write the view as JSON to this path")
    rank_cmd.add_argument("--csv", help="Also export the ranking as CSV")
    rank_cmd.set_defaults(func=cmd_rank)

    # Report
    report_cmd = subparsers.add_parser("report", help="Print a ranking report")
    report_cmd.add_argument("--vacancy", required=True, help="Vacancy id")
    report_cmd.add_argument("--role", default="HR", help="Caller role (default: HR)")
    report_cmd.add_argument("--limit", type=int, default=20, help="Number of candidates to display")
    report_cmd.set_defaults(func=cmd_report)
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings(args.config)
    if args.store:
        settings.store_path = args.store
    configure_logging(settings)
    try:
        return args.func(args, settings)
    except VacancyNotFoundError as exc:
        logger.error("%s", exc)
        return 1
    except ValueError as exc:
        logger.error("Invalid input: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
