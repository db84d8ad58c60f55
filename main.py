"""CLI entry point for the matching and skill-validation engine."""

import argparse
import logging
import sys
from pathlib import Path

from src.assessment.catalog import load_catalog
from src.assessment.credentials import ProfileCredentialStore
from src.assessment.session import AssessmentSession, SessionState
from src.core.config import Settings
from src.core.loader import load_listings
from src.core.schemas import Question
from src.matching.export import export_candidates_json, export_listings_json
from src.matching.ranker import rank, rank_candidates
from src.matching.scorer import explain
from src.profile.schema import CandidateProfile

DEFAULT_CONFIG = "config/settings.yaml"

logger = logging.getLogger(__name__)


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help=f"Path to settings YAML file (default: {DEFAULT_CONFIG})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Match candidates to jobs and validate skills through assessments",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- recommend subcommand ---
    recommend_parser = subparsers.add_parser(
        "recommend", help="Rank job listings for a candidate profile",
    )
    recommend_parser.add_argument("--profile", required=True, help="Path to profile YAML")
    recommend_parser.add_argument("--listings", required=True, help="Path to listings YAML")
    recommend_parser.add_argument("--limit", type=int, help="Number of results to show")
    recommend_parser.add_argument(
        "--export", choices=["json"], help="Export results to format (json)",
    )
    _add_common(recommend_parser)

    # --- candidates subcommand ---
    candidates_parser = subparsers.add_parser(
        "candidates", help="Rank candidate profiles for one job listing",
    )
    candidates_parser.add_argument("--listings", required=True, help="Path to listings YAML")
    candidates_parser.add_argument("--job-id", required=True, help="ID of the listing")
    candidates_parser.add_argument(
        "--profile",
        action="append",
        required=True,
        dest="profiles",
        help="Path to a profile YAML (repeatable)",
    )
    candidates_parser.add_argument("--limit", type=int, help="Number of results to show")
    candidates_parser.add_argument(
        "--export", choices=["json"], help="Export results to format (json)",
    )
    _add_common(candidates_parser)

    # --- skills subcommand ---
    skills_parser = subparsers.add_parser("skills", help="List assessable skills")
    skills_parser.add_argument("--profile", help="Mark skills validated in this profile")
    _add_common(skills_parser)

    # --- assess subcommand ---
    assess_parser = subparsers.add_parser(
        "assess", help="Take a skill assessment and record the badge on a pass",
    )
    assess_parser.add_argument("--profile", required=True, help="Path to profile YAML")
    assess_parser.add_argument("--skill", required=True, help="Skill to assess")
    _add_common(assess_parser)

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_settings(path: str) -> Settings:
    """Load settings; a missing default config file means built-in defaults."""
    if path == DEFAULT_CONFIG and not Path(path).exists():
        logger.debug("No config at %s - using defaults", path)
        return Settings()
    return Settings.from_yaml(path)


def cmd_recommend(args: argparse.Namespace, settings: Settings) -> None:
    profile = CandidateProfile.from_yaml(args.profile)
    listings = load_listings(args.listings)
    results = rank(
        profile, listings, args.limit, config=settings.scoring, ranking=settings.ranking,
    )

    if args.export == "json":
        print(export_listings_json(results))
        return

    print(f"Top {len(results)} of {len(listings)} listings for {profile.name or args.profile}:")
    for position, s in enumerate(results, start=1):
        listing = s.listing
        breakdown = explain(profile, listing, settings.scoring)
        featured = " [featured]" if listing.featured else ""
        print(f"  {position:>2}. [{s.score:>3}] {listing.title} @ {listing.company} "
              f"(id={listing.id}){featured}")
        if breakdown.matched_skills:
            print(f"      Matched skills: {', '.join(breakdown.matched_skills)}")


def cmd_candidates(args: argparse.Namespace, settings: Settings) -> None:
    listings = load_listings(args.listings)
    listing = next((item for item in listings if str(item.id) == args.job_id), None)
    if listing is None:
        msg = f"No listing with id '{args.job_id}' in {args.listings}"
        raise ValueError(msg)
    profiles = [CandidateProfile.from_yaml(p) for p in args.profiles]
    results = rank_candidates(
        listing, profiles, args.limit, config=settings.scoring, ranking=settings.ranking,
    )

    if args.export == "json":
        print(export_candidates_json(results))
        return

    print(f"Top {len(results)} candidates for '{listing.title}' (id={listing.id}):")
    for position, s in enumerate(results, start=1):
        print(f"  {position:>2}. [{s.score:>3}] {s.candidate.name or '(unnamed)'}")


def cmd_skills(args: argparse.Namespace, settings: Settings) -> None:
    catalog = load_catalog(settings)
    validated: set[str] = set()
    if args.profile:
        profile = CandidateProfile.from_yaml(args.profile)
        validated = {s.lower() for s in profile.validated_skills}

    print(f"{len(catalog.skills)} assessable skills:")
    for skill in catalog.skills:
        badge = " [validated]" if skill.lower() in validated else ""
        print(f"  - {skill} ({len(catalog.questions_for(skill))} questions){badge}")


def _ask(question: Question, number: int, total: int) -> int:
    print(f"\nQuestion {number} of {total}: {question.prompt}")
    for i, option in enumerate(question.options, start=1):
        print(f"  {i}) {option}")
    while True:
        raw = input("Your answer: ").strip()
        if raw.isdigit() and 1 <= int(raw) <= len(question.options):
            return int(raw) - 1
        print(f"Please enter a number between 1 and {len(question.options)}.")


def run_assessment(session: AssessmentSession, skill: str, pass_threshold: float) -> int:
    """Drive one assessment on the terminal. Returns the process exit code."""
    if not session.select_skill(skill):
        print(f"No assessment available for '{skill}'.", file=sys.stderr)
        return 1

    while session.state is SessionState.IN_PROGRESS:
        question = session.current_question()
        session.record_answer(
            _ask(question, session.question_index + 1, session.total_questions),
        )
        session.advance()

    result = session.result()
    print(f"\nScore: {result.correct}/{result.total} ({result.percentage:.0f}%)")
    if not result.passed:
        print(f"You need {pass_threshold:.0f}% to pass. "
              f"Try again to earn your {result.skill} badge.")
    elif result.newly_validated:
        print(f"Congratulations! You've earned the {result.skill} badge!")
    else:
        print(f"You maintained your {result.skill} badge!")
    return 0


def cmd_assess(args: argparse.Namespace, settings: Settings) -> int:
    catalog = load_catalog(settings)
    store = ProfileCredentialStore(args.profile)
    # Fail fast on a bad profile before asking any questions.
    CandidateProfile.from_yaml(args.profile)
    session = AssessmentSession(catalog, store, settings.assessment.pass_threshold)
    try:
        return run_assessment(session, args.skill, settings.assessment.pass_threshold)
    except (EOFError, KeyboardInterrupt):
        print("\nAssessment abandoned.", file=sys.stderr)
        return 1


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.command == "recommend":
            cmd_recommend(args, settings)
        elif args.command == "candidates":
            cmd_candidates(args, settings)
        elif args.command == "skills":
            cmd_skills(args, settings)
        else:
            sys.exit(cmd_assess(args, settings))
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
