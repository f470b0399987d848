"""podium CLI: resolve awards for a roster from the command line."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from podium.config import PodiumConfig
from podium.errors import ParticipantNotFound, PodiumError
from podium.evaluator import AwardEvaluator
from podium.loader import load_context
from podium.report import StandingsReport


logger = logging.getLogger("podium")


def _build_evaluator(args: argparse.Namespace, config: PodiumConfig) -> AwardEvaluator:
    max_score = args.max_score if args.max_score is not None else config.max_achievable_score
    delimiter = args.delimiter if args.delimiter is not None else config.csv_delimiter
    context = load_context(args.roster, max_score, delimiter=delimiter)
    logger.info("Loaded %d participants from %s", len(context), args.roster)
    return AwardEvaluator(context)


def _award_command(args: argparse.Namespace, config: PodiumConfig) -> int:
    """Execute the ``award`` subcommand."""
    evaluator = _build_evaluator(args, config)
    try:
        outcome = evaluator.outcome(args.name)
    except ParticipantNotFound as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if args.json or config.report_json:
        print(json.dumps({
            "name": outcome.name,
            "score": outcome.score,
            "rank": outcome.rank,
            "award": outcome.award.value,
            "basis": outcome.basis.value,
        }, indent=2))
    else:
        print(outcome.award.value.upper() if outcome.awarded else "NO AWARD")
    return 0


def _standings_command(args: argparse.Namespace, config: PodiumConfig) -> int:
    """Execute the ``standings`` subcommand."""
    evaluator = _build_evaluator(args, config)
    report = StandingsReport(evaluator.context.max_achievable_score)
    report.extend(evaluator.standings())

    if args.json or config.report_json:
        print(report.to_json())
    else:
        print(report.to_console())

    if args.output:
        report.save(args.output)
        logger.info("Saved standings to %s", args.output)
    return 0


def _add_roster_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("roster", help="Roster file with one 'name,score' row per participant")
    parser.add_argument("--max-score", type=int, default=None, help="Maximum achievable score (default: PODIUM_MAX_SCORE or 100)")
    parser.add_argument("--delimiter", default=None, help="Field delimiter (default: PODIUM_CSV_DELIMITER or ',')")
    parser.add_argument("--json", action="store_true", help="Output JSON to stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def main(argv: list[str] | None = None) -> None:
    """Entry point for the ``podium`` CLI."""
    parser = argparse.ArgumentParser(prog="podium", description="podium: competition award evaluator")
    sub = parser.add_subparsers(dest="command")

    award_parser = sub.add_parser("award", help="Show the award for one participant")
    _add_roster_arguments(award_parser)
    award_parser.add_argument("name", help="Participant name (exact, case-sensitive)")

    standings_parser = sub.add_parser("standings", help="Show awards for every participant")
    _add_roster_arguments(standings_parser)
    standings_parser.add_argument("--output", default=None, help="Also write the JSON report to this path")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        config = PodiumConfig()
        if args.command == "award":
            exit_code = _award_command(args, config)
        else:
            exit_code = _standings_command(args, config)
    except (FileNotFoundError, PodiumError) as exc:
        print(str(exc), file=sys.stderr)
        exit_code = 1

    sys.exit(exit_code)
