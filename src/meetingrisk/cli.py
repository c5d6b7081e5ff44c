"""Command line interface for meeting cost and risk assessment."""

import argparse
import json
import logging
import sys
from pathlib import Path

from meetingrisk.config.loader import configure_from_cli
from meetingrisk.config.settings import LogLevel, Settings, set_settings
from meetingrisk.domain.exceptions import ConfigurationError, ValidationError
from meetingrisk.domain.models import QualityAnswers
from meetingrisk.formatting.money import format_money
from meetingrisk.processing.validation import InputValidator
from meetingrisk.results.assemblers import build_saved_meeting
from meetingrisk.runners.assessment import MeetingAssessment, assess_meeting
from meetingrisk.runners.batch import load_scenarios, run_batch
from meetingrisk.utils.logging import setup_logging

CHECKLIST_FLAGS = (
    ("--goal-defined", "goal_defined", "The meeting had a clearly defined goal."),
    ("--owner-assigned", "owner_assigned", "Someone owned the meeting."),
    ("--preread-sent", "preread_sent", "A pre-read was sent in advance."),
    ("--decision-made", "decision_made", "A decision was made."),
    ("--next-actions-clear", "next_actions_clear", "Next actions were clear at the end."),
)


def _add_common_options(p: argparse.ArgumentParser) -> None:
    tuning = p.add_argument_group("Tuning Options")
    tuning.add_argument(
        "--locale",
        type=str,
        help="Locale used to format money (default: en_US).",
    )
    tuning.add_argument(
        "--max-annual-waste",
        type=float,
        metavar="AMOUNT",
        help="Annual waste at which risk intensity saturates (default: 250,000).",
    )
    tuning.add_argument(
        "--critical-waste-threshold",
        type=float,
        metavar="AMOUNT",
        help="Per-meeting waste above which a low score is critical (default: 2,000).",
    )

    debug_group = p.add_argument_group("Debug Options")
    debug_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with verbose logging.",
    )
    debug_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate configuration and inputs without assessing.",
    )
    debug_group.add_argument(
        "--log-dir",
        type=str,
        metavar="PATH",
        help="Directory for log files (default: per-user log directory).",
    )
    debug_group.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        help="Level for the log file (default: INFO; --debug implies DEBUG).",
    )
    debug_group.add_argument(
        "--quiet",
        action="store_true",
        help="Do not log to the console.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the meetingrisk CLI."""
    parser = argparse.ArgumentParser(
        prog="meetingrisk",
        description="Estimate what a meeting costs, how much of it is waste and how risky it is.",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    assess_p = sub.add_parser("assess", help="Assess a single meeting")
    assess_p.add_argument("-a", "--attendees", type=float, default=6, help="Number of attendees (default: 6).")
    assess_p.add_argument("-s", "--salary", type=float, default=100000, help="Average annual salary (default: 100000).")
    assess_p.add_argument("-m", "--duration", type=float, default=60, help="Duration in minutes (default: 60).")
    assess_p.add_argument(
        "-r",
        "--recurrence",
        choices=["one-time", "weekly", "monthly"],
        default="one-time",
        help="How often the meeting happens.",
    )
    assess_p.add_argument("-c", "--currency", choices=["USD", "EUR"], default="USD")

    quality = assess_p.add_argument_group("Quality Checklist")
    for flag, dest, help_text in CHECKLIST_FLAGS:
        quality.add_argument(flag, dest=dest, action="store_true", help=help_text)
    quality.add_argument(
        "--score",
        type=float,
        help="Quality score 0..100; overrides the checklist flags.",
    )

    assess_p.add_argument("--json", action="store_true", help="Print the assessment as JSON.")
    assess_p.add_argument("-n", "--name", type=str, help="Meeting name (used with --save-record).")
    assess_p.add_argument(
        "--save-record",
        action="store_true",
        help="Print the record a recurring meeting would be saved as.",
    )
    _add_common_options(assess_p)

    batch_p = sub.add_parser("batch", help="Assess a JSON file of meetings")
    batch_p.add_argument("-i", "--input", required=True, help="JSON file with a list of meetings.")
    batch_p.add_argument("-o", "--output", help="Write results JSON here instead of stdout.")
    _add_common_options(batch_p)

    return parser


def main(argv=None) -> None:
    """Main entry point for the meetingrisk CLI."""
    args = build_parser().parse_args(argv)

    try:
        settings = configure_from_cli(args)
        set_settings(settings)

        # the console stays at WARNING unless debugging
        logger, _ = setup_logging(
            settings.logging,
            console_level=None if settings.debug_mode else LogLevel.WARNING.value,
        )

        if settings.debug_mode:
            logger.debug("Configuration details:")
            for section, values in settings.to_dict().items():
                logger.debug("  %s: %s", section, values)

        if args.cmd == "assess":
            _run_assess(args, settings, logger)
        elif args.cmd == "batch":
            _run_batch(args, settings, logger)
        else:
            logging.error("Unknown command: %s", args.cmd)
            sys.exit(2)

        sys.exit(0)

    except (ConfigurationError, ValidationError) as e:
        kind = "Configuration" if isinstance(e, ConfigurationError) else "Input"
        logging.error("%s error: %s", kind, e.message)
        if e.suggestions:
            logging.error("Suggestions:")
            for suggestion in e.suggestions:
                logging.error("  - %s", suggestion)
        sys.exit(1)

    except (OSError, ValueError) as e:
        logging.error("Could not read input: %s", e)
        sys.exit(1)

    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        sys.exit(130)


def _run_assess(args, settings: Settings, logger) -> None:
    inputs = InputValidator.parse_meeting_inputs({
        "attendees": args.attendees,
        "avg_salary": args.salary,
        "duration_minutes": args.duration,
        "recurrence": args.recurrence,
        "currency": args.currency,
    })
    answers = QualityAnswers(**{dest: getattr(args, dest) for _, dest, _ in CHECKLIST_FLAGS})
    score = InputValidator.validate_score(args.score)

    if settings.dry_run:
        logger.info("DRY RUN MODE - inputs and configuration validated successfully")
        print(f"Inputs valid: {inputs}")
        return

    assessment = assess_meeting(inputs, answers=answers, score=score, settings=settings)

    record = None
    if args.save_record:
        record = build_saved_meeting(args.name or "", assessment).to_row()

    if args.json:
        payload = assessment.as_dict()
        if record is not None:
            payload["record"] = record
        print(json.dumps(payload, indent=2))
    else:
        _print_assessment(assessment, settings.formatting.locale)
        if record is not None:
            print("Saved record:")
            print(json.dumps(record, indent=2))


def _run_batch(args, settings: Settings, logger) -> None:
    rows = load_scenarios(Path(args.input))
    logger.info("Loaded %d meetings from %s", len(rows), args.input)

    if settings.dry_run:
        print(f"Meetings to assess: {len(rows):,}")
        return

    result = run_batch(rows, settings=settings)
    text = json.dumps(result.as_dict(), indent=2)
    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        logger.info("Results written to %s", out_path)
    else:
        print(text)


def _print_assessment(assessment: MeetingAssessment, locale: str) -> None:
    currency = assessment.inputs.currency

    def money(amount):
        return format_money(amount, currency, locale=locale)

    print("\n" + "=" * 60)
    print(assessment.message.headline.upper())
    print("=" * 60)
    print(f"Quality score:      {round(assessment.score)}/100")
    print(f"Cost per meeting:   {money(assessment.cost.cost_per_meeting)}")
    print(f"Cost per person:    {money(assessment.cost.cost_per_person)}")
    print(f"Annualized cost:    {money(assessment.cost.annualized_cost)}")
    print(f"Waste per meeting:  {money(assessment.waste_per_meeting)}")
    print(f"Annualized waste:   {money(assessment.risk.annualized_waste)}")
    print(f"Risk:               {assessment.risk.risk:.2f} ({assessment.risk_label})")
    print("=" * 60)
    print(assessment.message.body)
    print()


if __name__ == "__main__":
    main()
