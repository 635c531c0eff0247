"""Command-line interface for choredist."""

import argparse
import logging
import sys
from pathlib import Path

from choredist import schedule
from choredist.const import DEFAULT_CONFIG_PATH, VERSION
from choredist.distributor import distribute, reset_people
from choredist.errors import ChoreDistError
from choredist.messages import MessageSender
from choredist.notes import NoteWriter
from choredist.output import format_distribution, format_unassigned
from choredist.parser import create_config_template, load_config

CONFIRM = "confirm"
RETRY = "retry"
CANCEL = "cancel"


def prompt_confirmation(input_fn=input) -> str:
    """Ask whether to confirm, retry or abort the distribution."""
    while True:
        try:
            answer = input_fn("\n[C]onfirm, [R]etry, or [A]bort? ")
        except EOFError:
            return CANCEL

        answer = answer.strip().lower()
        if answer in ("c", "confirm"):
            return CONFIRM
        if answer in ("r", "retry"):
            return RETRY
        if answer in ("a", "abort", "cancel"):
            return CANCEL
        print("Please enter C (confirm), R (retry), or A (abort)")


def run_distribute(args: argparse.Namespace, input_fn=input) -> int:
    """Load the config, distribute chores and deliver the results."""
    try:
        config = load_config(args.config)
    except ChoreDistError as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    outbound = args.sms or bool(args.note)
    seed = args.seed

    while True:
        # Every attempt starts from the pre-assigned baseline
        reset_people(config.people)
        result = distribute(config.chores, config.people, rng=seed)

        print(format_distribution(result.people, verbose=args.verbose))
        if result.unassigned:
            print(format_unassigned(result.unassigned))

        if args.confirm and outbound and not args.dry_run:
            choice = prompt_confirmation(input_fn)
            if choice == RETRY:
                print("--- Retrying distribution ---")
                # A fixed seed would repeat the same outcome
                seed = None
                continue
            if choice == CANCEL:
                print("Cancelled.")
                return 0
        break

    if args.note:
        print("\n--- Saving to Apple Notes ---")
        writer = NoteWriter(args.note, dry_run=args.dry_run, template_path=args.note_template)
        try:
            writer.prepend_chore_list(result.people, verbose=args.verbose)
        except ChoreDistError as e:
            print(f"Error saving to Notes: {e}", file=sys.stderr)
            return 1

    if args.sms:
        print("\n--- Sending iMessage Notifications ---")
        sender = MessageSender(dry_run=args.dry_run, template_path=args.sms_template)
        try:
            sender.send_chore_assignments(result.people, verbose=args.verbose)
        except ChoreDistError as e:
            print(f"Error sending messages: {e}", file=sys.stderr)
            return 1

    return 0


def run_schedule(args: argparse.Namespace, input_fn=input) -> int:
    try:
        if args.action == "install":
            schedule.install(schedule.prompt_schedule_settings(input_fn))
            print("\nUse 'choredist schedule status' to check the schedule")
            print("Use 'choredist schedule test' to run it immediately")
        elif args.action == "uninstall":
            schedule.uninstall(input_fn=input_fn)
        elif args.action == "status":
            schedule.status()
        elif args.action == "test":
            schedule.run_now()
    except ChoreDistError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def run_init(args: argparse.Namespace) -> int:
    if args.path.exists() and not args.force:
        print(f"Error: {args.path} already exists (use --force to overwrite)", file=sys.stderr)
        return 1
    try:
        create_config_template(args.path)
    except OSError as e:
        print(f"Error writing config template: {e}", file=sys.stderr)
        return 1
    print(f"Created example configuration at: {args.path}")
    return 0


def run_version(args: argparse.Namespace) -> int:
    print(f"choredist {VERSION}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="choredist",
        description="Fairly distribute household chores among family members.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Chores are shuffled, sorted by reward (highest first) and each one goes to the
person with the lowest earnings so far who still has effort capacity for it.

Examples:
  choredist distribute
  choredist distribute --config family.yaml --verbose
  choredist distribute --sms --note "Chore History" --confirm
  choredist distribute --sms --note "Chore History" --dry-run
""",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    dist = subparsers.add_parser("distribute", help="Distribute chores among family members")
    dist.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_PATH),
        help=f"Path to the JSON or YAML configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    dist.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show difficulty and capacity information",
    )
    dist.add_argument(
        "-s",
        "--sms",
        action="store_true",
        help="Send iMessage notifications (macOS only)",
    )
    dist.add_argument(
        "-o",
        "--note",
        help="Save chore list to an Apple Note with this name (macOS only)",
    )
    dist.add_argument(
        "-i",
        "--confirm",
        action="store_true",
        help="Prompt for confirmation before sending messages and saving to notes",
    )
    dist.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Preview actions without sending messages or saving to notes",
    )
    dist.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible distribution",
    )
    dist.add_argument("--sms-template", type=Path, help="Jinja2 template for messages")
    dist.add_argument("--note-template", type=Path, help="Jinja2 template for note entries")
    dist.set_defaults(func=run_distribute)

    sched = subparsers.add_parser("schedule", help="Manage automatic scheduling (macOS only)")
    sched.add_argument(
        "action",
        choices=["install", "uninstall", "status", "test"],
        help="install, remove, inspect or trigger the weekly run",
    )
    sched.set_defaults(func=run_schedule)

    init = subparsers.add_parser("init", help="Write an example configuration file")
    init.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=Path(DEFAULT_CONFIG_PATH),
        help=f"Where to write the example (default: {DEFAULT_CONFIG_PATH})",
    )
    init.add_argument("--force", action="store_true", help="Overwrite an existing file")
    init.set_defaults(func=run_init)

    version = subparsers.add_parser("version", help="Print the version")
    version.set_defaults(func=run_version)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for choredist CLI."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
