"""passcheck command-line interface.

Usage examples:
    passcheck check mypassword
    passcheck check -f passwords.txt --json
    passcheck check hunter2 --min-tier strong
    passcheck interactive
"""

import argparse
import json
import logging
import sys

from passcheck import TIERS
from passcheck.meter import StrengthMeter

logger = logging.getLogger(__name__)

_TIER_CHOICES = {tier.label.lower().replace(" ", "-"): rank for rank, (_, tier) in enumerate(TIERS)}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passcheck",
        description="Check password strength locally. Nothing is sent or stored.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── check ──────────────────────────────────────────────────────────
    check_p = sub.add_parser("check", help="Evaluate one or more passwords")
    check_p.add_argument("passwords", nargs="*", help="Passwords to check")
    check_p.add_argument(
        "-f", "--file",
        help="Read passwords from a file (one per line)",
    )
    check_p.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per password",
    )
    check_p.add_argument(
        "--min-tier",
        choices=list(_TIER_CHOICES),
        help="Exit with status 1 if any password is below this tier",
    )

    # ── interactive ────────────────────────────────────────────────────
    sub.add_parser(
        "interactive", help="Re-evaluate each line typed on stdin",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "check":
        return _cmd_check(args)
    if args.command == "interactive":
        return _cmd_interactive(args)

    parser.print_help()
    return 0


def _tier_rank(label: str) -> int:
    return _TIER_CHOICES.get(label.lower().replace(" ", "-"), -1)


def _cmd_check(args: argparse.Namespace) -> int:
    passwords = list(args.passwords)

    if args.file:
        try:
            with open(args.file, encoding="utf-8") as f:
                passwords.extend(line.rstrip("\r\n") for line in f if line.rstrip("\r\n"))
        except OSError as exc:
            print(f"Error: cannot read {args.file}: {exc.strerror}", file=sys.stderr)
            return 1

    if not passwords:
        print("Error: provide passwords as arguments or via --file", file=sys.stderr)
        return 1

    logger.debug("Checking %d password(s)", len(passwords))

    below = False
    meter = StrengthMeter()
    for pwd in passwords:
        assessment = meter.on_input(pwd)
        if args.json:
            print(json.dumps(assessment.as_dict(), ensure_ascii=False))
        else:
            print(meter.render())
            print()

        if args.min_tier and _tier_rank(assessment.label) < _TIER_CHOICES[args.min_tier]:
            below = True

    return 1 if below else 0


def _cmd_interactive(args: argparse.Namespace) -> int:
    meter = StrengthMeter()
    if sys.stdin.isatty():
        print("Type a password and press Enter (Ctrl-D to quit).")

    for line in sys.stdin:
        meter.on_input(line.rstrip("\r\n"))
        print(meter.render())
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
