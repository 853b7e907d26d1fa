import argparse
import sys

from iaukit import __version__
from iaukit.config import ANGLE_STYLES, LOG_LEVELS
from iaukit.cli.commands import run_args, run_days, run_dms, run_doctor, run_hms


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to config.toml")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Logging level")
    parser.add_argument("--json", action="store_true", help="Output result as JSON")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="iaukit")
    parser.add_argument("--version", action="store_true", help="Show version and exit")

    subparsers = parser.add_subparsers(dest="command")

    doctor_parser = subparsers.add_parser("doctor", help="Run environment diagnostics")
    _add_common(doctor_parser)

    args_parser = subparsers.add_parser(
        "args", help="Evaluate IERS 2003 fundamental arguments"
    )
    _add_common(args_parser)
    args_parser.add_argument(
        "names", nargs="*", help="Argument names (default: all)"
    )
    epoch = args_parser.add_mutually_exclusive_group(required=True)
    epoch.add_argument(
        "--t", type=float, nargs="+", help="TDB Julian centuries since J2000.0"
    )
    epoch.add_argument("--jd", type=float, help="Julian Date (TT)")
    epoch.add_argument("--date", help="UTC date/time, ISO 8601 (requires astropy)")
    args_parser.add_argument("--style", choices=ANGLE_STYLES, help="Output style")
    args_parser.add_argument("--ndp", type=int, help="Decimal places / resolution")

    for name, help_text in (
        ("days", "Decompose days into hours, minutes, seconds, fraction"),
        ("hms", "Decompose radians into hours, minutes, seconds, fraction"),
        ("dms", "Decompose radians into degrees, arcminutes, arcseconds, fraction"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        _add_common(sub)
        sub.add_argument("value", type=float, help="Value to decompose")
        sub.add_argument("--ndp", type=int, help="Resolution (negative for coarse)")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"iaukit {__version__}")
        return 0

    if args.command == "doctor":
        return run_doctor(args)

    if args.command == "args":
        return run_args(args)

    if args.command == "days":
        return run_days(args)

    if args.command == "hms":
        return run_hms(args)

    if args.command == "dms":
        return run_dms(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
