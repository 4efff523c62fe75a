"""
This module contains the main entry point and logic for the culprit CLI.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from tqdm import tqdm

from ..config import DEFAULT_ENV_VAR
from ..core.search_engine import SearchEngine
from ..errors import CulpritError
from ..probes.invoker import ProbeInvoker
from ..probes.mapping import ProbeMapping
from ..probes.shell import ShellProbe
from .utils import configure_logging

DESCRIPTION = """\
Given a pair of integer values representing points in a sequence of states
between which a change in status occurs from working (GOOD) to non-working
(BAD) or vice versa, perform a binary search by invoking the given script for
each probe value. If the script succeeds, the probe is GOOD; otherwise BAD.
Search continues until adjacent values are found that bracket the GOOD/BAD
divide.

At least one of --good and --bad must be positive. By default the search
probes between the two values. With --bracket and one of the values 0, it
first probes for a bracketing value above the other (positive) value.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="culprit",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("script", nargs="+", help="Probe script; words are joined with spaces.")
    parser.add_argument("--good", type=int, default=0, help="Value known to be good (0 to bracket).")
    parser.add_argument("--bad", type=int, default=0, help="Value known to be bad (0 to bracket).")
    parser.add_argument("--bracket", action="store_true", help="Enable bracketing.")
    parser.add_argument("--bmax", type=int, default=0, help="Maximum bracketing value (0 = none).")
    parser.add_argument(
        "--no-verify",
        dest="verify",
        action="store_false",
        help="Do not verify the starting points as assigned.",
    )
    parser.add_argument("--echo", action="store_true", help="Echo probe output to stderr.")
    parser.add_argument("--log", action="store_true", help="Log probe commands as executed.")
    parser.add_argument(
        "--cd",
        default=None,
        help="Change to this directory before each probe ($PROBE is replaced by the value).",
    )
    parser.add_argument(
        "--env",
        default=DEFAULT_ENV_VAR,
        help="Variable holding the probe value in the script environment ('' disables).",
    )
    parser.add_argument(
        "--shell",
        default=None,
        help="Shell used to run the script (default: $CULPRIT_SHELL or /bin/sh).",
    )
    parser.add_argument(
        "--map",
        dest="map_file",
        default=None,
        help="File whose line N is the probe value for index N.",
    )
    parser.add_argument(
        "--timeout", type=float, default=None, help="Seconds before a probe counts as failed."
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON.")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar.")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress diagnostics.")
    return parser


def _load_mapping(path: Optional[str]) -> Optional[ProbeMapping]:
    if path is None:
        return None
    if not os.path.exists(path):
        raise CulpritError(f"Mapping file not found at '{path}'")
    return ProbeMapping.from_file(path)


def run_command(args: argparse.Namespace) -> int:
    """Runs one search from parsed arguments and prints the outcome."""
    try:
        probe = ShellProbe(
            args.script,
            shell=args.shell,
            env_var=args.env,
            chdir=args.cd,
            echo_stream=sys.stderr if args.echo else None,
            log_commands=args.log,
            timeout=args.timeout,
        )
    except ValueError as e:
        raise CulpritError(str(e)) from e

    invoker = ProbeInvoker(probe, mapping=_load_mapping(args.map_file))
    engine = SearchEngine(
        invoker,
        good=args.good,
        bad=args.bad,
        verify=args.verify,
        bracket=args.bracket,
        max_bracket=args.bmax,
    )

    if args.progress:
        with tqdm(desc="Probing", unit="probe", leave=False) as pbar:
            report = engine.run(progress_bar=pbar)
    else:
        report = engine.run()

    if args.json:
        print(report.to_json())
    else:
        report.show()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(quiet=args.quiet)

    try:
        return run_command(args)
    except CulpritError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n👋 Search stopped by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
