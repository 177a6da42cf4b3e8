"""Build (and optionally run) a gnuplot script from a JSON file of form expressions.

Usage:
    python cli.py --input plot.json --dry-run
    cat plot.json | python cli.py --input - --script-out plot.gp
"""
import argparse
import json
import logging
import sys

import config as cfg
from builder import gnuplot
from errors import GnuplotFailed, PlotScriptError, UnknownForm
from forms import assemble, parse_forms


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--input", type=str, default="-", help="JSON array of form expressions ('-' for stdin)")
    parser.add_argument("--dry-run", action="store_true", help="print the script without running gnuplot")
    parser.add_argument("--script-out", type=str, default=None, help="also write the assembled script here")
    return parser


def _load(path: str) -> list:
    if path == "-":
        exprs = json.load(sys.stdin)
    else:
        with open(path, "r", encoding="utf-8") as f:
            exprs = json.load(f)
    if not isinstance(exprs, list):
        raise UnknownForm(exprs, "input must be a JSON array of form expressions")
    return exprs


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=cfg.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        forms = parse_forms(_load(args.input))
        if args.script_out:
            with open(args.script_out, "w", encoding="utf-8") as f:
                f.write(assemble(forms).text + "\n")
        print(gnuplot(forms, dry_run=args.dry_run))
    except (UnknownForm, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except GnuplotFailed as e:
        print(e.output, file=sys.stderr, end="" if e.output.endswith("\n") else "\n")
        return 1
    except PlotScriptError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
