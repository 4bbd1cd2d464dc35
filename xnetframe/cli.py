"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys

GREETING = "hello world"


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="xnetframe",
        description="Print a greeting and exit.",
    )


def main(argv=None) -> int:
    """Parse the command line, print a greeting and return the exit status."""
    parser = _build_parser()
    parser.parse_args(sys.argv[1:] if argv is None else list(argv))
    sys.stdout.write(GREETING + "\n")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())