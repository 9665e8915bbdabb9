"""Command-line entry point."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from algos.concurrency import archer


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the shared-list threading demonstration and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="algos",
        description="Append to a locked list from two threads and print it.",
    )
    parser.parse_args(argv)
    archer()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())