#!/usr/bin/env python3
"""
Command-line entry point for history-fabricator.

With no arguments it reproduces the default run: 70 commits between
2023-04-01 and 2024-09-30 in the current directory, pushed at the end.
"""

from __future__ import annotations

import argparse
import logging
import sys

from history_fabricator.driver import make_commits_in_range
from history_fabricator.utils.common import add_common_args, setup_logging
from history_fabricator.utils.config import resolve_fabricator_args

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Fabricate a backdated commit history in a local git repository"
    )
    add_common_args(parser)

    parser.add_argument("--repo", help="Path inside the target working tree (default: cwd)")
    parser.add_argument("--commits", type=int, help="Number of commits to create")
    parser.add_argument("--start", help="First day of the range, YYYY-MM-DD")
    parser.add_argument("--end", help="Last day of the range (inclusive), YYYY-MM-DD")
    parser.add_argument("--payload", help="Payload file name relative to --repo")
    parser.add_argument("--seed", type=int, help="Seed for reproducible dates")
    parser.add_argument("--no-push", action="store_true", help="Do not push after committing")
    parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Commit dates in sampled order instead of chronologically",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        config = resolve_fabricator_args(args)
        make_commits_in_range(config)
    except Exception as e:
        logger.error("Error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
