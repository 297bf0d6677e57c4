# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: CC-BY-NC-4.0

"""
Command line interface for locating and transforming query occurrences.

Subcommands:
    ranges: Print a table of the spans of the matches (or the gaps)
    transform: Print the content with matches and/or gaps transformed
"""

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional

from tabulate import tabulate

from query_range.config import get_setting
from query_range.range import QueryRangeIterator
from query_range.reassembly import transform_all, transform_both
from query_range.transforms import get_transform, list_available_transforms
from query_range.utils import setup_logging

logger = logging.getLogger(__name__)


def read_content(
    path: Optional[str], encoding: str, stdin: Optional[BinaryIO] = None
) -> str:
    """
    Read the content to scan from a file, or from stdin when no path is given.

    Both sources are decoded with ``encoding``, so offsets never depend on the
    locale. ``stdin`` defaults to the raw byte stream behind ``sys.stdin``.
    """
    if path is None:
        return (stdin or sys.stdin.buffer).read().decode(encoding)
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def format_ranges(query: str, content: str, gaps: bool = False) -> str:
    """
    Render the spans of the query (or of the gaps) as a table.

    Returns:
        str: A grid table with one row per span.
    """
    if gaps:
        iterator = QueryRangeIterator.gaps(query, content)
    else:
        iterator = QueryRangeIterator.matches(query, content)
    rows = [
        [i, span.start, span.end, repr(span.slice_of(content))]
        for i, span in enumerate(iterator)
    ]
    return tabulate(
        rows,
        headers=["#", "start", "end", "text"],
        tablefmt="grid",
        stralign="left",
        numalign="right",
    )


def run_transform(
    query: str,
    content: str,
    query_transform: str,
    other_transform: str,
    two_pass: bool = False,
) -> str:
    """Apply the named transforms to the matches and the gaps of the content."""
    query_fn = get_transform(query_transform)
    other_fn = get_transform(other_transform)
    if two_pass:
        return transform_all(query, content, query_fn, other_fn)
    return transform_both(query, content, query_fn, other_fn)


def main(argv: Optional[List[str]] = None) -> int:
    parser = read_arguments()
    args = parser.parse_args(argv)

    setup_logging(args.logging_level)

    content = read_content(args.file, get_setting("encoding", "utf-8"))
    logger.info(f"Read {len(content)} characters")

    if args.command == "ranges":
        print(format_ranges(args.query, content, gaps=args.gaps))
    else:
        result = run_transform(
            args.query,
            content,
            args.query_transform,
            args.other_transform,
            two_pass=args.two_pass,
        )
        sys.stdout.write(result)
    return 0


def read_arguments() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Locate the occurrences of a literal query and transform the text around them"
    )
    parser.add_argument(
        "--logging-level",
        type=str,
        default=get_setting("logging_level", "WARNING"),
        help="The logging level to use (default: from settings.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    ranges_parser = subparsers.add_parser(
        "ranges", help="Print the spans of every occurrence of the query."
    )
    ranges_parser.add_argument("query", type=str, help="The literal to search for.")
    ranges_parser.add_argument(
        "--file", type=str, default=None, help="File to read (default: stdin)."
    )
    ranges_parser.add_argument(
        "--gaps",
        action="store_true",
        help="Print the spans between occurrences instead of the occurrences.",
    )

    transform_parser = subparsers.add_parser(
        "transform", help="Print the content with matches and gaps transformed."
    )
    transform_parser.add_argument("query", type=str, help="The literal to search for.")
    transform_parser.add_argument(
        "--file", type=str, default=None, help="File to read (default: stdin)."
    )
    transform_parser.add_argument(
        "--query-transform",
        type=str,
        choices=list_available_transforms(),
        default=get_setting("default_query_transform", "upper"),
        help="Transform applied to every occurrence of the query.",
    )
    transform_parser.add_argument(
        "--other-transform",
        type=str,
        choices=list_available_transforms(),
        default=get_setting("default_other_transform", "identity"),
        help="Transform applied to the content between occurrences.",
    )
    transform_parser.add_argument(
        "--two-pass",
        action="store_true",
        help="Transform the matches first, then re-scan for the transformed query.",
    )

    return parser


if __name__ == "__main__":
    sys.exit(main())
