"""Command-line argument parsing for the review matrix."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence


def _positive_int(value: str) -> int:
    """Parse and validate a positive integer CLI value.

    Raises:
        argparse.ArgumentTypeError: If value is not a positive integer.
    """
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be an integer") from exc

    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be greater than 0")

    return parsed


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be a number") from exc

    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be greater than 0")

    return parsed


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments for the review matrix.

    Returns:
        Parsed CLI arguments containing the organization, output format,
        worker count, API root, timeout and verbosity.
    """
    parser = argparse.ArgumentParser(
        prog="review-matrix",
        description=(
            "Show which reviewers owe reviews on which repositories' open pull "
            "requests across a GitHub organization. Reads the access token from "
            "the GITHUB_TOKEN environment variable."
        ),
    )

    parser.add_argument(
        "--org",
        required=True,
        help="GitHub organization login.",
    )
    parser.add_argument(
        "--format",
        choices=("text", "links", "json"),
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=1,
        help="Repositories fetched concurrently (default: 1).",
    )
    parser.add_argument(
        "--api-url",
        default=None,
        help="GitHub REST API root, e.g. for GitHub Enterprise (default: GITHUB_API_URL or https://api.github.com).",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=30.0,
        help="Per-request timeout in seconds (default: 30).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser.parse_args(argv)
