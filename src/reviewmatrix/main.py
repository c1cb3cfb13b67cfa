"""Entry point wiring configuration, aggregation and rendering together."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from .aggregator import aggregate
from .cli import parse_args
from .config import load_config
from .errors import AuthenticationError, ConfigurationError, NetworkError, ParseError
from .github_client import GitHubClient
from .models import Organization
from .report import render_json, render_links, render_matrix

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_CONFIGURATION = 2
EXIT_AUTHENTICATION = 3
EXIT_NETWORK = 4
EXIT_PARSE = 5


def _render(output_format: str, organization: Organization) -> str:
    renderers = {
        "text": render_matrix,
        "links": render_links,
        "json": render_json,
    }
    return renderers[output_format](organization)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def orchestrate_review_matrix(argv: Optional[Sequence[str]] = None) -> int:
    """Run one aggregation and print the result.

    Returns:
        Process exit code; error messages are written verbatim to stderr.
    """
    try:
        args = parse_args(argv)
        _configure_logging(args.verbose)

        config = load_config(
            organization=args.org,
            api_url=args.api_url,
            timeout_seconds=args.timeout,
            max_workers=args.workers,
        )

        client = GitHubClient(config=config)
        try:
            logger.info("Fetching review requests", extra={"organization": config.organization})
            organization = aggregate(client, config.organization, max_workers=config.max_workers)
        finally:
            client.close()

        print(_render(args.format, organization))
        return EXIT_OK
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_CONFIGURATION
    except AuthenticationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_AUTHENTICATION
    except NetworkError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_NETWORK
    except ParseError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_PARSE
    except Exception as exc:  # noqa: BLE001
        logger.exception("Unexpected failure")
        print(f"ERROR: Unexpected failure: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED


def main() -> None:
    sys.exit(orchestrate_review_matrix())


if __name__ == "__main__":
    main()
