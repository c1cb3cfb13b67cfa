"""Tests for command-line argument parsing."""

import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from reviewmatrix.cli import parse_args


def test_parse_args_with_valid_arguments(monkeypatch):
    """Verify CLI parsing succeeds when all arguments are provided."""
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "review-matrix",
            "--org",
            "acme",
            "--format",
            "json",
            "--workers",
            "4",
            "--api-url",
            "https://ghe.example.com/api/v3",
            "--timeout",
            "12.5",
            "--verbose",
        ],
    )

    args = parse_args()

    assert args.org == "acme"
    assert args.format == "json"
    assert args.workers == 4
    assert args.api_url == "https://ghe.example.com/api/v3"
    assert args.timeout == 12.5
    assert args.verbose is True


def test_parse_args_defaults():
    """Verify defaults for optional arguments when only the organization is given."""
    args = parse_args(["--org", "acme"])

    assert args.format == "text"
    assert args.workers == 1
    assert args.api_url is None
    assert args.timeout == 30.0
    assert args.verbose is False


def test_parse_args_requires_org():
    """Verify the organization argument is mandatory."""
    with pytest.raises(SystemExit):
        parse_args([])


@pytest.mark.parametrize("value", ["0", "-2", "many"])
def test_parse_args_rejects_invalid_workers(value):
    """Verify worker counts must be positive integers."""
    with pytest.raises(SystemExit):
        parse_args(["--org", "acme", "--workers", value])


def test_parse_args_rejects_unknown_format():
    """Verify only the supported output formats are accepted."""
    with pytest.raises(SystemExit):
        parse_args(["--org", "acme", "--format", "html"])
