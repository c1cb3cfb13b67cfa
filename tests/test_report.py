"""Tests for matrix, link and JSON rendering."""

import json
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from reviewmatrix.models import Organization, PullRequest, Repository, Reviewer
from reviewmatrix.report import render_json, render_links, render_matrix


def _organization() -> Organization:
    widgets_1 = PullRequest(id="1", url="https://github.com/acme/widgets/pull/1", repo_name="widgets")
    gadgets_7 = PullRequest(id="7", url="https://github.com/acme/gadgets/pull/7", repo_name="gadgets")
    return Organization(
        reviewers=[
            Reviewer(name='"alice"', assigned_pull_requests=[widgets_1, gadgets_7]),
            Reviewer(name="bob", assigned_pull_requests=[gadgets_7]),
        ],
        repositories=[Repository(name="widgets"), Repository(name="gadgets")],
    )


def test_render_matrix_lists_ids_per_reviewer_and_repository():
    """Verify each cell shows the reviewer's pull request numbers for that repository."""
    lines = render_matrix(_organization()).splitlines()

    assert lines[0].split() == ["Reviewer", "widgets", "gadgets"]
    assert lines[2].split() == ["alice", "#1", "#7"]
    assert lines[3].split() == ["bob", "-", "#7"]


def test_render_matrix_empty_organization():
    """Verify an empty result renders a notice instead of an empty table."""
    assert "No open pull requests" in render_matrix(Organization())


def test_render_links_groups_urls_by_repository():
    """Verify link output lists web URLs under each reviewer's display name."""
    output = render_links(_organization())

    assert "alice (2 pending)" in output
    assert "widgets #1: https://github.com/acme/widgets/pull/1" in output
    assert "bob (1 pending)" in output


def test_render_json_keeps_raw_reviewer_login():
    """Verify JSON output preserves the raw login alongside the stripped avatar URL."""
    document = json.loads(render_json(_organization()))

    assert document["repositories"] == ["widgets", "gadgets"]
    assert document["reviewers"][0]["name"] == '"alice"'
    assert document["reviewers"][0]["avatar_url"] == "https://github.com/alice.png"
    assert document["reviewers"][1]["assigned_pull_requests"] == [
        {"id": "7", "url": "https://github.com/acme/gadgets/pull/7", "repo_name": "gadgets"}
    ]
