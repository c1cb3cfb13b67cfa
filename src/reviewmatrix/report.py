"""Text and JSON rendering of an aggregated ``Organization``.

Rendering is the only place reviewer logins are shown in their display form
(quote characters stripped); the model keeps the raw login.
"""

from __future__ import annotations

import json
from typing import List

from .models import Organization

EMPTY_CELL = "-"


def _format_cell(pr_ids: List[str]) -> str:
    if not pr_ids:
        return EMPTY_CELL
    return " ".join(f"#{pr_id}" for pr_id in pr_ids)


def render_matrix(organization: Organization) -> str:
    """Render a reviewer x repository table.

    Columns are repositories in discovery order, rows are reviewers in
    discovery order, and each cell lists the pull request numbers that reviewer
    owes in that repository.

    Args:
        organization: Aggregation result.

    Returns:
        Multi-line text table, or a one-line notice when nothing is pending.
    """
    if not organization.reviewers:
        return "No open pull requests are waiting on a requested reviewer."

    header = ["Reviewer"] + [repository.name for repository in organization.repositories]
    rows = [header]
    for reviewer in organization.reviewers:
        cells = [reviewer.display_name]
        for repository in organization.repositories:
            pr_ids = [pr.id for pr in reviewer.pull_requests_for(repository.name)]
            cells.append(_format_cell(pr_ids))
        rows.append(cells)

    widths = [max(len(row[index]) for row in rows) for index in range(len(header))]
    lines = []
    for position, row in enumerate(rows):
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
        if position == 0:
            lines.append("  ".join("-" * width for width in widths))

    return "\n".join(lines)


def render_links(organization: Organization) -> str:
    """List each reviewer's assigned pull request URLs, grouped by repository."""
    lines: List[str] = []
    for reviewer in organization.reviewers:
        lines.append(f"{reviewer.display_name} ({len(reviewer.assigned_pull_requests)} pending)")
        for repository in organization.repositories:
            for pr in reviewer.pull_requests_for(repository.name):
                lines.append(f"   {repository.name} #{pr.id}: {pr.url}")
    return "\n".join(lines)


def render_json(organization: Organization) -> str:
    return json.dumps(organization.to_dict(), indent=2)
