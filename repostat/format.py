"""Terminal output formatting — table, detail listing, JSON."""

import json
from typing import Iterable, List

import click

from .models import RepositoryStatus

_HEADERS = ("Name", "Status", "Ahead", "Behind")


def render_table(statuses: Iterable[RepositoryStatus]) -> str:
    """Name and Status left-aligned, Ahead and Behind right-aligned."""
    rows = [(s.name, s.status_label, str(s.ahead), str(s.behind)) for s in statuses]
    if not rows:
        return ""
    widths = [max(len(h), *(len(r[i]) for r in rows)) for i, h in enumerate(_HEADERS)]

    def fmt(cells) -> str:
        name, status, ahead, behind = cells
        return "  ".join([
            name.ljust(widths[0]),
            status.ljust(widths[1]),
            ahead.rjust(widths[2]),
            behind.rjust(widths[3]),
        ]).rstrip()

    lines = [fmt(_HEADERS), fmt(tuple("-" * w for w in widths))]
    lines.extend(fmt(r) for r in rows)
    return "\n".join(lines)


def render_details(statuses: Iterable[RepositoryStatus]) -> str:
    """One block per repo: `name (path) Status: <label>` then any detail lines."""
    lines: List[str] = []
    for s in statuses:
        label = click.style(s.status_label, fg=s.color_hint.value)
        lines.append(f"{s.name} ({s.path}) Status: {label}")
        if s.details:
            lines.append("Details:")
            lines.extend(f"  {d}" for d in s.details)
    return "\n".join(lines)


def render_json(statuses: Iterable[RepositoryStatus]) -> str:
    return json.dumps([s.to_dict() for s in statuses], indent=2)


def summary_line(statuses: List[RepositoryStatus]) -> str:
    out_of_sync = sum(1 for s in statuses if s.is_out_of_sync)
    return f"Found {len(statuses)} repos. {out_of_sync} out of sync."
