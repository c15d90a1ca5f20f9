"""Parsers for `git status --porcelain=v2 --branch` output. Pure functions."""

import re
from typing import Iterable

BRANCH_AB_PREFIX = "# branch.ab"
_AB_RE = re.compile(r"\+(\d+) -(\d+)")


def parse_divergence(lines: Iterable[str]) -> tuple[int, int]:
    """Return (ahead, behind) from the `# branch.ab +A -B` header.

    No upstream means no such line; that and a malformed line both give (0, 0).
    """
    for line in lines:
        if not line.startswith(BRANCH_AB_PREFIX):
            continue
        m = _AB_RE.search(line)
        if not m:
            return 0, 0
        return int(m.group(1)), int(m.group(2))
    return 0, 0


def count_changes(lines: Iterable[str]) -> int:
    """Each non-empty, non-header line is one staged, unstaged or untracked entry."""
    return sum(1 for line in lines if line.strip() and not line.startswith("#"))
