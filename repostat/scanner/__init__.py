"""Repo scanner — finds git working copies and reports their sync state."""

from .git import GitCli
from .parsers import count_changes, parse_divergence
from .repos import inspect_repository, iter_candidates, scan_repositories

__all__ = [
    "GitCli",
    "count_changes",
    "inspect_repository",
    "iter_candidates",
    "parse_divergence",
    "scan_repositories",
]
