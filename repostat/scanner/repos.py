"""Repository scanner — enumerates candidates, queries git, classifies sync state."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

import structlog

from ..config import Settings, default_root_sources, resolve_root
from ..errors import PathNotFoundError, ToolInvocationError
from ..models import RepositoryStatus
from .git import GitCli
from .parsers import count_changes, parse_divergence

logger = structlog.get_logger(__name__)

SKIP_DIRS = {".git"}


def _subdirs(d: Path) -> list[Path]:
    try:
        children = sorted(d.iterdir())
    except OSError as e:
        logger.debug("cannot list directory", path=str(d), error=str(e))
        return []
    return [c for c in children if c.is_dir() and c.name not in SKIP_DIRS]


def _walk(d: Path) -> Iterator[Path]:
    """Depth-first, sorted; symlinked directories are yielded but not entered."""
    for child in _subdirs(d):
        yield child
        if not child.is_symlink():
            yield from _walk(child)


def iter_candidates(root: Path, recurse: bool = False) -> Iterator[Path]:
    """Immediate subdirectories, or all of them at any depth. Root alone if it has none."""
    if not _subdirs(root):
        yield root
        return
    if recurse:
        yield from _walk(root)
    else:
        yield from _subdirs(root)


def inspect_repository(
    path: Path,
    git: GitCli,
    show_details: bool = False,
) -> Optional[RepositoryStatus]:
    """Status for one directory, or None if it is not a working copy or git fails."""
    if not git.is_work_tree_root(path):
        return None
    try:
        lines = git.porcelain_status(path)
    except ToolInvocationError as e:
        logger.debug("status query failed, skipping", path=str(path), reason=e.reason)
        return None

    ahead, behind = parse_divergence(lines)
    is_clean = count_changes(lines) == 0

    details = None
    if show_details and not is_clean:
        try:
            short = git.short_status(path)
        except ToolInvocationError as e:
            logger.debug("detail query failed", path=str(path), reason=e.reason)
            short = []
        details = tuple(short) if short else None

    return RepositoryStatus(
        name=path.name,
        path=str(path),
        ahead=ahead,
        behind=behind,
        is_clean=is_clean,
        details=details,
    )


def _scan(
    root: Path,
    recurse: bool,
    show_details: bool,
    out_of_sync_only: bool,
    git: GitCli,
) -> Iterator[RepositoryStatus]:
    found_any = False
    root_checked = False
    for candidate in iter_candidates(root, recurse):
        root_checked = root_checked or candidate == root
        status = inspect_repository(candidate, git, show_details)
        if status is None:
            continue
        found_any = True
        if out_of_sync_only and not status.is_out_of_sync:
            continue
        yield status

    # Scanning from inside a repository: the subfolders are not repos, the root is.
    if not found_any and not root_checked:
        status = inspect_repository(root, git, show_details)
        if status is not None and not (out_of_sync_only and not status.is_out_of_sync):
            yield status


def scan_repositories(
    root: str | Path | None = None,
    recurse: bool = False,
    show_details: bool = False,
    out_of_sync_only: bool = False,
    git: GitCli | None = None,
    settings: Settings | None = None,
) -> Iterator[RepositoryStatus]:
    """Scan working copies under `root`, lazily, in enumeration order.

    Root falls back to $REPOSTAT_ROOT, then the configured default_root, then
    the current directory. Raises PathNotFoundError immediately if it does not
    exist; per-directory git failures are logged at debug level and skipped.
    """
    settings = settings or Settings()
    env_override, configured = default_root_sources(settings)
    root_path = resolve_root(root, env_override, configured)
    if not root_path.exists():
        raise PathNotFoundError(root_path)
    if not root_path.is_dir():
        raise PathNotFoundError(root_path, reason="Not a directory")
    root_path = root_path.resolve()
    if git is None:
        git = GitCli(executable=settings.git_executable, timeout=settings.git_timeout)
    logger.debug("scanning", root=str(root_path), recurse=recurse)
    return _scan(root_path, recurse, show_details, out_of_sync_only, git)
