"""Out-of-process git queries, each scoped with `git -C <path>`."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional

import structlog

from ..errors import ToolInvocationError

logger = structlog.get_logger(__name__)

# User config must not change what counts as a pending change or leak colors.
STATUS_ARGS = ["-c", "color.status=false", "status", "--untracked-files=normal"]


class GitCli:
    """Runs read-only git commands against a directory.

    The directory is always passed with ``-C``; the process working
    directory is never touched.
    """

    def __init__(self, executable: str = "git", timeout: Optional[float] = None) -> None:
        self.executable = executable
        self.timeout = timeout

    def run(self, path: str | Path, *args: str) -> str:
        """Run git in `path` and return stdout. Raises ToolInvocationError on any failure."""
        cmd = [self.executable, "-C", str(path), *args]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError:
            raise ToolInvocationError(path, list(args), f"{self.executable} not found") from None
        except subprocess.TimeoutExpired:
            raise ToolInvocationError(path, list(args), f"timed out after {self.timeout}s") from None
        except OSError as e:
            raise ToolInvocationError(path, list(args), str(e)) from e
        if result.returncode != 0:
            raise ToolInvocationError(
                path, list(args), result.stderr.strip() or "non-zero exit", returncode=result.returncode
            )
        return result.stdout

    def is_work_tree_root(self, path: str | Path) -> bool:
        """True if `path` is the top level of a git working tree."""
        try:
            out = self.run(path, "rev-parse", "--is-inside-work-tree", "--show-toplevel")
        except ToolInvocationError as e:
            logger.debug("not a working tree", path=str(path), reason=e.reason)
            return False
        lines = out.splitlines()
        if not lines or lines[0].strip() != "true" or len(lines) < 2:
            return False
        try:
            return Path(lines[1].strip()).resolve() == Path(path).resolve()
        except OSError:
            return False

    def porcelain_status(self, path: str | Path) -> list[str]:
        """`git status --porcelain=v2 --branch` lines. Empty output counts as failure."""
        args = [*STATUS_ARGS, "--porcelain=v2", "--branch"]
        out = self.run(path, *args)
        if not out.strip():
            raise ToolInvocationError(path, args, "empty output")
        return out.splitlines()

    def short_status(self, path: str | Path) -> list[str]:
        """`git status --short`, one line per pending change."""
        out = self.run(path, *STATUS_ARGS, "--short")
        return [line for line in out.splitlines() if line.strip()]
