"""Helpers for building throwaway git repositories in tests."""

import shutil
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")

_GIT_CONFIG = [
    "-c", "user.name=Test",
    "-c", "user.email=test@test.com",
    "-c", "commit.gpgsign=false",
    "-c", "init.defaultBranch=main",
]


def git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *_GIT_CONFIG, *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def commit_file(repo: Path, name: str, content: str, message: str) -> None:
    (repo / name).write_text(content)
    git(repo, "add", name)
    git(repo, "commit", "-m", message)


def clone(upstream: Path, dest: Path) -> Path:
    git(dest.parent, "clone", str(upstream), str(dest))
    return dest
