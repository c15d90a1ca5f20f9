"""Shared fixtures — throwaway git repositories with a local bare upstream."""

from pathlib import Path

import pytest

from git_helpers import clone, commit_file, git


@pytest.fixture
def upstream(tmp_path: Path) -> Path:
    """Bare repository with one commit on its default branch."""
    seed = tmp_path / "seed"
    seed.mkdir()
    git(seed, "init")
    commit_file(seed, "README.md", "# seed\n", "Initial commit")
    bare = tmp_path / "origin.git"
    git(tmp_path, "clone", "--bare", str(seed), str(bare))
    return bare


@pytest.fixture
def workspace(tmp_path: Path, upstream: Path) -> Path:
    """root/ with A (clean), B (2 ahead), C (1 behind + 1 modified), D (plain dir)."""
    root = tmp_path / "root"
    root.mkdir()

    clone(upstream, root / "A")

    b = clone(upstream, root / "B")
    commit_file(b, "one.txt", "1\n", "one")
    commit_file(b, "two.txt", "2\n", "two")

    c = clone(upstream, root / "C")

    pusher = clone(upstream, tmp_path / "pusher")
    commit_file(pusher, "remote.txt", "remote\n", "remote change")
    git(pusher, "push", "origin", "HEAD")
    git(c, "fetch")
    (c / "README.md").write_text("# locally modified\n")

    (root / "D").mkdir()
    (root / "D" / "notes.txt").write_text("not a repo\n")
    return root
