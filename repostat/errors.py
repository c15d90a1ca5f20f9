"""Exceptions raised by repostat."""

from __future__ import annotations

from pathlib import Path


class RepostatError(Exception):
    """Base class for repostat errors."""


class PathNotFoundError(RepostatError, FileNotFoundError):
    """Scan root does not exist. Fatal to the whole scan."""

    def __init__(self, path: str | Path, reason: str = "Path not found") -> None:
        self.path = str(path)
        super().__init__(f"{reason}: {self.path}")


class ToolInvocationError(RepostatError):
    """A git query failed for one directory. The scan skips it and carries on."""

    def __init__(self, path: str | Path, args: list[str], reason: str, returncode: int | None = None) -> None:
        self.path = str(path)
        self.git_args = list(args)
        self.reason = reason
        self.returncode = returncode
        super().__init__(f"git {' '.join(args)} failed in {self.path}: {reason}")


class ConfigError(RepostatError):
    """Config file exists but cannot be used."""
