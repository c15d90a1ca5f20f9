"""Structured status record for a scanned working copy."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ColorHint(str, Enum):
    """Display color for a status. Presentation only."""

    GREEN = "green"
    RED = "red"
    BLUE = "blue"
    YELLOW = "yellow"
    CYAN = "cyan"


def describe_status(ahead: int, behind: int, is_clean: bool) -> str:
    """Comma-joined ahead:<n>, behind:<n>, modified; "clean" if none apply."""
    parts = []
    if ahead > 0:
        parts.append(f"ahead:{ahead}")
    if behind > 0:
        parts.append(f"behind:{behind}")
    if not is_clean:
        parts.append("modified")
    return ", ".join(parts) if parts else "clean"


def pick_color(ahead: int, behind: int, is_clean: bool) -> ColorHint:
    """First match wins: in sync, then behind, then ahead, then modified."""
    if is_clean and ahead == 0 and behind == 0:
        return ColorHint.GREEN
    if behind > 0:
        return ColorHint.RED
    if ahead > 0:
        return ColorHint.BLUE
    if not is_clean:
        return ColorHint.YELLOW
    return ColorHint.CYAN


@dataclass(frozen=True)
class RepositoryStatus:
    """Sync state of one working copy, built fresh per scan."""

    name: str
    path: str
    ahead: int = 0  # local commits not on upstream
    behind: int = 0  # upstream commits not merged locally
    is_clean: bool = True  # no staged, unstaged or untracked entries
    details: Optional[tuple[str, ...]] = None  # `git status --short` lines

    def __post_init__(self) -> None:
        if self.ahead < 0 or self.behind < 0:
            raise ValueError(f"ahead/behind must be >= 0, got {self.ahead}/{self.behind}")

    @property
    def status_label(self) -> str:
        return describe_status(self.ahead, self.behind, self.is_clean)

    @property
    def color_hint(self) -> ColorHint:
        return pick_color(self.ahead, self.behind, self.is_clean)

    @property
    def is_out_of_sync(self) -> bool:
        return not (self.is_clean and self.ahead == 0 and self.behind == 0)

    @property
    def details_text(self) -> str:
        return os.linesep.join(self.details or ())

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": self.path,
            "ahead": self.ahead,
            "behind": self.behind,
            "is_clean": self.is_clean,
            "status_label": self.status_label,
            "color_hint": self.color_hint.value,
            "details": list(self.details) if self.details else None,
        }
