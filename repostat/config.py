"""Config file loading and scan-root resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from .errors import ConfigError

logger = structlog.get_logger(__name__)

ROOT_ENV_VAR = "REPOSTAT_ROOT"
CONFIG_ENV_VAR = "REPOSTAT_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "repostat" / "config.yaml"


@dataclass
class Settings:
    """Values read from the YAML config file."""

    default_root: Optional[str] = None
    git_timeout: Optional[float] = None  # seconds per git call; None = wait forever
    git_executable: str = "git"


def config_path(explicit: str | Path | None = None) -> Path:
    """--config wins, then $REPOSTAT_CONFIG, then ~/.config/repostat/config.yaml."""
    if explicit:
        return Path(explicit).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def _coerce_timeout(value: Any, path: Path) -> Optional[float]:
    if value is None:
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{path}: git_timeout must be a number, got {value!r}") from None
    if timeout <= 0:
        raise ConfigError(f"{path}: git_timeout must be positive, got {value!r}")
    return timeout


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from YAML. A missing file yields defaults."""
    p = config_path(path)
    if not p.exists():
        logger.debug("no config file", path=str(p))
        return Settings()
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError) as e:
        raise ConfigError(f"Cannot read config {p}: {e}") from e
    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"{p}: expected a mapping at top level, got {type(data).__name__}")

    default_root = data.get("default_root")
    settings = Settings(
        default_root=str(default_root) if default_root else None,
        git_timeout=_coerce_timeout(data.get("git_timeout"), p),
        git_executable=str(data.get("git_executable") or "git"),
    )
    logger.debug("loaded config", path=str(p), default_root=settings.default_root)
    return settings


def resolve_root_with_source(
    explicit: str | Path | None,
    env_override: str | None,
    configured: str | None,
) -> tuple[Path, str]:
    """First non-empty candidate wins; the current directory is the last resort."""
    for value, source in (
        (explicit, "argument"),
        (env_override, ROOT_ENV_VAR),
        (configured, "config"),
    ):
        if value is not None and str(value).strip():
            return Path(value).expanduser(), source
    return Path.cwd(), "cwd"


def resolve_root(
    explicit: str | Path | None,
    env_override: str | None,
    configured: str | None,
) -> Path:
    return resolve_root_with_source(explicit, env_override, configured)[0]


def default_root_sources(settings: Settings) -> tuple[Optional[str], Optional[str]]:
    """(environment override, configured default) for the current process."""
    return os.environ.get(ROOT_ENV_VAR), settings.default_root
