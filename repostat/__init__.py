"""repostat — Sync status for a directory of git working copies."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("repostat")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

from .log import configure_library_default

configure_library_default()
