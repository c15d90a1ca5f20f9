"""CLI entry point — scan working copies, output clearly."""

from pathlib import Path
from typing import Optional

import typer

from .config import Settings, default_root_sources, load_settings, resolve_root_with_source
from .errors import ConfigError, PathNotFoundError
from .format import render_details, render_json, render_table, summary_line
from .log import configure_logging
from .scanner import scan_repositories


def _err(msg: str) -> None:
    """Raise a styled error (red box) — used for all CLI errors."""
    raise typer.BadParameter(msg)


app = typer.Typer(help="Show which git working copies are ahead, behind or modified.", no_args_is_help=True)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log skipped directories and git failures to stderr"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file (default: ~/.config/repostat/config.yaml)"),
) -> None:
    """repostat — sync status for a directory of git working copies."""
    configure_logging("DEBUG" if verbose else "WARNING")
    try:
        ctx.obj = load_settings(config)
    except ConfigError as e:
        _err(str(e))


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else Settings()


@app.command("status")
def status_cmd(
    ctx: typer.Context,
    path: Optional[Path] = typer.Argument(None, file_okay=False, help="Root to scan (default: $REPOSTAT_ROOT, config default_root, then .)"),
    recurse: bool = typer.Option(False, "--recurse", "-r", help="Look at nested directories at any depth"),
    details: bool = typer.Option(False, "--details", "-d", help="List pending changes for modified repos"),
    out_of_sync_only: bool = typer.Option(False, "--out-of-sync-only", "-o", help="Hide repos that are clean and in sync"),
    json_out: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Scan working copies under PATH and report ahead/behind/modified state."""
    settings = _settings(ctx)
    try:
        statuses = list(scan_repositories(
            path,
            recurse=recurse,
            show_details=details,
            out_of_sync_only=out_of_sync_only,
            settings=settings,
        ))
    except PathNotFoundError as e:
        _err(str(e))

    if json_out:
        typer.echo(render_json(statuses))
        return
    if not statuses:
        typer.echo("No repos found.")
        return
    typer.echo(render_details(statuses) if details else render_table(statuses))
    typer.echo()
    typer.echo(summary_line(statuses))


@app.command("root")
def root_cmd(ctx: typer.Context) -> None:
    """Print the default scan root and where it comes from."""
    env_override, configured = default_root_sources(_settings(ctx))
    root, source = resolve_root_with_source(None, env_override, configured)
    typer.echo(f"{root} ({source})")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
