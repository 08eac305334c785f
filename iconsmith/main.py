"""
iconsmith — CLI entrypoint.

Usage:
    iconsmith --help
    iconsmith build
    iconsmith browse
    iconsmith config check
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

import click

from iconsmith import __version__
from iconsmith.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    resolve_level,
    setup_logging,
)

logger = logging.getLogger(__name__)

_STATUS_MARKS = {
    "done": ("✓", "green"),
    "skipped": ("⊘", "yellow"),
    "error": ("✗", "red"),
}


@click.group()
@click.version_option(version=__version__, prog_name="iconsmith")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to iconsmith.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """iconsmith — turn an SVG icon set into typed React components."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    from iconsmith.core.config.loader import find_config_file
    from iconsmith.core.context import set_config_path

    set_config_path(ctx.obj["config_path"] or find_config_file())

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
        quiet_third_party=not debug,
    )


def _load_or_exit(ctx: click.Context):  # type: ignore[no-untyped-def]
    """Load config + paths, printing the error and exiting 1 on failure."""
    from iconsmith.core.config.loader import ConfigError
    from iconsmith.core.use_cases.build import load_project

    try:
        return load_project(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


def _echo_build(ctx: click.Context, result, title: str) -> None:  # type: ignore[no-untyped-def]
    quiet = ctx.obj.get("quiet", False)
    if not quiet:
        click.secho(f"\n🧩 {title}", fg="cyan", bold=True)
        if result.paths:
            click.echo(f"   Project: {result.paths.root}")
        click.echo()

    for stage in result.stages:
        if stage.status == "pending":
            continue
        mark, color = _STATUS_MARKS.get(stage.status, ("?", "white"))
        click.secho(f"   {mark} {stage.label}", fg=color, nl=False)
        timing = f" ({stage.duration_ms}ms)" if stage.duration_ms else ""
        click.echo(timing)
        if stage.error:
            click.echo(f"     │ {stage.error}")
        if stage.detail.get("dry_run"):
            click.echo(f"     │ {stage.detail['dry_run']}")

    report = result.report
    if report and not report.skipped:
        click.echo()
        click.echo(
            f"   Components: {report.written} written to "
            f"{result.paths.relative(report.components_dir)}"
        )
        if report.overwritten:
            click.secho(
                f"   {len(report.overwritten)} name collision(s); later files won: "
                + ", ".join(sorted(set(report.overwritten))),
                fg="yellow",
            )
        if ctx.obj.get("verbose"):
            for artifact in report.artifacts:
                click.echo(f"     • {artifact.source} → {artifact.path.name}")
    elif report and report.skipped:
        click.echo()
        click.secho("   No SVG icons found; nothing to transform.", fg="yellow")

    if result.error:
        click.echo()
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    click.echo()


def _run_stages(
    ctx: click.Context,
    title: str,
    as_json: bool,
    mock: bool = False,
    **kwargs,
) -> None:
    from iconsmith.core.use_cases.build import default_adapter, run_build

    result = run_build(
        config_path=ctx.obj.get("config_path"),
        adapter=default_adapter(mock=mock),
        **kwargs,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            sys.exit(1)
        return

    _echo_build(ctx, result, title)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--skip-generate", is_flag=True, help="Don't run the icon generator.")
@click.option("--skip-format", is_flag=True, help="Don't run the formatter.")
@click.option("--mock", is_flag=True, help="Record generator/formatter commands instead of running them.")
@click.option("--dry-run", is_flag=True, help="Show the generator/formatter commands without running anything.")
@click.pass_context
def build(
    ctx: click.Context,
    as_json: bool,
    skip_generate: bool,
    skip_format: bool,
    mock: bool,
    dry_run: bool,
) -> None:
    """Generate icons (if needed), build components, format them."""
    _run_stages(
        ctx,
        "Build",
        as_json,
        mock=mock,
        dry_run=dry_run,
        skip_generate=skip_generate,
        skip_format=skip_format,
    )


@cli.command()
@click.option("--mock", is_flag=True, help="Record the generator command instead of running it.")
@click.option("--dry-run", is_flag=True, help="Show the generator command without running it.")
@click.pass_context
def generate(ctx: click.Context, mock: bool, dry_run: bool) -> None:
    """Run the icon generator if the SVG directory is missing."""
    _run_stages(ctx, "Generate", False, mock=mock, only={"generate"}, dry_run=dry_run)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def components(ctx: click.Context, as_json: bool) -> None:
    """Regenerate components from the existing SVG directory."""
    _run_stages(ctx, "Components", as_json, only={"components"})


@cli.command("format")
@click.option("--mock", is_flag=True, help="Record the formatter command instead of running it.")
@click.option("--dry-run", is_flag=True, help="Show the formatter command without running it.")
@click.pass_context
def format_cmd(ctx: click.Context, mock: bool, dry_run: bool) -> None:
    """Run the formatter over the generated components."""
    _run_stages(ctx, "Format", False, mock=mock, only={"format"}, dry_run=dry_run)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def names(ctx: click.Context, as_json: bool) -> None:
    """Show the component name each SVG file maps to."""
    from iconsmith.core.services.directories import PreconditionError, require_directory
    from iconsmith.core.services.discovery import list_icon_names
    from iconsmith.core.services.naming import derive_name

    config, paths = _load_or_exit(ctx)
    source = paths.relative(paths.source_dir)
    try:
        require_directory(paths.source_dir, f"SVG icon directory not found at {source}.")
    except PreconditionError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    rows = [(name, derive_name(name).final) for name in list_icon_names(paths.source_dir)]
    counts: dict[str, int] = {}
    for _, ident in rows:
        counts[ident] = counts.get(ident, 0) + 1

    if as_json:
        click.echo(json.dumps(
            {
                "source_dir": str(paths.source_dir),
                "extension": config.component_extension,
                "names": [
                    {"file": f, "component": ident, "collision": counts[ident] > 1}
                    for f, ident in rows
                ],
            },
            indent=2,
        ))
        return

    if not rows:
        click.secho(f"No SVG icons found in {source}.", fg="yellow")
        return

    width = max(len(f) for f, _ in rows)
    for f, ident in rows:
        line = f"{f.ljust(width)}  → {ident}.{config.component_extension}"
        if counts[ident] > 1:
            click.secho(f"{line}  (collision)", fg="yellow")
        else:
            click.echo(line)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output HTML file (default: browser.output from config).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def browse(ctx: click.Context, output: str | None, as_json: bool) -> None:
    """Write the static icon browser page."""
    from iconsmith.core.services.directories import PreconditionError
    from iconsmith.ui.web.browser import write_browser_page

    config, paths = _load_or_exit(ctx)

    try:
        result = write_browser_page(
            paths,
            config.browser,
            output=Path(output) if output else None,
        )
    except PreconditionError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    click.secho(
        f"✅ Wrote icon browser for {result.icon_count} icon(s) -> {paths.relative(result.output)}",
        fg="green",
    )
    if not ctx.obj.get("quiet"):
        click.echo(
            "   Open the file directly in a browser, or run 'iconsmith serve' "
            "to avoid file:// quirks."
        )


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address.")
@click.option("--port", "-p", default=8000, type=int, help="Port number.")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int) -> None:
    """Serve the icon browser and SVG files over HTTP."""
    from iconsmith.ui.web.server import create_app, run_server

    config, paths = _load_or_exit(ctx)
    app = create_app(paths, config.browser)

    click.echo()
    click.secho("🧩 iconsmith — Icon Browser", bold=True)
    click.echo(f"   Browser: http://{host}:{port}")
    click.echo(f"   Icons:   {paths.source_dir}")
    click.echo()

    run_server(app, host=host, port=port, debug=ctx.obj.get("debug", False))


@cli.group()
def config() -> None:
    """Project configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate iconsmith.yml and the paths it names."""
    from iconsmith.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None and result.paths is not None
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Name:       {result.config.name}")
        click.echo(f"   Source:     {result.paths.relative(result.paths.source_dir)}")
        click.echo(f"   Components: {result.paths.relative(result.paths.components_dir)}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    click.echo()
    if not result.valid:
        sys.exit(1)


def main() -> None:
    """Console entry point: uncaught errors are logged and exit 1."""
    try:
        cli()
    except Exception:
        logger.exception("iconsmith failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
