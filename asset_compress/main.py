"""
asset-compress — CLI entrypoint.

Usage:
    python -m asset_compress.main --help
    python -m asset_compress.main targets
    python -m asset_compress.main resolve default.js
    python -m asset_compress.main config check
"""

from __future__ import annotations

import json
import sys
from dataclasses import asdict
from pathlib import Path

import click

from asset_compress import __version__
from asset_compress.core.errors import AssetCompressError
from asset_compress.core.models.config import AssetConfig
from asset_compress.core.observability.logging_config import resolve_level, setup_logging


def _load(ctx: click.Context) -> AssetConfig:
    """Load the config named on the command line, or exit with an error."""
    from asset_compress.core.config.loader import load_config

    try:
        return load_config(ctx.obj.get("config_path"))
    except AssetCompressError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="asset-compress")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to asset_compress.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """Asset Compress — resolve build targets to cached files or build URLs."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        quiet_third_party=not debug,
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def targets(ctx: click.Context, as_json: bool) -> None:
    """List build targets declared in the configuration."""
    config = _load(ctx)
    declared = config.declared_targets()

    if as_json:
        click.echo(json.dumps([t.model_dump(mode="json") for t in declared], indent=2))
        return

    if not declared:
        click.secho("No build targets declared.", fg="yellow")
        return

    click.secho(f"📦 Build targets ({len(declared)}):", fg="cyan", bold=True)
    for target in declared:
        click.echo(f"   • {target.name} [{target.kind.extension}]")
        for part in target.source_files:
            click.echo(f"       - {part}")
    click.echo()


@cli.command()
@click.argument("target")
@click.option("--file", "-f", "files", multiple=True, help="Register a runtime source file first.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def resolve(ctx: click.Context, target: str, files: tuple[str, ...], as_json: bool) -> None:
    """Resolve TARGET to a cached file or a dynamic build URL."""
    from asset_compress.core.models.reference import DynamicRoute
    from asset_compress.core.models.target import AssetKind
    from asset_compress.core.services.includer import AssetIncluder

    config = _load(ctx)
    includer = AssetIncluder(config)

    try:
        kind = AssetKind.from_name(target)
        if files:
            target = includer.registry.register_files(target, kind, files)
        ref = includer.policy.resolve(target)
    except AssetCompressError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    url = includer.url_for(ref)
    mode = "dynamic" if isinstance(ref, DynamicRoute) else "static"

    if as_json:
        snapshot = includer.registry.get(target)
        data = {
            "target": snapshot.model_dump(mode="json") if snapshot else target,
            "mode": mode,
            "url": url,
            "reference": asdict(ref),
        }
        click.echo(json.dumps(data, indent=2, default=str))
        return

    color = "yellow" if mode == "dynamic" else "green"
    click.secho(f"{target} → {mode}", fg=color, bold=True)
    click.echo(f"   {url}")


@cli.command()
@click.argument("target")
@click.pass_context
def locate(ctx: click.Context, target: str) -> None:
    """Show the cached build file for TARGET, if one exists."""
    from asset_compress.core.services.cache_locator import CacheLocator

    config = _load(ctx)
    try:
        found = CacheLocator(config).find(target)
    except AssetCompressError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if found is None:
        click.secho(f"{target}: not built", fg="yellow")
        sys.exit(1)
    click.echo(str(found))


@cli.group()
def config() -> None:
    """Asset configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate asset_compress.yml."""
    from asset_compress.core.config.loader import load_config

    try:
        cfg = load_config(ctx.obj.get("config_path"))
    except AssetCompressError as e:
        if as_json:
            click.echo(json.dumps({"valid": False, "errors": [str(e)]}, indent=2))
        else:
            click.secho("❌ Configuration errors:", fg="red", bold=True)
            click.echo(f"   • {e}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({"valid": True, "config": cfg.model_dump(mode="json")}, indent=2))
        return

    click.secho("✅ Configuration is valid", fg="green", bold=True)
    click.echo(f"   Targets: {len(cfg.targets)}")
    for ext in ("js", "css"):
        cache_dir = cfg.cache_directory(ext)
        if not cfg.caching_enabled(ext):
            state = "disabled"
        elif cache_dir is None:
            state = "no cache path"
        else:
            state = str(cache_dir)
        click.echo(f"   {ext} cache: {state}")
    click.echo()


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address.")
@click.option("--port", default=8000, type=int, help="Port.")
@click.pass_context
def web(ctx: click.Context, host: str, port: int) -> None:
    """Start a Flask app with the asset helpers installed."""
    from asset_compress.ui.web.server import create_app, run_server

    config = _load(ctx)
    app = create_app(config_path=ctx.obj.get("config_path"), config=config)

    click.secho("⚡ Asset Compress — web app", bold=True)
    click.echo(f"   Listening: http://{host}:{port}")
    run_server(app, host=host, port=port, debug=ctx.obj.get("debug", False))


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
