"""CLI interface for distserve.

Command-line tool for serving a single-page application build.
"""

import logging
import sys
from pathlib import Path

import click

from distserve.config import Config


def configure_logging(*, verbose: bool = False) -> None:
    """Configure root logging for the CLI process.

    Args:
        verbose: Log at DEBUG level instead of INFO
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


@click.group()
def cli() -> None:
    """distserve - serve a single-page application build."""


config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover distserve.toml)",
)

static_dir_option = click.option(
    "--static-dir",
    "-s",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Build output directory containing index.html and assets/ (overrides config)",
)


@cli.command()
@config_option
@static_dir_option
@click.option(
    "--host",
    envvar="HOST",
    default=None,
    help="Host to bind to (overrides config, env: HOST)",
)
@click.option(
    "--port",
    "-p",
    envvar="PORT",
    type=click.IntRange(1, 65535),
    default=None,
    help="Port to bind to (overrides config, env: PORT)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.option(
    "--check/--no-check",
    default=False,
    help="Verify the build output layout before starting (default: disabled)",
)
def serve(
    config_path: Path | None,
    static_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
    check: bool,
) -> None:
    """Start the SPA server."""
    from distserve.server import run_server

    config = _load_config(config_path, host=host, port=port, static_dir=static_dir)

    if check:
        _require_layout(config)

    configure_logging(verbose=verbose)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Static directory: {config.site.static_dir}")
    click.echo(f"Assets: {config.site.assets_prefix} -> {config.site.assets_path}")
    if config.config_path is not None:
        click.echo(f"Config file: {config.config_path}")

    run_server(config)


@cli.command()
@config_option
@static_dir_option
def check(config_path: Path | None, static_dir: Path | None) -> None:
    """Verify that the build output can be served."""
    config = _load_config(config_path, static_dir=static_dir)
    asset_files = _require_layout(config)

    click.echo(f"Entry document: {config.site.index_path}")
    click.echo(f"Assets directory: {config.site.assets_path} ({len(asset_files)} files)")
    click.echo(click.style("Build output OK", fg="green", bold=True))


def _load_config(
    config_path: Path | None,
    *,
    host: str | None = None,
    port: int | None = None,
    static_dir: Path | None = None,
) -> Config:
    """Load config with CLI overrides or exit with error.

    Raises:
        SystemExit: If the configuration cannot be loaded
    """
    try:
        config = Config.load(config_path)
        return config.with_overrides(host=host, port=port, static_dir=static_dir)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


def _require_layout(config: Config) -> list[Path]:
    """Run the layout check or exit with error.

    Raises:
        SystemExit: If the build output is incomplete
    """
    from distserve.assets import check_layout

    try:
        return check_layout(config.site)
    except FileNotFoundError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
