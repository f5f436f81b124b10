"""
CLI entry point for Rota.

Modified: 2026-10-18
"""

import logging
import sys
import click
from pathlib import Path
from typing import Optional

from rota import __version__
from rota.config.settings import Settings, get_config_dir
from rota.core.exceptions import ConfigurationError, StartupError, TerminalError
from rota.core.state import resolve_start_directory


logger = logging.getLogger(__name__)


def configure_logging(level: str, log_file: Optional[str] = None) -> None:
    """Route log records to a file, or to Textual's devtools console.

    Nothing is written to the terminal while the TUI owns it.
    """
    if log_file:
        logging.basicConfig(
            filename=str(Path(log_file).expanduser()),
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        from textual.logging import TextualHandler

        logging.basicConfig(level=level, handlers=[TextualHandler(stderr=False)])


def load_settings(ctx: click.Context) -> Settings:
    """Load settings for the current invocation, exiting on invalid config."""
    config_path = ctx.obj.get("config_path") if ctx.obj else None
    try:
        return Settings.load(config_path)
    except ConfigurationError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    envvar="ROTA_CONFIG",
    default=None,
    help="Path to config file (default: ~/.config/rota/config.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path]):
    """Rota - read-only terminal directory browser."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if ctx.invoked_subcommand is None:
        ctx.invoke(browse)


@cli.command()
@click.argument(
    "path",
    required=False,
    type=click.Path(path_type=Path, exists=True, file_okay=False),
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Write logs to this file",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: from config, WARNING)",
)
@click.pass_context
def browse(ctx: click.Context, path: Optional[Path] = None,
           log_file: Optional[Path] = None, log_level: Optional[str] = None):
    """Browse PATH (default: the current directory)."""
    settings = load_settings(ctx)
    if log_file:
        settings.logging.file = str(log_file)
    if log_level:
        settings.logging.level = log_level.upper()
    configure_logging(settings.logging.level, settings.logging.file)

    try:
        start_directory = resolve_start_directory(path)
    except StartupError as e:
        # Reported, not raised: the terminal has not been touched yet.
        click.echo(f"✗ {e}", err=True)
        return

    from rota.tui.app import RotaApp
    from rota.tui.session import TerminalSession

    try:
        app = RotaApp(start_directory=start_directory, settings=settings)
    except ConfigurationError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)

    try:
        with TerminalSession():
            app.run()
    except TerminalError as e:
        click.echo(f"✗ Terminal error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.error(f"Fatal error in browser loop: {e}", exc_info=True)
        click.echo(f"✗ Unexpected error: {e}", err=True)
        sys.exit(1)

    if app.return_code:
        sys.exit(app.return_code)


@cli.command()
@click.pass_context
def keys(ctx: click.Context):
    """Show the effective keybindings."""
    from rota.tui.keybindings import build_registry

    settings = load_settings(ctx)
    try:
        registry = build_registry(settings.keys.bindings)
    except ConfigurationError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)
    click.echo(registry.format_help_text())


@cli.command()
@click.pass_context
def status(ctx: click.Context):
    """Show current configuration."""
    click.echo(f"Rota v{__version__}")

    config_path = ctx.obj.get("config_path") or get_config_dir() / "config.yaml"
    click.echo("\nConfiguration:")
    if config_path.exists():
        click.echo(f"  ✓ Config file: {config_path}")
    else:
        click.echo(f"  Config file: {config_path} (not found, using defaults)")

    settings = load_settings(ctx)
    for section, values in settings.to_dict().items():
        click.echo(f"\n{section}:")
        if not values:
            click.echo("  (defaults)")
        for key, value in values.items():
            click.echo(f"  {key}: {value}")

    click.echo("\nStart directory:")
    try:
        click.echo(f"  {resolve_start_directory()}")
    except StartupError as e:
        click.echo(f"  ✗ {e}")


if __name__ == "__main__":
    cli()
