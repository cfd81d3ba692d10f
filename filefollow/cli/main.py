"""CLI commands for checking agent configuration."""

import json
import logging
import sys
import uuid
from pathlib import Path

import click

from filefollow import __version__
from filefollow.config.constants import (
    COMPONENT_CLI,
    VALIDATION_FAILED,
    VALIDATION_PASSED,
)
from filefollow.config.effective import AgentConfig
from filefollow.config.error_hints import format_validation_error
from filefollow.config.errors import ConfigError
from filefollow.config.loader import ConfigLoader
from filefollow.observability.logging import (
    bind_load_context,
    clear_load_context,
    configure_logging,
    get_logger,
    level_from_name,
)
from filefollow.settings import get_settings


logger = get_logger()


def _load_or_exit(config_path: Path | None, verbose: bool) -> AgentConfig:
    """Load the agent configuration, exiting with hints on failure.

    Args:
        config_path: Explicit config path, or None for the settings default.
        verbose: Whether to emit informational log lines.

    Returns:
        Validated agent configuration.
    """
    settings = get_settings()
    path = config_path or settings.config_path
    load_id = str(uuid.uuid4())

    configure_logging(
        level=logging.INFO if verbose else logging.WARNING,
        json_format=settings.json_logs,
    )
    bind_load_context(load_id)
    log = logger.bind(component=COMPONENT_CLI, config_path=str(path))

    loader = ConfigLoader(load_id=load_id)
    try:
        return loader.load(path)
    except (ConfigError, OSError) as e:
        log.warning(
            "config_check_failed",
            result=VALIDATION_FAILED,
            error=str(e),
        )
        click.echo("Configuration validation failed:", err=True)
        for error in loader.validation_errors:
            formatted = format_validation_error(
                location=error["loc"],
                message=error["msg"],
                error_type=error.get("type", "unknown"),
                include_hint=True,
            )
            click.echo(f"  - {formatted}", err=True)
        sys.exit(1)
    finally:
        clear_load_context()


def _format_timeout(config: AgentConfig) -> str:
    seconds = config.timeout().total_seconds()
    if seconds == 0:
        return "none"
    return f"{seconds:g}s"


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """File follower agent configuration tools."""


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to the agent config file (default: $FILEFOLLOW_CONFIG_PATH).",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable informational logging.",
)
def validate(config_path: Path | None, verbose: bool) -> None:
    """Validate the agent config file without starting any followers."""
    config = _load_or_exit(config_path, verbose)
    logger.info(
        "config_check_passed",
        component=COMPONENT_CLI,
        result=VALIDATION_PASSED,
        checksum=config.compute_checksum(),
    )

    click.echo("Configuration is valid!")
    click.echo(f"  Followers: {len(config.follower_sections)}")
    click.echo(f"  Targets: {len(config.targets())}")
    click.echo(f"  Tags: {len(config.tags())}")
    click.echo(f"  Checksum: {config.compute_checksum()}")

    try:
        level_from_name(config.log_level())
    except ValueError as e:
        click.echo(f"  Warning: {e}", err=True)


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to the agent config file (default: $FILEFOLLOW_CONFIG_PATH).",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output the summary as JSON.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable informational logging.",
)
def show(config_path: Path | None, json_output: bool, verbose: bool) -> None:
    """Show the effective agent configuration with the secret redacted."""
    config = _load_or_exit(config_path, verbose)

    if json_output:
        click.echo(json.dumps(config.summary(), sort_keys=True, indent=2))
        return

    click.echo("Targets:")
    for target in config.targets():
        click.echo(f"  {target}")
    click.echo(f"Tags: {', '.join(config.tags())}")
    click.echo(f"Timeout: {_format_timeout(config)}")
    click.echo(f"Verify remote certificates: {config.verify_remote()}")
    click.echo(f"Log level: {config.log_level() or 'INFO'}")
    click.echo(f"State store: {config.state_path() or '-'}")
    if config.cache_enabled():
        click.echo(f"Cache: {config.cache_path()}")
    else:
        click.echo("Cache: disabled")
    click.echo("Followers:")
    for name, follower in config.followers().items():
        pattern = follower.file_filter or "*"
        click.echo(
            f"  {name}: {follower.base_directory} ({pattern}) -> {follower.tag_name}"
        )
