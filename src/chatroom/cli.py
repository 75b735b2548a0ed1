"""Command-line interface for the chat room demo."""

from __future__ import annotations

import logging
import sys
from typing import Any

import click
import yaml

logger = logging.getLogger(__name__)


@click.group()
@click.option("--log-level", default="WARNING", help="Logging level.")
def cli(log_level: str) -> None:
    """chatroom -- in-memory mediator chat demo."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


# ------------------------------------------------------------------
# chatroom demo
# ------------------------------------------------------------------


@cli.command()
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=False),
    help="Path to room config YAML (default: built-in three-person demo).",
)
@click.option(
    "--allow-self-messages",
    is_flag=True,
    help="Allow participants to send direct messages to themselves.",
)
@click.option("--export", "export_path", default=None, help="Write the transcript to a JSON file.")
@click.option(
    "--log-output",
    is_flag=True,
    help="Send chat output to the log (INFO) instead of the terminal.",
)
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
def demo(
    config_path: str | None,
    allow_self_messages: bool,
    export_path: str | None,
    log_output: bool,
    verbose: bool,
) -> None:
    """Register the participants, run the script and print the history."""
    from chatroom.comms.sink import ConsoleSink, LoggingSink
    from chatroom.config.loader import load_config, merge_configs
    from chatroom.errors import ChatRoomError, ConfigError
    from chatroom.session.runner import SessionRunner

    chat_logger = logging.getLogger("chatroom")
    if verbose:
        chat_logger.setLevel(logging.DEBUG)
    elif log_output:
        chat_logger.setLevel(logging.INFO)

    overrides: dict[str, Any] = {}
    if allow_self_messages:
        overrides["allow_self_messages"] = True
    if export_path is not None:
        overrides["export_path"] = export_path

    try:
        config = load_config(config_path)
        if overrides:
            config = merge_configs(config, overrides)
    except ConfigError as exc:
        click.secho(f"Config error: {exc}", fg="red", err=True)
        sys.exit(1)

    sink = LoggingSink(logging.getLogger("chatroom.chat")) if log_output else ConsoleSink()
    runner = SessionRunner(config, sink=sink)
    try:
        result = runner.run()
    except ChatRoomError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        sys.exit(1)

    click.echo()
    click.echo(click.style("--- Chat finished ---", fg="cyan", bold=True))
    logger.debug("Session %s produced %d records", result.session_id, len(result.transcript))


# ------------------------------------------------------------------
# chatroom show-config
# ------------------------------------------------------------------


@cli.command("show-config")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=False),
    help="Path to room config YAML.",
)
def show_config(config_path: str | None) -> None:
    """Print the effective configuration as YAML."""
    from chatroom.config.loader import load_config
    from chatroom.errors import ConfigError

    try:
        config = load_config(config_path)
    except ConfigError as exc:
        click.secho(f"Config error: {exc}", fg="red", err=True)
        sys.exit(1)
    click.echo(
        yaml.safe_dump(config.model_dump(), sort_keys=False, allow_unicode=True)
    )


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
