"""CLI entry point for kbchat."""

import click
from rich.console import Console

from cli.commands import ask, chat, init, show, teach
from cli.config import load_config_model
from cli.logging_config import setup_logging

console = Console()


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
def cli(verbose: bool, json_logs: bool):
    """kbchat - a chatbot that learns what, where and who."""
    try:
        config = load_config_model()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        raise SystemExit(1)

    level = "DEBUG" if verbose else config.logging.level
    setup_logging(
        json_mode=json_logs or config.logging.json_mode,
        level=level,
        log_file=config.paths.log_file,
    )


cli.add_command(chat)
cli.add_command(ask)
cli.add_command(teach)
cli.add_command(show)
cli.add_command(init)


if __name__ == "__main__":
    cli()
