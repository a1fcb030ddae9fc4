"""Init CLI command."""

from pathlib import Path

import click
from rich.console import Console

from cli.config import write_default_config

console = Console()

SAMPLE_KNOWLEDGE = """[what]
SIT=Singapore Institute of Technology

[where]
SIT=Dover

[who]
Frank Guan=Lecturer at SIT

"""


@click.command()
@click.option("--path", "config_path", type=click.Path(path_type=Path),
              help="Where to write the config file (default: ~/.kbchat/config.yaml)")
@click.option("--samples", is_flag=True, help="Also write sample.ini next to the config")
@click.option("--force", is_flag=True, help="Overwrite an existing config")
def init(config_path: Path | None, samples: bool, force: bool):
    """Write a default kbchat config and optionally a sample knowledge file."""
    config_path = (config_path or Path.home() / ".kbchat" / "config.yaml").expanduser()
    if config_path.exists() and not force:
        console.print(f"[yellow]Config exists:[/] {config_path} (use --force to overwrite)")
    else:
        write_default_config(config_path)
        console.print(f"[green]✓[/] Created config: {config_path}")

    if samples:
        sample_path = config_path.parent / "sample.ini"
        if sample_path.exists() and not force:
            console.print(f"[yellow]Sample exists:[/] {sample_path}")
        else:
            sample_path.write_text(SAMPLE_KNOWLEDGE, encoding="utf-8")
            console.print(f"[green]✓[/] Created sample: {sample_path}")

    console.print("\n[bold]Ready![/] Run [bold]kbchat chat[/] to start.")
