"""Chat CLI commands — interactive session and one-shot questions."""

from pathlib import Path

import click
from rich.console import Console

from chatbot import ChatSession
from cli.utils import get_components, load_into
from knowledge import codec

console = Console()


@click.command()
@click.option("--load", "load_path", type=click.Path(path_type=Path),
              help="Knowledge file (.ini) to load before chatting")
@click.option("--save-on-exit", "save_path", type=click.Path(path_type=Path),
              help="Write the knowledge base here when the session ends")
def chat(load_path: Path | None, save_path: Path | None):
    """Chat with the bot. It asks you for answers it does not know."""
    c = get_components()
    store = c["store"]

    if load_path:
        count = load_into(store, load_path)
        if count is not None:
            console.print(f"[green]Loaded:[/] {count} facts from {load_path}")

    # Chat lines go through click.echo so user text is never read as markup
    session = ChatSession.from_config(store, c["config"], output_fn=click.echo)
    session.run()

    if save_path:
        try:
            codec.save_file(store, save_path)
        except OSError as e:
            console.print(f"[red]Could not save:[/] {e}")
            raise SystemExit(1)
        console.print(f"[green]Saved:[/] {len(store)} facts to {save_path}")


@click.command()
@click.argument("question")
@click.option("--kb", "kb_path", type=click.Path(path_type=Path),
              help="Knowledge file (.ini) to answer from")
def ask(question: str, kb_path: Path | None):
    """Answer a single question without learning anything."""
    c = get_components()
    store = c["store"]

    if kb_path and load_into(store, kb_path) is None:
        raise SystemExit(1)

    session = ChatSession.from_config(store, c["config"], learn=False)
    reply = session.respond(question)
    click.echo(reply.text)
