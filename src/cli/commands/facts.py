"""Knowledge file CLI commands — teach, show."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cli.utils import get_components, load_into
from knowledge import Category, KBStatus, codec, responses

console = Console()

CATEGORY_CHOICES = [c.value for c in Category]


@click.command()
@click.argument("kb_path", type=click.Path(path_type=Path))
@click.argument("category", type=click.Choice(CATEGORY_CHOICES, case_sensitive=False))
@click.argument("entity")
@click.argument("answer")
def teach(kb_path: Path, category: str, entity: str, answer: str):
    """Add or overwrite one fact in a knowledge file."""
    if kb_path.suffix != ".ini":
        console.print(f"[red]Error:[/] {responses.NOT_INI}")
        raise SystemExit(1)

    c = get_components(load_default=False)
    store = c["store"]
    if kb_path.exists() and load_into(store, kb_path) is None:
        raise SystemExit(1)

    status = store.put(category, entity, answer)
    if status not in (KBStatus.INSERTED, KBStatus.UPDATED):
        console.print(f"[red]Error:[/] {responses.for_put(status)}")
        raise SystemExit(1)

    try:
        codec.save_file(store, kb_path)
    except OSError as e:
        console.print(f"[red]Error:[/] {responses.CANNOT_CREATE} ({e})")
        raise SystemExit(1)

    verb = "Updated" if status == KBStatus.UPDATED else "Added"
    console.print(f"[green]{verb}:[/] {category} {escape(entity)} -> {kb_path}")


@click.command()
@click.argument("kb_path", type=click.Path(path_type=Path))
@click.option("--category", "-c", default=None,
              type=click.Choice(CATEGORY_CHOICES, case_sensitive=False),
              help="Only show one category")
def show(kb_path: Path, category: str | None):
    """List the facts stored in a knowledge file."""
    c = get_components(load_default=False)
    store = c["store"]
    if load_into(store, kb_path) is None:
        raise SystemExit(1)

    categories = [Category.resolve(category)] if category else list(Category)
    facts = [f for cat in categories for f in store.facts(cat)]
    if not facts:
        console.print("No facts stored.")
        return

    table = Table(title=escape(str(kb_path)))
    table.add_column("Category", style="cyan", width=8)
    table.add_column("Entity", style="green")
    table.add_column("Answer")

    for f in facts:
        table.add_row(f.category.value, escape(f.entity), escape(f.answer))

    console.print(table)
    stats = store.stats()
    summary = ", ".join(f"{k}: {v}" for k, v in stats["by_category"].items())
    console.print(f"[dim]{stats['total']} facts ({summary})[/]")
