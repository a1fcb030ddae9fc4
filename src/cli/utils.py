"""Shared CLI utilities."""

import sys
from pathlib import Path

import structlog
from rich.console import Console
from rich.markup import escape

console = Console()
logger = structlog.get_logger()


def get_components(load_default: bool = True):
    """Initialize config and an empty (or preloaded) knowledge store.

    Args:
        load_default: If True and ``paths.knowledge_file`` is configured and
            exists, load it into the store.
    """
    from cli.config import load_config, load_config_model
    from knowledge import KnowledgeStore, codec

    try:
        config = load_config()
        config_model = load_config_model()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    store = KnowledgeStore(max_facts=config_model.limits.max_facts)

    knowledge_file = config_model.paths.knowledge_file
    if load_default and knowledge_file and knowledge_file.exists():
        result = codec.load_file(store, knowledge_file)
        logger.info("default_knowledge_loaded", path=str(knowledge_file), count=result.count)

    return {
        "config": config,
        "config_model": config_model,
        "store": store,
    }


def load_into(store, path: str | Path) -> int | None:
    """Load ``path`` into ``store`` and report the outcome on the console.

    Returns the number of facts read, or None when the file could not be used.
    """
    from knowledge import KBStatus, codec

    try:
        result = codec.load_file(store, path)
    except FileNotFoundError:
        console.print(f"[red]Not found:[/] {escape(str(path))}")
        return None
    except OSError as e:
        console.print(f"[red]Cannot read {escape(str(path))}:[/] {e}")
        return None

    if result.status == KBStatus.OUT_OF_MEMORY:
        console.print(
            f"[yellow]Store full after {result.count} facts; rest of {path} not loaded.[/]"
        )
    return result.count
