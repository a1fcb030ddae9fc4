"""Sectioned text format for the knowledge base.

    [what]
    SIT=Singapore Institute of Technology

    [where]
    SIT=Dover

One section per non-empty category, ``entity=answer`` data lines, a blank
line after each section. Reading is line based and lenient: lines that are
neither a header nor a data line are skipped, and data lines under an
unknown header are ignored until the next recognised one.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

import structlog

from .models import Category, KBStatus, ReadResult
from .store import KnowledgeStore

logger = structlog.get_logger()

DELIMITER = "="
_STRIP_CHARS = "[]"


def write(store: KnowledgeStore) -> str:
    """Serialize the whole store to text."""
    parts = []
    for category in Category:
        facts = store.facts(category)
        if not facts:
            continue
        parts.append(f"[{category.value}]\n")
        for fact in facts:
            parts.append(f"{fact.entity}{DELIMITER}{fact.answer}\n")
        parts.append("\n")
    return "".join(parts)


def write_to(store: KnowledgeStore, stream: TextIO) -> None:
    stream.write(write(store))


def _header_name(line: str) -> str | None:
    stripped = line.strip()
    if len(stripped) < 2 or stripped[0] != "[" or stripped[-1] != "]":
        return None
    name = stripped[1:-1]
    if DELIMITER in name:
        return None  # bracketed data line, e.g. [x=y]
    return name.strip()


def _split_pair(line: str) -> tuple[str, str] | None:
    """Split a data line at the first delimiter, or None if malformed."""
    if DELIMITER not in line:
        return None
    entity, answer = line.rstrip("\r\n").split(DELIMITER, 1)
    entity = _clean(entity)
    if not entity:
        return None
    return entity, _clean(answer)


def _clean(text: str) -> str:
    for ch in _STRIP_CHARS:
        text = text.replace(ch, "")
    return text


def _scan(store: KnowledgeStore, lines: Iterable[str]) -> ReadResult:
    category: Category | None = None
    count = 0
    skipped = 0

    for lineno, line in enumerate(lines, start=1):
        name = _header_name(line)
        if name is not None:
            category = Category.resolve(name)
            if category is None:
                logger.debug("unknown_section", section=name, line=lineno)
            continue

        if not line.strip():
            continue

        pair = _split_pair(line) if category is not None else None
        if pair is None:
            skipped += 1
            logger.debug("line_skipped", line=lineno)
            continue

        entity, answer = pair
        result = store.put(category.value, entity, answer, append=True)
        if result == KBStatus.OUT_OF_MEMORY:
            logger.warning("knowledge_read_aborted", line=lineno, read=count)
            return ReadResult(KBStatus.OUT_OF_MEMORY, count=count, skipped=skipped)
        if result in (KBStatus.INSERTED, KBStatus.UPDATED):
            count += 1

    logger.info("knowledge_read", count=count, skipped=skipped)
    return ReadResult(KBStatus.OK, count=count, skipped=skipped)


def read(store: KnowledgeStore, text: str) -> ReadResult:
    """Apply every entity/answer pair in ``text`` to ``store``."""
    return _scan(store, text.splitlines(keepends=True))


def read_from(store: KnowledgeStore, stream: TextIO) -> ReadResult:
    return _scan(store, stream)


def load_file(store: KnowledgeStore, path: str | Path) -> ReadResult:
    """Read a knowledge file into ``store``.

    Bytes that are not valid UTF-8 are read as U+FFFD so the scan carries on.

    Raises:
        FileNotFoundError: if the file does not exist (other OSErrors propagate too).
    """
    path = Path(path).expanduser()
    with open(path, encoding="utf-8", errors="replace") as f:
        return read_from(store, f)


def save_file(store: KnowledgeStore, path: str | Path) -> Path:
    """Write ``store`` to ``path``, replacing any existing content."""
    path = Path(path).expanduser()
    with open(path, "w", encoding="utf-8") as f:
        write_to(store, f)
    logger.info("knowledge_saved", path=str(path), facts=len(store))
    return path
