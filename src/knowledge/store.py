"""In-memory knowledge store — one ordered fact list per question category."""

from collections.abc import Iterator

import structlog

from .models import Category, Fact, GetResult, KBStatus
from .tokens import tokens_equal

logger = structlog.get_logger()


class KnowledgeStore:
    """Category-bucketed (category, entity) -> answer store.

    Entities are unique per category, compared case-insensitively. Facts
    learned through ``put`` go to the front of their category unless
    ``append=True``, so the newest answer is listed first when saved.

    Args:
        max_facts: Optional capacity. Once reached, inserts report
            OUT_OF_MEMORY and leave the store unchanged. Updates still work.
    """

    def __init__(self, max_facts: int | None = None):
        self.max_facts = max_facts
        self._buckets: dict[Category, list[Fact]] = {c: [] for c in Category}

    def get(self, category_token: str, entity: str, max_length: int | None = None) -> GetResult:
        """Look up the answer for ``entity`` under a question word.

        A stored answer longer than ``max_length`` is passed over rather than
        truncated, and the scan moves on.
        """
        category = Category.resolve(category_token)
        if category is None:
            return GetResult(KBStatus.INVALID_CATEGORY)

        for fact in self._buckets[category]:
            if not tokens_equal(fact.entity, entity):
                continue
            if max_length is not None and len(fact.answer) > max_length:
                logger.debug(
                    "answer_too_long",
                    category=category.value,
                    entity=entity,
                    length=len(fact.answer),
                    max_length=max_length,
                )
                continue
            return GetResult(KBStatus.FOUND, fact.answer)

        return GetResult(KBStatus.NOT_FOUND)

    def put(self, category_token: str, entity: str, answer: str, *, append: bool = False) -> KBStatus:
        """Insert a fact, or overwrite the answer of an existing entity."""
        category = Category.resolve(category_token)
        if category is None:
            return KBStatus.INVALID_CATEGORY

        bucket = self._buckets[category]
        for fact in bucket:
            if tokens_equal(fact.entity, entity):
                fact.answer = answer
                logger.debug("fact_updated", category=category.value, entity=entity)
                return KBStatus.UPDATED

        if self.max_facts is not None and len(self) >= self.max_facts:
            logger.warning("store_full", max_facts=self.max_facts)
            return KBStatus.OUT_OF_MEMORY

        try:
            fact = Fact(category=category, entity=entity, answer=answer)
            if append:
                bucket.append(fact)
            else:
                bucket.insert(0, fact)
        except MemoryError:
            logger.error("fact_alloc_failed", category=category.value, entity=entity)
            return KBStatus.OUT_OF_MEMORY

        logger.debug("fact_inserted", category=category.value, entity=entity)
        return KBStatus.INSERTED

    def reset(self) -> int:
        """Delete ALL facts. Returns count deleted."""
        count = len(self)
        for bucket in self._buckets.values():
            bucket.clear()
        logger.info("knowledge_reset", deleted=count)
        return count

    def facts(self, category: Category) -> list[Fact]:
        """Facts of one category in stored order (copy)."""
        return list(self._buckets[category])

    def count(self, category: Category) -> int:
        return len(self._buckets[category])

    def stats(self) -> dict:
        """Fact counts by category and total."""
        by_category = {c.value: len(b) for c, b in self._buckets.items() if b}
        return {"total": len(self), "by_category": by_category}

    def __iter__(self) -> Iterator[Fact]:
        for category in Category:
            yield from self._buckets[category]

    def __len__(self) -> int:
        return sum(len(b) for b in self._buckets.values())

    def __repr__(self) -> str:  # pragma: no cover
        return f"KnowledgeStore({len(self)} facts)"
