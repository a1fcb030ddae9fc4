"""Data models for the knowledge base."""

from dataclasses import dataclass
from enum import Enum

from .tokens import tokens_equal


class Category(str, Enum):
    WHAT = "what"
    WHERE = "where"
    WHO = "who"

    @classmethod
    def resolve(cls, token: str) -> "Category | None":
        """Map a raw question word to a category, or None if unsupported."""
        for category in cls:
            if tokens_equal(token, category.value):
                return category
        return None


class KBStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    INVALID_CATEGORY = "invalid_category"
    INSERTED = "inserted"
    UPDATED = "updated"
    OUT_OF_MEMORY = "out_of_memory"
    OK = "ok"


@dataclass
class Fact:
    category: Category
    entity: str
    answer: str


@dataclass
class GetResult:
    """Outcome of a store lookup."""

    status: KBStatus
    answer: str | None = None

    @property
    def found(self) -> bool:
        return self.status == KBStatus.FOUND


@dataclass
class ReadResult:
    """Outcome of parsing a knowledge document."""

    status: KBStatus  # OK | OUT_OF_MEMORY
    count: int = 0
    skipped: int = 0
