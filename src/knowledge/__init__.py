"""Knowledge base — question-word/entity facts, their store and file format."""

from .codec import load_file, read, read_from, save_file, write, write_to
from .models import Category, Fact, GetResult, KBStatus, ReadResult
from .store import KnowledgeStore
from .tokens import ends_with_suffix, tokens_equal

__all__ = [
    "Category",
    "Fact",
    "GetResult",
    "KBStatus",
    "KnowledgeStore",
    "ReadResult",
    "ends_with_suffix",
    "load_file",
    "read",
    "read_from",
    "save_file",
    "tokens_equal",
    "write",
    "write_to",
]
