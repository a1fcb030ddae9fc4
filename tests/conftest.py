"""Shared test fixtures for kbchat."""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


SAMPLE_KB = """[what]
SIT=Singapore Institute of Technology
NUS=National University of Singapore

[where]
SIT=Dover

[who]
Frank Guan=Lecturer at SIT

"""


@pytest.fixture
def store():
    """Empty, unbounded knowledge store."""
    from knowledge.store import KnowledgeStore

    return KnowledgeStore()


@pytest.fixture
def sample_kb_text():
    return SAMPLE_KB


@pytest.fixture
def kb_file(tmp_path):
    """Sample knowledge file on disk."""
    path = tmp_path / "sample.ini"
    path.write_text(SAMPLE_KB, encoding="utf-8")
    return path


@pytest.fixture
def populated_store(store, sample_kb_text):
    """Store loaded from the sample knowledge document."""
    from knowledge import codec

    codec.read(store, sample_kb_text)
    return store
