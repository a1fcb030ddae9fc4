"""Tests for knowledge data models."""

from knowledge.models import Category, Fact, GetResult, KBStatus, ReadResult


class TestCategory:
    def test_values(self):
        assert Category.WHAT == "what"
        assert Category.WHERE == "where"
        assert Category.WHO == "who"

    def test_order(self):
        assert [c.value for c in Category] == ["what", "where", "who"]

    def test_resolve_case_insensitive(self):
        assert Category.resolve("WHAT") is Category.WHAT
        assert Category.resolve("Where") is Category.WHERE
        assert Category.resolve("who") is Category.WHO

    def test_resolve_unknown(self):
        assert Category.resolve("why") is None
        assert Category.resolve("") is None
        assert Category.resolve(" what") is None


class TestResults:
    def test_get_result_found(self):
        r = GetResult(KBStatus.FOUND, "Dover")
        assert r.found
        assert r.answer == "Dover"

    def test_get_result_not_found(self):
        r = GetResult(KBStatus.NOT_FOUND)
        assert not r.found
        assert r.answer is None

    def test_read_result_defaults(self):
        r = ReadResult(KBStatus.OK)
        assert r.count == 0
        assert r.skipped == 0

    def test_fact(self):
        f = Fact(category=Category.WHO, entity="Frank Guan", answer="Lecturer")
        assert f.category is Category.WHO
