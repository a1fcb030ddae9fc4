"""CLI test fixtures — isolate config lookup and logging handlers."""

import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every CLI test from an empty cwd with a throwaway HOME."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    # setup_logging binds handlers to the runner's streams
    logging.getLogger().handlers.clear()
