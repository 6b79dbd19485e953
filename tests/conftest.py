"""Shared test fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Clear NOTION_* variables and point the config file into tmp_path."""
    for key in list(os.environ):
        if key.startswith("NOTION_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("NOTION_CONFIG_PATH", str(tmp_path / "config" / "config.yaml"))
