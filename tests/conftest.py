"""Pytest fixtures for explaincode tests."""

import pytest


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep EXPLAINCODE_* variables and stray .env files out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("EXPLAINCODE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
