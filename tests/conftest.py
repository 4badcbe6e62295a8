import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep stray env vars and a local .configs file out of every test."""
    for key in ("CONFIG_FILE", "LOG_LEVEL", "DEFAULT_METRIC_TYPE", "REJECT_NON_FINITE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
