"""Root test configuration: isolate tests from the developer's environment"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop MDHTML_* env vars so Settings defaults are deterministic."""
    for name in list(os.environ):
        if name.startswith("MDHTML_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(name="workdir")
def workdir_fixture(tmp_path, monkeypatch):
    """Run the test from an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
