"""Shared test fixtures for hanvitt."""

import os
import tempfile

import pytest


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file pointing all data into tmp_dir."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": os.path.join(tmp_dir, "data"),
            "ledger_file": os.path.join(tmp_dir, "data", "ledger.json"),
            "contact_file": os.path.join(tmp_dir, "data", "contacts.json"),
        },
        "smtp": {
            "host": "mail.example.com",
            "port": 465,
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep a developer's HANVITT_* environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("HANVITT_"):
            monkeypatch.delenv(key, raising=False)
