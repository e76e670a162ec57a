"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def sample_json_text():
    """Sample JSON config with nested containers."""
    return '''
    {
        "name": "service",
        "port": 8080,
        "ratio": 0.5,
        "debug": false,
        "owner": null,
        "tags": ["web", "api"],
        "limits": {"cpu": 2, "memory": "512Mi"},
        "empty_list": [],
        "empty_map": {}
    }
    '''


@pytest.fixture
def sample_toml_text():
    """Sample TOML config; declaration order differs from alphabetical order."""
    return '''
title = "example"
version = 3

[server]
port = 8080
host = "localhost"

[database]
enabled = true
ports = [8000, 8001]
'''


@pytest.fixture
def sample_yaml_text():
    """Sample YAML config."""
    return '''
zeta: 1
alpha:
  - one
  - 2.5
  - null
nested:
  flag: yes
'''


@pytest.fixture
def write_file(temp_dir):
    """Write text to a file inside the temporary directory."""
    def _write(name: str, text: str) -> Path:
        path = temp_dir / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
