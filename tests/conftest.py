"""
Pytest configuration and shared fixtures for semverkit tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from semverkit.logging import SilentLogger, use_logger


@pytest.fixture(autouse=True)
def silent_global_logger():
    """
    Start every test with a silent global logger and restore it afterwards.

    CLI handlers install a printing logger; this keeps it from leaking
    into unrelated tests.
    """
    with use_logger(SilentLogger()):
        yield


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def sample_manifest_data() -> dict[str, Any]:
    """
    Provide sample manifest data.

    Both constraints are satisfied.
    """
    return {
        "apiVersion": "semverkit/v1",
        "defaults": {"include_prerelease": False},
        "constraints": [
            {
                "name": "api-client",
                "version": "1.4.2",
                "range": "^1.2.0",
            },
            {
                "name": "runtime",
                "version": "3.0.0-rc.1",
                "range": ">=3.0.0-rc.0 <4",
                "include_prerelease": True,
            },
        ],
    }


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("test.yaml", {"key": "value"})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
