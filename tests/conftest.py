"""
Pytest configuration and shared fixtures for the API server options test suite.

This module provides common fixtures used across the unit tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root and src directories to the Python path
PROJECT_ROOT = Path(__file__).parent.parent
SRC_ROOT = PROJECT_ROOT / "src"

for path in [str(SRC_ROOT), str(PROJECT_ROOT)]:
    if path not in sys.path:
        sys.path.insert(0, path)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture(scope="session")
def settings_path(project_root: Path) -> Path:
    """Return the path to the default settings file."""
    return project_root / "config" / "settings.yaml"


@pytest.fixture
def tracing_config_file(tmp_path: Path) -> Path:
    """Return the path to an existing tracing config file."""
    path = tmp_path / "tracing.yaml"
    path.write_text(
        "apiVersion: apiserver.config/v1beta1\n"
        "kind: TracingConfiguration\n"
        "endpoint: localhost:4317\n"
        "samplingRatePerMillion: 100\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def stat_error(monkeypatch: pytest.MonkeyPatch):
    """Make os.stat raise an OSError for chosen paths.

    Returns a function taking (path, error); other paths stat normally.
    """
    import os

    real_stat = os.stat
    failing: dict[str, OSError] = {}

    def fake_stat(path, *args, **kwargs):
        if str(path) in failing:
            raise failing[str(path)]
        return real_stat(path, *args, **kwargs)

    monkeypatch.setattr(os, "stat", fake_stat)

    def fail(path: str | Path, error: OSError) -> None:
        failing[str(path)] = error

    return fail
