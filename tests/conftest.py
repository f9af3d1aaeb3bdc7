"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import utilkit...' works without
an editable install, and that every test starts from freshly loaded settings.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from utilkit.config.settings import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Clear the settings cache and the format override around each test."""
    monkeypatch.delenv("UTILKIT_DEFAULT_TIMESTAMP_FORMAT", raising=False)
    reset_settings()
    yield
    reset_settings()
