"""Shared test fixtures for Rota tests.

Created: 2026-10-18
"""

import os
import pytest
from pathlib import Path

from rota.config.settings import Settings
from rota.core.state import BrowserState


@pytest.fixture
def sample_tree(tmp_path):
    """Directory holding ``b.txt``, ``A/`` and ``a.txt`` plus a nested level."""
    (tmp_path / "b.txt").write_text("bravo")
    (tmp_path / "A").mkdir()
    (tmp_path / "a.txt").write_bytes(b"x" * 1024)
    (tmp_path / "A" / "inner.txt").write_text("inner")
    (tmp_path / "A" / "sub").mkdir()
    return tmp_path


@pytest.fixture
def mixed_tree(tmp_path):
    """Directory with mixed-case files and directories."""
    for name in ["zeta.py", "Alpha.md", "beta.txt"]:
        (tmp_path / name).write_text(name)
    for name in ["docs", "Build", "src"]:
        (tmp_path / name).mkdir()
    return tmp_path


@pytest.fixture
def empty_dir(tmp_path):
    """An empty directory."""
    path = tmp_path / "empty"
    path.mkdir()
    return path


@pytest.fixture
def state(sample_tree):
    """BrowserState loaded on ``sample_tree``."""
    return BrowserState.open(sample_tree)


@pytest.fixture
def settings():
    """Default settings."""
    return Settings()


@pytest.fixture
def unreadable_dir(tmp_path):
    """Directory without read permission (skips when running as root)."""
    if hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("permission checks do not apply to root")
    path = tmp_path / "locked"
    path.mkdir()
    (path / "secret.txt").write_text("secret")
    path.chmod(0)
    yield path
    path.chmod(0o755)
