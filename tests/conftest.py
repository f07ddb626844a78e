"""Pytest configuration and fixtures for Almanac tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so almanac can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def seed_at():
    """Return a factory building a converged CalendarSeed for a UTC Instant."""
    from almanac.convert.instant import converged_seed
    from almanac.core.instant import Instant

    def build(coarse: int, fine: int = 0):
        return converged_seed(Instant(coarse, fine))

    return build
