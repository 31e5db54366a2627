"""
Pytest configuration and shared fixtures.

Puts ``src/`` on ``sys.path`` so the suite runs from a plain checkout
without installing the package.
"""
import sys
from pathlib import Path

import numpy as np
import pytest

SRC_DIR = Path(__file__).parent.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so randomised tests are reproducible."""
    return np.random.default_rng(12345)
