"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from oscillator.Segment import Segment
from oscillator.Vec2 import Vec2
from oscillator.circuit import OscillatingCircuit
from oscillator.path import ClosedPath


@pytest.fixture
def unit_square():
    """Loop through (0,0), (1,0), (1,1), (0,1)."""
    corners = [Vec2(0, 0), Vec2(1, 0), Vec2(1, 1), Vec2(0, 1)]
    return ClosedPath(Segment(corners[i], corners[(i + 1) % 4]) for i in range(4))


@pytest.fixture
def circuit():
    """1 uF, 1 mH, 10 V."""
    return OscillatingCircuit(1e-6, 1e-3, 10.0, charges_count=20, charges_value=50,
                              size=Vec2(300, 300), origin=Vec2(100, 100))
