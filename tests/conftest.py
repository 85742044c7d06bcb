"""Pytest configuration and shared fixtures for boxtrace tests."""

import pytest

from boxtrace import DiagramParser, Grid, Point

SAMPLE_DIAGRAM = """
 ,---.,-----------.
 |   |',-.        |
 |   | | |  ,-----'
 '---' | |  |
       | |--'
       '-'
"""

# The one connector of SAMPLE_DIAGRAM, traced from the left box outward
SAMPLE_CONNECTOR = (
    Point(2, 6),
    Point(1, 6),
    Point(1, 18),
    Point(3, 18),
    Point(3, 12),
    Point(5, 12),
    Point(5, 10),
)


@pytest.fixture
def sample_text():
    """Two boxes joined by one winding connector, plus two unclosed corners."""
    return SAMPLE_DIAGRAM


@pytest.fixture
def sample_grid():
    """Grid built from the sample diagram."""
    return Grid.from_text(SAMPLE_DIAGRAM)


@pytest.fixture
def sample_connector():
    """Expected turn points of the sample connector."""
    return SAMPLE_CONNECTOR


@pytest.fixture
def dangling_grid():
    """A single box with a connector leading nowhere."""
    return Grid.from_text(",-.\n| |--\n'-'")


@pytest.fixture
def loop_grid():
    """A closed outline, which the path tracer would circle forever."""
    return Grid.from_text(",-.\n'-'")


@pytest.fixture
def parser():
    """Default DiagramParser instance."""
    return DiagramParser()
