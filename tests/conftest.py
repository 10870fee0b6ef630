"""
Pytest configuration and shared fixtures for the knight's tour test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'knight_tour' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from knight_tour.core.tour import TourEngine  # noqa: E402


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def write_yaml(temp_yaml_file):
    """
    Fixture returning a helper that dumps a dict into the temporary YAML file.
    """

    def _write(data) -> Path:
        temp_yaml_file.write_text(yaml.safe_dump(data), encoding="utf-8")
        return temp_yaml_file

    return _write


@pytest.fixture
def valid_tour_config_dict():
    """
    Fixture providing a complete valid tour configuration dictionary.
    """
    return {
        "board_size": 6,
        "start": "c4",
        "limits": {"min_board_size": 3, "max_board_size": 10},
    }


@pytest.fixture
def engine8():
    """Fresh engine on a standard 8x8 board."""
    return TourEngine(8)


@pytest.fixture
def engine5():
    """Fresh engine on a 5x5 board."""
    return TourEngine(5)


def _advance_until_stuck(engine: TourEngine, limit: int = 10_000) -> int:
    moves = 0
    while engine.advance():
        moves += 1
        assert moves <= limit
    return moves


@pytest.fixture
def run_to_end():
    """Helper that advances until the engine reports no move; returns the move count made."""
    return _advance_until_stuck


def pytest_configure(config):
    """
    Hook for initial pytest configuration.

    Used to add custom markers and configuration.
    """
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )
