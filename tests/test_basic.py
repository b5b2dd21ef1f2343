"""Basic tests for the lifegrid package."""

import numpy as np

from lifegrid import GameGrid, PatternLibrary


def test_game_creation():
    """Test basic game creation."""
    game = GameGrid(10)
    assert game.size == 10
    assert game.population == 0
    assert game.get_grid().shape == (10, 10)


def test_pattern_library():
    """Test pattern library has some patterns."""
    library = PatternLibrary()
    patterns = library.list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    game = GameGrid(5).initialize([[1, 1, 1]], 2, 1)
    horizontal = game.get_grid()
    assert game.population == 3

    # Step once - should become vertical
    game.step()
    assert game.population == 3
    grid = game.get_grid()
    assert grid[1, 2] and grid[2, 2] and grid[3, 2]

    # Step again - should return to horizontal
    game.step()
    assert np.array_equal(game.get_grid(), horizontal)
