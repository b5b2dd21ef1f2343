#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

import logging

from lifegrid import GameGrid, PatternLibrary


def main():
    """Run a glider across a small bounded grid."""
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    game = GameGrid(12).place_pattern(glider, 1, 1)

    print("Initial state:")
    print(game)
    print(f"Population: {game.population}")
    print()

    for _ in range(8):
        game.step()
        print(f"Generation {game.generation}:")
        print(game)
        print(f"Population: {game.population}")
        print()

    generation, reason = game.run_until_stable()
    print(f"Stopped at generation {generation}: {reason}")


if __name__ == "__main__":
    main()
