"""Conway's Game of Life on a bounded lattice."""

from __future__ import annotations

from typing import List

import numpy as np

RAND_SEED = 42


def new_cell_state(live: int, num_neighbors: int) -> int:
    """Return the next state of one cell given its live neighbour count."""
    if live > 0:
        return 1 if 2 <= num_neighbors < 4 else 0
    return 1 if num_neighbors == 3 else 0


class GameOfLife:
    """A lattice of 0/1 cells; cells beyond the edge count as dead."""

    def __init__(self, lattice) -> None:
        array = np.array(lattice, dtype=int)
        if array.ndim != 2:
            raise ValueError("lattice must be two-dimensional")
        self.lattice = array

    @property
    def num_rows(self) -> int:
        return self.lattice.shape[0]

    @property
    def num_cols(self) -> int:
        return self.lattice.shape[1]

    def update(self) -> None:
        """Advance the whole lattice by one generation."""
        rows, cols = self.lattice.shape
        padded = np.pad(self.lattice, 1)
        neighbors = sum(
            padded[1 + di : 1 + di + rows, 1 + dj : 1 + dj + cols]
            for di in (-1, 0, 1)
            for dj in (-1, 0, 1)
            if (di, dj) != (0, 0)
        )
        live = self.lattice > 0
        survive = (neighbors >= 2) & (neighbors < 4)
        self.lattice = np.where(live, survive, neighbors == 3).astype(int)


def random_game(num_rows: int, num_cols: int, seed: int = RAND_SEED) -> GameOfLife:
    """Return a game with cells drawn uniformly from {0, 1}, reproducible by seed."""
    rng = np.random.default_rng(seed)
    return GameOfLife(rng.integers(0, 2, size=(num_rows, num_cols)))


def game_of_life(board: List[List[int]]) -> None:
    """Advance a board held as a list of rows by one generation, in place."""
    if not board or not board[0]:
        raise ValueError("board must have at least one row and one column")
    game = GameOfLife(board)
    game.update()
    for row, new_row in zip(board, game.lattice.tolist()):
        row[:] = new_row