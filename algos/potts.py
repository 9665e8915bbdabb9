"""A Potts lattice of clone labels and its defect cost."""

from __future__ import annotations

from collections import Counter
from typing import Dict

import numpy as np

RAND_SEED = 42
BETA = 1.0


def create_lattice(size: int, num_clones: int, seed: int = RAND_SEED) -> np.ndarray:
    """Return a size x size lattice of labels drawn uniformly from range(num_clones)."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, num_clones, size=(size, size))


def clone_sizes(lattice: np.ndarray) -> Dict[int, int]:
    """Return how many cells carry each label."""
    return dict(Counter(np.asarray(lattice).ravel().tolist()))


def lattice_cost(lattice: np.ndarray) -> float:
    """Return BETA times the number of differing nearest neighbours.

    Each cell counts its up, down, left and right neighbours inside the
    lattice, so every unlike pair contributes twice.
    """
    array = np.asarray(lattice)
    vertical = np.count_nonzero(array[1:, :] != array[:-1, :])
    horizontal = np.count_nonzero(array[:, 1:] != array[:, :-1])
    return BETA * float(2 * (vertical + horizontal))