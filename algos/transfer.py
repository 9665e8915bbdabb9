"""Transfer matrix that keeps a state with tiny probability and hops uniformly."""

import numpy as np

STAY_PROBABILITY = 1.0e-5


def transfer_matrix(k: int) -> np.ndarray:
    """Return a k x k matrix: STAY_PROBABILITY on the diagonal, the rest spread evenly."""
    if k < 2:
        raise ValueError("k must be at least 2")
    t = STAY_PROBABILITY
    eye = np.eye(k)
    ones = np.ones((k, k))
    return t * eye + (ones - eye) * (1.0 - t) / (k - 1)