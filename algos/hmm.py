"""Parameters of a discrete hidden Markov model."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

TOLERANCE = 1e-6


def _check_stochastic_rows(matrix: np.ndarray, name: str) -> None:
    if np.any(matrix < 0):
        raise ValueError(f"{name} must not hold negative probabilities")
    if not np.allclose(matrix.sum(axis=1), 1.0, rtol=0.0, atol=TOLERANCE):
        raise ValueError(f"Each row of {name} must sum to 1")


@dataclass
class HMM:
    """Transition matrix A, emission matrix B and initial distribution PI."""

    A: np.ndarray
    B: np.ndarray
    PI: np.ndarray

    def __post_init__(self) -> None:
        self.A = np.asarray(self.A, dtype=float)
        self.B = np.asarray(self.B, dtype=float)
        self.PI = np.asarray(self.PI, dtype=float)

        if self.A.ndim != 2 or self.B.ndim != 2 or self.PI.ndim != 1:
            raise ValueError("A and B must be matrices and PI a vector")
        if self.B.shape[0] == 0:
            raise ValueError("B must have a positive number of rows")
        if self.B.shape[1] == 0:
            raise ValueError("B must have a positive number of columns")
        if self.A.shape[0] != self.B.shape[0]:
            raise ValueError("A and B must have the same number of rows")
        if self.A.shape[0] != self.A.shape[1]:
            raise ValueError("A must be square")
        if self.A.shape[0] != self.PI.shape[0]:
            raise ValueError("PI must be of length N")

        _check_stochastic_rows(self.A, "A")
        _check_stochastic_rows(self.B, "B")
        if np.any(self.PI < 0):
            raise ValueError("PI must not hold negative probabilities")
        if abs(self.PI.sum() - 1.0) > TOLERANCE:
            raise ValueError("PI must sum to 1")

    def n_latent_states(self) -> int:
        """Return N, the number of hidden states."""
        return self.B.shape[0]

    def n_obs_states(self) -> int:
        """Return K, the number of distinct observations the model can emit."""
        return self.B.shape[1]