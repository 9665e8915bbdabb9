"""Dirichlet/Polya estimation helpers after Minka's fixed-point methods."""

from __future__ import annotations

import math
from collections import Counter
from typing import List, Optional, Sequence

import numpy as np
from scipy.special import digamma, gammaln, polygamma

ATOL = 1.0e-14
EGAMMA = 0.577215664901532860606512090082402431

# Newton's method converges in a handful of steps; the cap only guards
# against endless oscillation at the last bit of precision.
_MAX_NEWTON_STEPS = 100


def initial_inverse_digamma(y: float) -> float:
    """Return the starting guess for the inverse digamma of y."""
    if y >= -2.22:
        return math.exp(y) + 0.5
    return -1.0 / (y + EGAMMA)


def trigamma(x: float) -> float:
    """Return the derivative of the digamma function at x."""
    return float(polygamma(1, x))


def inverse_digamma(y: float) -> float:
    """Return x such that digamma(x) equals y, found by Newton's method."""
    x = initial_inverse_digamma(y)
    for _ in range(_MAX_NEWTON_STEPS):
        increment = -(float(digamma(x)) - y) / trigamma(x)
        x += increment
        if abs(increment) <= ATOL * max(1.0, abs(x)):
            break
    return x


def sample_beta_binomial(
    alpha: float,
    beta: float,
    num_trials: int,
    num_samples: int,
    rng: Optional[np.random.Generator] = None,
) -> List[List[int]]:
    """Draw num_samples rows of num_trials coin flips, each with a Beta-drawn bias."""
    if alpha <= 0 or beta <= 0:
        raise ValueError("alpha and beta must be positive")
    if num_trials < 0 or num_samples < 0:
        raise ValueError("num_trials and num_samples must not be negative")
    generator = rng if rng is not None else np.random.default_rng()
    biases = generator.beta(alpha, beta, size=(num_samples, num_trials))
    return generator.binomial(1, biases).tolist()


def _class_counts(sample: Sequence[int], num_classes: int) -> List[int]:
    counts = Counter(sample)
    return [counts.get(label, 0) for label in range(num_classes)]


def likelihood_beta_binomial(
    training_data: Sequence[Sequence[int]], alphas: Sequence[float]
) -> float:
    """Return the Dirichlet-multinomial likelihood of labelled samples.

    Each sample holds class labels 0..len(alphas)-1; labels outside that
    range add to the sample size but to no class.
    """
    total_alpha = sum(alphas)
    log_likelihood = 0.0
    for sample in training_data:
        counts = _class_counts(sample, len(alphas))
        log_likelihood += gammaln(total_alpha) - gammaln(len(sample) + total_alpha)
        log_likelihood += sum(
            gammaln(count + alpha) - gammaln(alpha) for count, alpha in zip(counts, alphas)
        )
    return math.exp(log_likelihood)


def polya_damped_counts(
    class_counts: Sequence[float], alphas: Sequence[float]
) -> List[float]:
    """Return alpha_k * (digamma(n_k + alpha_k) - digamma(alpha_k)) for each class."""
    if len(class_counts) > len(alphas):
        raise ValueError("every class count needs an alpha")
    return [
        alpha * float(digamma(count + alpha) - digamma(alpha))
        for count, alpha in zip(class_counts, alphas)
    ]


def max_likelihood_polya_mean(
    training_data: Sequence[Sequence[int]], alphas: Sequence[float]
) -> List[float]:
    """Return the maximum-likelihood Polya mean at the precision fixed by alphas."""
    totals = np.zeros(len(alphas))
    for sample in training_data:
        counts = _class_counts(sample, len(alphas))
        totals += polya_damped_counts(counts, alphas)
    norm = totals.sum()
    if norm == 0:
        raise ValueError("training data holds no observations of any class")
    return (totals / norm).tolist()