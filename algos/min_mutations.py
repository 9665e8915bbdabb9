"""Fewest single-base mutations between two genes through a bank of valid genes."""

from collections import deque
from typing import Iterable

BASES = "ACGT"


def min_mutations(start_gene: str, end_gene: str, bank: Iterable[str]) -> int:
    """Return the fewest mutations from start_gene to end_gene, or -1 if impossible.

    Every intermediate gene, and end_gene itself, must be in the bank.
    """
    valid = set(bank)
    if end_gene not in valid:
        return -1

    queue = deque([(start_gene, 0)])
    visited = {start_gene}

    while queue:
        gene, steps = queue.popleft()
        if gene == end_gene:
            return steps
        for pos, current in enumerate(gene):
            for base in BASES:
                if base == current:
                    continue
                candidate = f"{gene[:pos]}{base}{gene[pos + 1:]}"
                if candidate in valid and candidate not in visited:
                    visited.add(candidate)
                    queue.append((candidate, steps + 1))
    return -1