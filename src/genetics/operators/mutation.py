"""Mutation functions for bounded genes."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

from genetics.core.chromosome import Chromosome
from genetics.operators.initialize import GeneLimit, _as_limits

MutationFunction = Callable[[Chromosome, int], float]


class BoundedStepMutation:
    """
    Mutation function ``(chromosome, gene_index) -> value`` for bounded genes.

    Integer genes are resampled inside their limits. Float genes move by a
    step of a tenth of their span, shrunk tenfold on each of three fair coin
    flips, in a random direction, then clamped into ``[minimum, maximum]``.
    """

    def __init__(
        self,
        limits: Sequence[GeneLimit],
        rng: np.random.Generator | None = None,
        *,
        refinements: int = 3,
    ) -> None:
        self.limits = _as_limits(limits)
        self.rng = rng or np.random.default_rng()
        if refinements < 0:
            raise ValueError("refinements must be non-negative.")
        self.refinements = int(refinements)

    def __call__(self, chromosome: Chromosome, gene: int) -> float:
        limit = self.limits[gene]
        if limit.kind == "int":
            return limit.sample(self.rng)

        step = limit.span / 10.0
        for _ in range(self.refinements):
            if self.rng.integers(0, 2) == 1:
                step /= 10.0

        value = float(chromosome.genes[gene])
        value = value + step if self.rng.integers(0, 2) == 1 else value - step
        return float(np.clip(value, limit.minimum, limit.maximum))


__all__ = ["BoundedStepMutation", "MutationFunction"]
