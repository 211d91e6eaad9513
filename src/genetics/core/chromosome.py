"""Chromosome: a real-valued gene vector with its fitness."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def _as_genes(values) -> np.ndarray:
    genes = np.array(values, dtype=float)
    if genes.ndim != 1:
        raise ValueError("genes must be a one-dimensional sequence of real numbers.")
    return genes


@dataclass(eq=False)
class Chromosome:
    """
    An ordered vector of genes and a fitness value.

    Attributes:
        genes: The chromosome's genes.
        fitness: Fitness assigned by the evolver. It is refreshed once per
            generation right after breeding; changing it before the next
            generation affects selection from the population.
        weight: Selection scratch value owned by the engine. Selection
            strategies overwrite it freely, so it carries no meaning between
            generations.

    Equality is identity: a population holds references, and the same
    chromosome object may appear in consecutive generations as an elite.
    """

    genes: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=float))
    fitness: float = 0.0
    weight: float = 0.0

    def __post_init__(self) -> None:
        self.genes = _as_genes(self.genes)

    def copy(self) -> Chromosome:
        return Chromosome(genes=self.genes.copy(), fitness=self.fitness, weight=self.weight)

    def __str__(self) -> str:
        genes = np.array2string(self.genes, separator=", ")
        return f"[Genes: {genes}, Fitness: {self.fitness:0.10f}, weight: {self.weight:0.10f}]"


__all__ = ["Chromosome"]
