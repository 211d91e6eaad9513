"""Population of chromosomes and the aggregates used by selection."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from typing import overload

import numpy as np

from genetics.core.chromosome import Chromosome
from genetics.foundation.exceptions import PopulationError

GeneratingFunction = Callable[[int, int], float]


class Population:
    """
    An ordered collection of chromosome references.

    Slicing returns a new ``Population`` that shares the same chromosome
    objects, so weight updates made through a slice are visible in the
    parent population.
    """

    def __init__(self, chromosomes: Iterable[Chromosome] = ()) -> None:
        self.chromosomes: list[Chromosome] = list(chromosomes)

    def __len__(self) -> int:
        return len(self.chromosomes)

    def __iter__(self) -> Iterator[Chromosome]:
        return iter(self.chromosomes)

    @overload
    def __getitem__(self, index: int) -> Chromosome: ...

    @overload
    def __getitem__(self, index: slice) -> Population: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Population(self.chromosomes[index])
        return self.chromosomes[index]

    def __repr__(self) -> str:
        return f"Population(size={len(self)}, gene_length={self.gene_length})"

    @property
    def gene_length(self) -> int:
        if not self.chromosomes:
            return 0
        return int(self.chromosomes[0].genes.size)

    def replace(self, chromosomes: Iterable[Chromosome]) -> None:
        """Swap the whole content for a new generation, keeping this object."""
        self.chromosomes[:] = list(chromosomes)

    def sort_by_fitness(self, *, descending: bool = False) -> None:
        self.chromosomes.sort(key=lambda c: c.fitness, reverse=descending)

    def best(self) -> Chromosome:
        """Return the last chromosome, which is the fittest once sorted ascending."""
        if not self.chromosomes:
            raise PopulationError("Cannot take the best chromosome of an empty population.")
        return self.chromosomes[-1]

    def sum_weights(self) -> float:
        total = 0.0
        for c in self.chromosomes:
            total += c.weight
        return total

    def sum_fitnesses(self) -> float:
        total = 0.0
        for c in self.chromosomes:
            total += c.fitness
        return total

    def count_negative_weights(self) -> int:
        return sum(1 for c in self.chromosomes if c.weight < 0.0)

    def min_weight(self) -> float:
        """Minimum weight; ``inf`` for an empty population."""
        minimum = math.inf
        for c in self.chromosomes:
            if c.weight < minimum:
                minimum = c.weight
        return minimum

    def shift_weights(self, delta: float) -> None:
        for c in self.chromosomes:
            c.weight += delta

    def shuffle(self, rng: np.random.Generator) -> None:
        """Uniformly permute the chromosome order in place."""
        rng.shuffle(self.chromosomes)

    def chromosome_with_max_weight(self) -> Chromosome:
        """Return the heaviest chromosome; ties go to the first one in order."""
        if not self.chromosomes:
            raise PopulationError("Cannot pick the heaviest chromosome of an empty population.")
        best = self.chromosomes[0]
        for c in self.chromosomes[1:]:
            if c.weight > best.weight:
                best = c
        return best


def generate_population(
    population_size: int,
    chromosome_length: int,
    generating_function: GeneratingFunction,
) -> Population:
    """
    Build a population where gene ``j`` of individual ``i`` is ``generating_function(i, j)``.

    Raises:
        PopulationError: if either size is not positive.
    """
    if population_size <= 0:
        raise PopulationError(
            f"population_size must be positive, got {population_size}.",
            details={"population_size": population_size},
        )
    if chromosome_length <= 0:
        raise PopulationError(
            f"chromosome_length must be positive, got {chromosome_length}.",
            details={"chromosome_length": chromosome_length},
        )
    chromosomes = []
    for i in range(population_size):
        genes = np.fromiter(
            (generating_function(i, j) for j in range(chromosome_length)),
            dtype=float,
            count=chromosome_length,
        )
        chromosomes.append(Chromosome(genes=genes))
    return Population(chromosomes)


__all__ = ["GeneratingFunction", "Population", "generate_population"]
