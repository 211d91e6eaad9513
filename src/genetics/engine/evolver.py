"""
Generational evolution loop.

Each generation evaluates every chromosome, sorts the population ascending by
fitness, and (from the second generation on) breeds a replacement
population: the last ``elitism`` chromosomes survive by reference and the
remaining slots are filled with children bred through selection, optional
crossover and per-gene mutation.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

import numpy as np

from genetics.core.chromosome import Chromosome
from genetics.core.population import Population
from genetics.engine.config import EvolverConfiguration
from genetics.engine.termination import ContinuePredicate
from genetics.foundation.exceptions import (
    CrossoverCountError,
    ElitismError,
    EmptyPopulationError,
    EvaluationError,
    GeneLengthError,
)
from genetics.operators.mutation import MutationFunction
from genetics.operators.selection import SelectionMethodType

FitnessFunction = Callable[[Chromosome], float]


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _check_length(chromosome: Chromosome, source: str, expected: int) -> Chromosome:
    if chromosome.genes.size != expected:
        raise GeneLengthError(source, int(chromosome.genes.size), expected)
    return chromosome


class Evolver:
    """
    Evolves a population under a configuration, a fitness function and a
    mutation function.

    ``rng`` drives the crossover and mutation coin flips; the selection and
    crossover strategies draw from their own generators.
    """

    def __init__(
        self,
        configuration: EvolverConfiguration,
        fitness_function: FitnessFunction,
        mutation_function: MutationFunction,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.configuration = configuration
        self.fitness_function = fitness_function
        self.mutation_function = mutation_function
        self.rng = rng or np.random.default_rng()

    def evolve(self, population: Population, should_continue: ContinuePredicate) -> Population:
        """
        Evolve ``population`` in place until ``should_continue`` returns False.

        The predicate is consulted after every generation's evaluation and
        sort, the initial population included. The same ``Population``
        object is returned, holding the last generation sorted ascending by
        fitness.

        Raises:
            EmptyPopulationError: if the population holds no chromosomes.
            CrossoverCountError: if the crossover count is not below the population size.
            ElitismError: if elitism exceeds the population size.
            EvaluationError: if the fitness function returns NaN or an infinity.
            GeneLengthError: if selection or crossover yields a gene vector of another length.
        """
        self.validate(population)
        config = self.configuration
        _logger().info(
            "Evolving %d chromosomes of %d genes (%s, %s, elitism=%d).",
            len(population),
            population.gene_length,
            config.selection,
            config.crossover,
            config.elitism,
        )

        generation = 0
        self._evaluate(population)
        self._log_generation(generation, population)
        while should_continue(config, population):
            population.replace(self._breed_generation(population))
            generation += 1
            self._evaluate(population)
            self._log_generation(generation, population)

        _logger().info(
            "Evolution finished after %d generations; best fitness %.10f.",
            generation,
            population.best().fitness,
        )
        return population

    def validate(self, population: Population) -> None:
        config = self.configuration
        size = len(population)
        if size == 0:
            raise EmptyPopulationError()
        if config.crossover.count >= size:
            raise CrossoverCountError(config.crossover.count, size)
        if config.elitism > size:
            raise ElitismError(config.elitism, size)
        expected = population.gene_length
        for chromosome in population:
            _check_length(chromosome, "The initial population", expected)

    def _should_crossover(self) -> bool:
        return self.rng.random() < self.configuration.crossover_rate

    def _should_mutate(self) -> bool:
        return self.rng.random() < self.configuration.mutation_rate

    def _evaluate(self, population: Population) -> None:
        negatives = 0
        for chromosome in population:
            fitness = float(self.fitness_function(chromosome))
            if not math.isfinite(fitness):
                raise EvaluationError(f"The fitness function returned {fitness}.", chromosome)
            if fitness < 0.0:
                negatives += 1
            chromosome.fitness = fitness
            chromosome.weight = fitness
        population.sort_by_fitness()

        if negatives and self.configuration.selection.type is SelectionMethodType.ROULETTE:
            _logger().warning(
                "Population contains %d chromosomes with fitness < 0.0; roulette weights will be shifted.",
                negatives,
            )

    def _breed_generation(self, population: Population) -> list[Chromosome]:
        elites = self._elites(population)
        children = [self._breed_child(population) for _ in range(len(population) - len(elites))]
        return elites + children

    def _elites(self, population: Population) -> list[Chromosome]:
        size = len(population)
        return list(population[size - self.configuration.elitism :])

    def _breed_child(self, population: Population) -> Chromosome:
        config = self.configuration
        length = population.gene_length

        def select() -> Chromosome:
            return _check_length(config.selection(population), "Selection", length)

        if self._should_crossover():
            parent_a = select()
            parent_b = select()
            source = _check_length(config.crossover(parent_a, parent_b), "Crossover", length)
        else:
            source = select()
        child = source.copy()

        for i in range(child.genes.size):
            if self._should_mutate():
                child.genes[i] = self.mutation_function(child, i)
        return child

    def _log_generation(self, generation: int, population: Population) -> None:
        if _logger().isEnabledFor(logging.DEBUG):
            _logger().debug(
                "Generation %d: best fitness %.10f, mean fitness %.10f.",
                generation,
                population.best().fitness,
                population.sum_fitnesses() / len(population),
            )


def new_evolver(
    configuration: EvolverConfiguration,
    fitness_function: FitnessFunction,
    mutation_function: MutationFunction,
    *,
    rng: np.random.Generator | None = None,
) -> Evolver:
    """Create an ``Evolver``; mirrors ``generate_population`` as a factory."""
    return Evolver(configuration, fitness_function, mutation_function, rng=rng)


__all__ = ["Evolver", "FitnessFunction", "new_evolver"]
