"""
Tune three bounded parameters with the genetic engine.

The fitness rewards parameters close to a hidden target; one of them is an
integer parameter. Shows bounded generation, bounded step mutation, and a
combined stopping rule.

Usage:
    python examples/parameter_tuning.py
"""
from __future__ import annotations

import logging

import numpy as np

from genetics import (
    BoundedGenerator,
    BoundedStepMutation,
    EvolverConfiguration,
    GeneLimit,
    MaxGenerations,
    TargetFitness,
    any_of,
    configure_genetics_logging,
    crossover_method,
    generate_population,
    new_evolver,
    selection_method,
)

TARGET = np.array([0.25, 7.0, -3.0])


def fitness(chromosome) -> float:
    return -float(np.sum((chromosome.genes - TARGET) ** 2))


def main() -> None:
    configure_genetics_logging(level=logging.INFO)
    rng = np.random.default_rng(42)
    limits = [GeneLimit(0.0, 1.0), GeneLimit(0, 20, kind="int"), GeneLimit(-10.0, 10.0)]

    population = generate_population(40, len(limits), BoundedGenerator(limits, rng=rng))
    config = EvolverConfiguration(
        selection=selection_method("tournament", rng=rng),
        crossover=crossover_method("point", 1, rng=rng),
        elitism=2,
        crossover_rate=0.7,
        mutation_rate=0.2,
    )
    evolver = new_evolver(config, fitness, BoundedStepMutation(limits, rng=rng), rng=rng)
    evolver.evolve(population, any_of(MaxGenerations(200), TargetFitness(-1e-4)))

    best = population.best()
    print(f"Best parameters: {best.genes} (fitness {best.fitness:.6f})")


if __name__ == "__main__":
    main()
