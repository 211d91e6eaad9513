"""
Public API facade for the genetics engine.

Typical use::

    from genetics.api import (
        EvolverConfiguration, MaxGenerations, generate_population, new_evolver,
    )

    population = generate_population(20, 3, lambda i, j: rng.random())
    config = EvolverConfiguration("tournament", crossover_method("point", 1), elitism=2,
                                  crossover_rate=0.7, mutation_rate=0.05)
    evolver = new_evolver(config, fitness, mutate)
    evolver.evolve(population, MaxGenerations(100))
    best = population.best()
"""

from __future__ import annotations

from genetics.core import Chromosome, Population, generate_population
from genetics.engine import (
    Evolver,
    EvolverConfiguration,
    MaxGenerations,
    Stagnation,
    TargetFitness,
    any_of,
    new_evolver,
)
from genetics.operators import (
    BoundedGenerator,
    BoundedStepMutation,
    CrossoverMethodType,
    GeneLimit,
    SelectionMethodType,
    crossover_method,
    selection_method,
)

__all__ = [
    "BoundedGenerator",
    "BoundedStepMutation",
    "Chromosome",
    "CrossoverMethodType",
    "Evolver",
    "EvolverConfiguration",
    "GeneLimit",
    "MaxGenerations",
    "Population",
    "SelectionMethodType",
    "Stagnation",
    "TargetFitness",
    "any_of",
    "crossover_method",
    "generate_population",
    "new_evolver",
    "selection_method",
]
