"""
genetics - a real-valued genetic algorithm engine.

Selection, crossover, mutation and elitism over a population of gene
vectors, driven by a caller-supplied fitness function.
"""

from .api import (
    BoundedGenerator,
    BoundedStepMutation,
    Chromosome,
    CrossoverMethodType,
    Evolver,
    EvolverConfiguration,
    GeneLimit,
    MaxGenerations,
    Population,
    SelectionMethodType,
    Stagnation,
    TargetFitness,
    any_of,
    crossover_method,
    generate_population,
    new_evolver,
    selection_method,
)
from .foundation.exceptions import ConfigurationError, EvaluationError, GeneticsError
from .foundation.logging import configure_genetics_logging
from .foundation.version import get_version

__all__ = [
    "BoundedGenerator",
    "BoundedStepMutation",
    "Chromosome",
    "ConfigurationError",
    "CrossoverMethodType",
    "EvaluationError",
    "Evolver",
    "EvolverConfiguration",
    "GeneLimit",
    "GeneticsError",
    "MaxGenerations",
    "Population",
    "SelectionMethodType",
    "Stagnation",
    "TargetFitness",
    "any_of",
    "configure_genetics_logging",
    "crossover_method",
    "generate_population",
    "get_version",
    "new_evolver",
    "selection_method",
]
