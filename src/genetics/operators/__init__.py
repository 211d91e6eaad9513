"""Selection, crossover, initialization and mutation operators."""

from .crossover import (
    CrossoverFunction,
    CrossoverMethod,
    CrossoverMethodType,
    CustomCrossover,
    PointCrossover,
    UniformCrossover,
    crossover_method,
)
from .initialize import BoundedGenerator, GeneKind, GeneLimit
from .mutation import BoundedStepMutation, MutationFunction
from .selection import (
    CustomSelection,
    RankSelection,
    RouletteSelection,
    SelectionFunction,
    SelectionMethod,
    SelectionMethodType,
    TournamentSelection,
    selection_method,
)

__all__ = [
    "BoundedGenerator",
    "BoundedStepMutation",
    "CrossoverFunction",
    "CrossoverMethod",
    "CrossoverMethodType",
    "CustomCrossover",
    "CustomSelection",
    "GeneKind",
    "GeneLimit",
    "MutationFunction",
    "PointCrossover",
    "RankSelection",
    "RouletteSelection",
    "SelectionFunction",
    "SelectionMethod",
    "SelectionMethodType",
    "TournamentSelection",
    "UniformCrossover",
    "crossover_method",
    "selection_method",
]
