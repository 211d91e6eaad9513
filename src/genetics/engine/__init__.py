"""Evolution engine: configuration, generation loop and stopping rules."""

from .config import EvolverConfiguration
from .evolver import Evolver, FitnessFunction, new_evolver
from .termination import ContinuePredicate, MaxGenerations, Stagnation, TargetFitness, any_of

__all__ = [
    "ContinuePredicate",
    "Evolver",
    "EvolverConfiguration",
    "FitnessFunction",
    "MaxGenerations",
    "Stagnation",
    "TargetFitness",
    "any_of",
    "new_evolver",
]
