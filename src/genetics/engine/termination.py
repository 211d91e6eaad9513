"""
Continuation predicates for ``Evolver.evolve``.

A predicate receives ``(configuration, population)`` after every
generation's evaluation and sort, and the run goes on while it returns True.
The stateful predicates here are meant for a single run.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from genetics.core.population import Population
from genetics.engine.config import EvolverConfiguration

ContinuePredicate = Callable[[EvolverConfiguration, Population], bool]


class MaxGenerations:
    """Continue until the predicate has been consulted ``generations`` times."""

    def __init__(self, generations: int) -> None:
        if generations < 0:
            raise ValueError("generations must be non-negative.")
        self.generations = int(generations)
        self.count = 0

    def __call__(self, configuration: EvolverConfiguration, population: Population) -> bool:
        self.count += 1
        return self.count < self.generations


class TargetFitness:
    """Continue while the best fitness is below ``target``."""

    def __init__(self, target: float) -> None:
        self.target = float(target)

    def __call__(self, configuration: EvolverConfiguration, population: Population) -> bool:
        return population.best().fitness < self.target


class Stagnation:
    """
    Stop once the best fitness has not improved by more than ``tolerance``
    for ``patience`` consecutive generations.
    """

    def __init__(self, patience: int, tolerance: float = 0.0) -> None:
        if patience <= 0:
            raise ValueError("patience must be positive.")
        self.patience = int(patience)
        self.tolerance = float(tolerance)
        self.best = -math.inf
        self.stale = 0

    def __call__(self, configuration: EvolverConfiguration, population: Population) -> bool:
        current = population.best().fitness
        if current > self.best + self.tolerance:
            self.best = current
            self.stale = 0
        else:
            self.stale += 1
        return self.stale < self.patience


def any_of(*predicates: ContinuePredicate) -> ContinuePredicate:
    """Combine predicates so the run stops as soon as one of them says stop."""

    def _should_continue(configuration: EvolverConfiguration, population: Population) -> bool:
        # Consult every predicate so stateful counters stay in step.
        results = [predicate(configuration, population) for predicate in predicates]
        return all(results)

    return _should_continue


__all__ = ["ContinuePredicate", "MaxGenerations", "Stagnation", "TargetFitness", "any_of"]
