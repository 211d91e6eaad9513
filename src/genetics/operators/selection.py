"""
Parent selection strategies.

Every strategy is a callable taking a ``Population`` and returning one of its
chromosomes by reference. Rank and roulette selection overwrite the
``weight`` of every chromosome they look at, and roulette and tournament
selection reorder the population, so none of these values are stable across
calls within a generation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum

import numpy as np

from genetics.core.chromosome import Chromosome
from genetics.core.population import Population
from genetics.foundation.exceptions import InvalidOperatorError

SelectionFunction = Callable[[Population], Chromosome]


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


class SelectionMethodType(Enum):
    RANK = "rank"
    ROULETTE = "roulette"
    TOURNAMENT = "tournament"
    CUSTOM = "custom"


class SelectionMethod(ABC):
    """Base class for selection strategies."""

    type: SelectionMethodType

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng or np.random.default_rng()

    @abstractmethod
    def __call__(self, population: Population) -> Chromosome:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class RankSelection(SelectionMethod):
    """
    Rank selection.

    Expects the population sorted ascending by fitness. Each chromosome gets
    its 1-based position as weight, an integer is drawn uniformly in
    ``[0, total)`` and the first chromosome whose cumulative weight exceeds
    it is returned.
    """

    type = SelectionMethodType.RANK

    def __call__(self, population: Population) -> Chromosome:
        for i, c in enumerate(population):
            c.weight = float(i) + 1.0

        total = population.sum_weights()
        draw = float(self.rng.integers(0, int(total)))
        cumulative = 0.0
        for c in population:
            cumulative += c.weight
            if draw < cumulative:
                return c

        # Unreachable with positive integer ranks.
        return population[-1]


class RouletteSelection(SelectionMethod):
    """
    Fitness-proportionate (roulette wheel) selection.

    The population is sorted descending by fitness. Negative weights are
    shifted so the smallest becomes 0, then weights are normalised to sum to
    1 and a uniform draw in ``[0, 1)`` picks the first chromosome whose
    cumulative weight exceeds it. Rounding at the upper boundary falls back
    to the first (fittest) chromosome.
    """

    type = SelectionMethodType.ROULETTE

    def __call__(self, population: Population) -> Chromosome:
        population.sort_by_fitness(descending=True)

        if population.count_negative_weights() > 0:
            population.shift_weights(-population.min_weight())

        total = population.sum_weights()
        if total > 0.0:
            for c in population:
                c.weight = c.weight / total
        else:
            _logger().debug("Roulette weights sum to zero; selecting uniformly.")
            uniform = 1.0 / len(population)
            for c in population:
                c.weight = uniform

        draw = self.rng.random()
        cumulative = 0.0
        for c in population:
            cumulative += c.weight
            if draw < cumulative:
                return c

        return population[0]


class TournamentSelection(SelectionMethod):
    """
    Tournament selection over a randomly sized group.

    The population is shuffled in place, a group size is drawn uniformly in
    ``[1, n - 1]`` (1 for a single chromosome) and the heaviest chromosome
    at the front of the shuffled order wins. Ties go to the first contender.
    """

    type = SelectionMethodType.TOURNAMENT

    def __call__(self, population: Population) -> Chromosome:
        population.shuffle(self.rng)
        n = len(population)
        size = int(self.rng.integers(1, n)) if n > 1 else 1
        return population[0:size].chromosome_with_max_weight()


class CustomSelection(SelectionMethod):
    """Wraps a caller-supplied ``population -> chromosome`` function."""

    type = SelectionMethodType.CUSTOM

    def __init__(self, function: SelectionFunction) -> None:
        if not callable(function):
            raise InvalidOperatorError("selection", repr(function), _available())
        super().__init__()
        self.function = function

    def __call__(self, population: Population) -> Chromosome:
        return self.function(population)

    def __repr__(self) -> str:
        name = getattr(self.function, "__name__", type(self.function).__name__)
        return f"CustomSelection({name})"


_BUILTIN: dict[SelectionMethodType, type[SelectionMethod]] = {
    SelectionMethodType.RANK: RankSelection,
    SelectionMethodType.ROULETTE: RouletteSelection,
    SelectionMethodType.TOURNAMENT: TournamentSelection,
}


def _available() -> list[str]:
    return [t.value for t in _BUILTIN]


def selection_method(
    spec: SelectionMethod | SelectionMethodType | str | SelectionFunction,
    *,
    rng: np.random.Generator | None = None,
) -> SelectionMethod:
    """
    Resolve a selection strategy from an instance, a type, a name or a function.

    Examples:
        selection_method("rank")
        selection_method(SelectionMethodType.TOURNAMENT, rng=np.random.default_rng(1))
        selection_method(lambda population: population.best())
    """
    if isinstance(spec, SelectionMethod):
        return spec
    if isinstance(spec, str):
        try:
            spec = SelectionMethodType(spec.strip().lower())
        except ValueError:
            raise InvalidOperatorError("selection", spec, _available()) from None
    if isinstance(spec, SelectionMethodType):
        if spec is SelectionMethodType.CUSTOM:
            raise InvalidOperatorError("selection", spec.value, _available())
        return _BUILTIN[spec](rng=rng)
    if callable(spec):
        return CustomSelection(spec)
    raise InvalidOperatorError("selection", repr(spec), _available())


__all__ = [
    "CustomSelection",
    "RankSelection",
    "RouletteSelection",
    "SelectionFunction",
    "SelectionMethod",
    "SelectionMethodType",
    "TournamentSelection",
    "selection_method",
]
