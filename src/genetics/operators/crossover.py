"""Crossover strategies combining two parents into one child."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum

import numpy as np

from genetics.core.chromosome import Chromosome
from genetics.foundation.exceptions import ConfigurationError, InvalidOperatorError

CrossoverFunction = Callable[[Chromosome, Chromosome, int], Chromosome]


class CrossoverMethodType(Enum):
    POINT = "point"
    UNIFORM = "uniform"
    CUSTOM = "custom"


class CrossoverMethod(ABC):
    """
    Base class for crossover strategies.

    ``count`` is the number of crossover points handed to the function on
    every call; strategies that do not cut the gene vector ignore it.
    Children are new chromosomes with zero fitness and weight.
    """

    type: CrossoverMethodType

    def __init__(self, count: int = 0, rng: np.random.Generator | None = None) -> None:
        count = int(count)
        if count < 0:
            raise ConfigurationError(
                f"Crossover point count must be non-negative, got {count}.",
                details={"count": count},
            )
        self.count = count
        self.rng = rng or np.random.default_rng()

    @abstractmethod
    def crossover(self, parent_a: Chromosome, parent_b: Chromosome, count: int) -> Chromosome:
        raise NotImplementedError

    def __call__(self, parent_a: Chromosome, parent_b: Chromosome) -> Chromosome:
        return self.crossover(parent_a, parent_b, self.count)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self.count})"


class PointCrossover(CrossoverMethod):
    """
    N-point crossover.

    ``count`` distinct cut positions are drawn from ``1..L`` with a partial
    Fisher-Yates shuffle, sorted and bracketed by 0 and ``L``. Segments then
    alternate between the parents, starting with ``parent_a``.
    """

    type = CrossoverMethodType.POINT

    def crossover(self, parent_a: Chromosome, parent_b: Chromosome, count: int) -> Chromosome:
        length = parent_a.genes.size
        candidates = list(range(1, length + 1))
        n_points = min(count, length)
        for i in range(n_points):
            j = int(self.rng.integers(i, length))
            candidates[i], candidates[j] = candidates[j], candidates[i]

        bounds = [0, *sorted(candidates[:n_points]), length]
        genes = parent_a.genes.copy()
        for segment, (start, end) in enumerate(zip(bounds[:-1], bounds[1:])):
            if segment % 2 == 1:
                genes[start:end] = parent_b.genes[start:end]
        return Chromosome(genes=genes)


class UniformCrossover(CrossoverMethod):
    """Uniform crossover: each gene comes from either parent on a fair coin flip."""

    type = CrossoverMethodType.UNIFORM

    def crossover(self, parent_a: Chromosome, parent_b: Chromosome, count: int) -> Chromosome:
        mask = self.rng.integers(0, 2, size=parent_a.genes.size) == 1
        return Chromosome(genes=np.where(mask, parent_a.genes, parent_b.genes))


class CustomCrossover(CrossoverMethod):
    """Wraps a caller-supplied ``(parent_a, parent_b, count) -> child`` function."""

    type = CrossoverMethodType.CUSTOM

    def __init__(self, function: CrossoverFunction, count: int = 0) -> None:
        if not callable(function):
            raise InvalidOperatorError("crossover", repr(function), _available())
        super().__init__(count)
        self.function = function

    def crossover(self, parent_a: Chromosome, parent_b: Chromosome, count: int) -> Chromosome:
        return self.function(parent_a, parent_b, count)

    def __repr__(self) -> str:
        name = getattr(self.function, "__name__", type(self.function).__name__)
        return f"CustomCrossover({name}, count={self.count})"


_BUILTIN: dict[CrossoverMethodType, type[CrossoverMethod]] = {
    CrossoverMethodType.POINT: PointCrossover,
    CrossoverMethodType.UNIFORM: UniformCrossover,
}


def _available() -> list[str]:
    return [t.value for t in _BUILTIN]


def crossover_method(
    spec: CrossoverMethod | CrossoverMethodType | str | CrossoverFunction,
    count: int = 0,
    *,
    rng: np.random.Generator | None = None,
) -> CrossoverMethod:
    """
    Resolve a crossover strategy from an instance, a type, a name or a function.

    ``count`` is ignored when ``spec`` is already a ``CrossoverMethod``.
    """
    if isinstance(spec, CrossoverMethod):
        return spec
    if isinstance(spec, str):
        try:
            spec = CrossoverMethodType(spec.strip().lower())
        except ValueError:
            raise InvalidOperatorError("crossover", spec, _available()) from None
    if isinstance(spec, CrossoverMethodType):
        if spec is CrossoverMethodType.CUSTOM:
            raise InvalidOperatorError("crossover", spec.value, _available())
        return _BUILTIN[spec](count, rng=rng)
    if callable(spec):
        return CustomCrossover(spec, count)
    raise InvalidOperatorError("crossover", repr(spec), _available())


__all__ = [
    "CrossoverFunction",
    "CrossoverMethod",
    "CrossoverMethodType",
    "CustomCrossover",
    "PointCrossover",
    "UniformCrossover",
    "crossover_method",
]
