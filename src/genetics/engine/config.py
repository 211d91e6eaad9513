"""Immutable evolver configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass

from genetics.foundation.exceptions import ConfigurationError
from genetics.operators.crossover import CrossoverMethod, crossover_method
from genetics.operators.selection import SelectionMethod, selection_method


def _check_rate(name: str, value: float) -> float:
    value = float(value)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ConfigurationError(
            f"{name} must be within [0, 1], got {value}.",
            suggestion=f"Pass {name} as a probability, e.g. 0.7",
            details={name: value},
        )
    return value


@dataclass(frozen=True)
class EvolverConfiguration:
    """
    Everything an ``Evolver`` needs besides the fitness and mutation functions.

    ``selection`` and ``crossover`` accept anything their resolvers do: a
    strategy instance, an enum member, its name, or a plain function. Use
    ``crossover_method(...)`` directly to set the crossover point count.
    """

    selection: SelectionMethod
    crossover: CrossoverMethod
    elitism: int = 0
    crossover_rate: float = 0.0
    mutation_rate: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "selection", selection_method(self.selection))
        object.__setattr__(self, "crossover", crossover_method(self.crossover))
        if int(self.elitism) != self.elitism or self.elitism < 0:
            raise ConfigurationError(
                f"elitism must be a non-negative integer, got {self.elitism}.",
                details={"elitism": self.elitism},
            )
        object.__setattr__(self, "elitism", int(self.elitism))
        object.__setattr__(self, "crossover_rate", _check_rate("crossover_rate", self.crossover_rate))
        object.__setattr__(self, "mutation_rate", _check_rate("mutation_rate", self.mutation_rate))

    @property
    def crossover_count(self) -> int:
        return self.crossover.count


__all__ = ["EvolverConfiguration"]
