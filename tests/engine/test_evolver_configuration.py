import dataclasses
import math

import pytest

from genetics.engine import EvolverConfiguration
from genetics.foundation.exceptions import ConfigurationError, InvalidOperatorError
from genetics.operators.crossover import CustomCrossover, PointCrossover, UniformCrossover, crossover_method
from genetics.operators.selection import CustomSelection, SelectionMethodType, TournamentSelection


def test_resolves_names_and_functions():
    config = EvolverConfiguration("tournament", "uniform", elitism=2, crossover_rate=0.5, mutation_rate=0.1)
    assert isinstance(config.selection, TournamentSelection)
    assert config.selection.type is SelectionMethodType.TOURNAMENT
    assert isinstance(config.crossover, UniformCrossover)
    assert config.crossover_count == 0

    custom = EvolverConfiguration(lambda pop: pop[-1], lambda a, b, n: a)
    assert isinstance(custom.selection, CustomSelection)
    assert isinstance(custom.crossover, CustomCrossover)


def test_keeps_crossover_point_count():
    config = EvolverConfiguration("rank", crossover_method("point", 3))
    assert isinstance(config.crossover, PointCrossover)
    assert config.crossover_count == 3


def test_is_immutable():
    config = EvolverConfiguration("rank", "point")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.elitism = 3


@pytest.mark.parametrize("field", ["crossover_rate", "mutation_rate"])
@pytest.mark.parametrize("value", [-0.01, 1.5, math.nan])
def test_rates_must_be_probabilities(field, value):
    with pytest.raises(ConfigurationError) as excinfo:
        EvolverConfiguration("rank", "point", **{field: value})
    assert field in str(excinfo.value)


@pytest.mark.parametrize("value", [0.0, 1.0])
def test_rate_bounds_are_inclusive(value):
    config = EvolverConfiguration("rank", "point", crossover_rate=value, mutation_rate=value)
    assert config.crossover_rate == value and config.mutation_rate == value


@pytest.mark.parametrize("elitism", [-1, 1.5])
def test_elitism_must_be_a_non_negative_integer(elitism):
    with pytest.raises(ConfigurationError):
        EvolverConfiguration("rank", "point", elitism=elitism)


def test_unknown_methods_are_reported():
    with pytest.raises(InvalidOperatorError):
        EvolverConfiguration("lottery", "point")
    with pytest.raises(InvalidOperatorError):
        EvolverConfiguration("rank", "arithmetic")
