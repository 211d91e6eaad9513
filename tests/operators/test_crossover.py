import numpy as np
import pytest
from numpy.testing import assert_array_equal

from genetics.core import Chromosome
from genetics.foundation.exceptions import ConfigurationError, InvalidOperatorError
from genetics.operators.crossover import (
    CrossoverMethodType,
    CustomCrossover,
    PointCrossover,
    UniformCrossover,
    crossover_method,
)

PARENT_A = Chromosome(genes=np.arange(0.0, 8.0), fitness=5.0, weight=0.5)
PARENT_B = Chromosome(genes=np.arange(100.0, 108.0), fitness=6.0, weight=0.6)


def _segments(child: Chromosome) -> list[str]:
    """Label each gene with the parent it came from."""
    return ["a" if g < 100.0 else "b" for g in child.genes]


def test_point_crossover_without_points_copies_parent_a():
    child = PointCrossover(0, rng=np.random.default_rng(0))(PARENT_A, PARENT_B)
    assert_array_equal(child.genes, PARENT_A.genes)
    assert child.genes is not PARENT_A.genes


@pytest.mark.parametrize("count", [1, 2, 3, 5])
def test_point_crossover_alternates_segments(count):
    operator = PointCrossover(count, rng=np.random.default_rng(count))
    for _ in range(25):
        child = operator(PARENT_A, PARENT_B)
        labels = _segments(child)
        assert labels[0] == "a"
        switches = sum(1 for left, right in zip(labels, labels[1:]) if left != right)
        assert switches <= count
        for i, g in enumerate(child.genes):
            assert g in (PARENT_A.genes[i], PARENT_B.genes[i])


def test_point_crossover_single_point_is_prefix_of_a_then_b():
    operator = PointCrossover(1, rng=np.random.default_rng(11))
    for _ in range(25):
        labels = _segments(operator(PARENT_A, PARENT_B))
        cut = labels.index("b") if "b" in labels else len(labels)
        assert labels == ["a"] * cut + ["b"] * (len(labels) - cut)


def test_point_crossover_count_above_length_is_capped():
    a = Chromosome(genes=[0.0, 1.0])
    b = Chromosome(genes=[10.0, 11.0])
    child = PointCrossover(5, rng=np.random.default_rng(3))(a, b)
    assert_array_equal(child.genes, [0.0, 11.0])


def test_uniform_crossover_takes_each_gene_from_a_parent():
    operator = UniformCrossover(rng=np.random.default_rng(12))
    mixed = False
    for _ in range(20):
        child = operator(PARENT_A, PARENT_B)
        for i, g in enumerate(child.genes):
            assert g in (PARENT_A.genes[i], PARENT_B.genes[i])
        mixed = mixed or len(set(_segments(child))) == 2
    assert mixed


def test_children_start_with_zero_fitness_and_weight():
    for operator in (PointCrossover(2), UniformCrossover()):
        child = operator(PARENT_A, PARENT_B)
        assert child.fitness == 0.0
        assert child.weight == 0.0
        assert child is not PARENT_A and child is not PARENT_B


@pytest.mark.parametrize("operator", [PointCrossover(0), PointCrossover(3), PointCrossover(8), UniformCrossover()])
def test_identical_parents_reproduce_their_genes(operator):
    child = operator(PARENT_A, PARENT_A)
    assert_array_equal(child.genes, PARENT_A.genes)


def test_custom_crossover_receives_count():
    calls = []

    def average(a, b, count):
        calls.append(count)
        return Chromosome(genes=(a.genes + b.genes) / 2.0)

    operator = CustomCrossover(average, count=4)
    child = operator(PARENT_A, PARENT_B)
    assert calls == [4]
    assert_array_equal(child.genes, np.arange(50.0, 58.0))
    assert operator.type is CrossoverMethodType.CUSTOM


def test_negative_count_is_rejected():
    with pytest.raises(ConfigurationError):
        PointCrossover(-1)


def test_crossover_method_resolution():
    point = crossover_method("point", 2)
    assert isinstance(point, PointCrossover) and point.count == 2
    assert isinstance(crossover_method(CrossoverMethodType.UNIFORM), UniformCrossover)
    custom = crossover_method(lambda a, b, n: a, 1)
    assert isinstance(custom, CustomCrossover) and custom.count == 1
    assert crossover_method(point, 7) is point


@pytest.mark.parametrize("spec", ["two_point", CrossoverMethodType.CUSTOM, None])
def test_crossover_method_rejects_unknown(spec):
    with pytest.raises(InvalidOperatorError):
        crossover_method(spec)
