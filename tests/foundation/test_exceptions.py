"""Tests for the genetics exception hierarchy."""

from __future__ import annotations

import pytest


class TestGeneticsError:
    """Test base GeneticsError class."""

    def test_basic_error(self):
        """GeneticsError should work with just a message."""
        from genetics.foundation.exceptions import GeneticsError

        err = GeneticsError("Something went wrong")
        assert "Something went wrong" in str(err)
        assert err.message == "Something went wrong"
        assert err.suggestion is None

    def test_error_with_suggestion(self):
        """GeneticsError should include suggestion in message."""
        from genetics.foundation.exceptions import GeneticsError

        err = GeneticsError("Something went wrong", suggestion="Try this instead")
        assert "Suggestion: Try this instead" in str(err)
        assert err.suggestion == "Try this instead"

    def test_error_with_details(self):
        from genetics.foundation.exceptions import GeneticsError

        err = GeneticsError("Error", details={"key": "value"})
        assert err.details == {"key": "value"}


class TestConfigurationErrors:
    """Test configuration-related errors."""

    def test_invalid_operator_error(self):
        from genetics.foundation.exceptions import InvalidOperatorError

        err = InvalidOperatorError("selection", "lottery", ["rank", "roulette"])
        assert "Unknown selection method 'lottery'" in str(err)
        assert "rank, roulette" in str(err)
        assert err.details == {"operator_type": "selection", "operator_name": "lottery"}

    def test_empty_population_error(self):
        from genetics.foundation.exceptions import EmptyPopulationError

        err = EmptyPopulationError()
        assert "no chromosomes" in str(err)
        assert err.suggestion is not None

    def test_crossover_count_error(self):
        from genetics.foundation.exceptions import CrossoverCountError

        err = CrossoverCountError(5, 4)
        assert "(5)" in str(err) and "(4)" in str(err)
        assert err.details == {"count": 5, "population_size": 4}

    def test_elitism_error(self):
        from genetics.foundation.exceptions import ElitismError

        err = ElitismError(7, 3)
        assert "elitism count (7)" in str(err)
        assert err.details["population_size"] == 3


class TestRuntimeErrors:
    def test_evaluation_error(self):
        from genetics.foundation.exceptions import EvaluationError

        err = EvaluationError("fitness is NaN", chromosome="c0")
        assert "fitness is NaN" in str(err)
        assert err.details == {"chromosome": "c0"}

    def test_gene_length_error(self):
        from genetics.foundation.exceptions import GeneLengthError, PopulationError

        err = GeneLengthError("Crossover", 4, 2)
        assert isinstance(err, PopulationError)
        assert "Crossover yielded a chromosome with 4 genes; expected 2" in str(err)
        assert err.details == {"source": "Crossover", "length": 4, "expected": 2}


class TestExceptionHierarchy:
    """Test exception inheritance."""

    def test_all_inherit_from_genetics_error(self):
        from genetics.foundation.exceptions import (
            ConfigurationError,
            CrossoverCountError,
            ElitismError,
            EmptyPopulationError,
            EvaluationError,
            GeneLengthError,
            GeneticsError,
            InvalidOperatorError,
            PopulationError,
        )

        assert issubclass(ConfigurationError, GeneticsError)
        for cls in (InvalidOperatorError, EmptyPopulationError, CrossoverCountError, ElitismError):
            assert issubclass(cls, ConfigurationError)
        assert issubclass(PopulationError, GeneticsError)
        assert issubclass(GeneLengthError, PopulationError)
        assert issubclass(EvaluationError, GeneticsError)

    def test_catch_all_genetics_errors(self):
        from genetics.foundation.exceptions import ElitismError, GeneticsError

        with pytest.raises(GeneticsError):
            raise ElitismError(2, 1)
