"""
Genetics exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All library exceptions inherit from GeneticsError for easy catching.

Example:
    try:
        evolver.evolve(population, MaxGenerations(50))
    except GeneticsError as e:
        print(f"Evolution failed: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class GeneticsError(Exception):
    """
    Base exception for all genetics errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(GeneticsError):
    """Raised when an evolver configuration is invalid."""

    pass


class InvalidOperatorError(ConfigurationError):
    """Raised when an unknown selection or crossover method is specified."""

    def __init__(
        self,
        operator_type: str,
        operator_name: str,
        available: list[str] | None = None,
    ) -> None:
        message = f"Unknown {operator_type} method '{operator_name}'."
        suggestion = f"Available {operator_type} methods: {', '.join(available)}" if available else None
        super().__init__(
            message,
            suggestion,
            {"operator_type": operator_type, "operator_name": operator_name},
        )


class EmptyPopulationError(ConfigurationError):
    """Raised when evolution is started on a population without chromosomes."""

    def __init__(self) -> None:
        super().__init__(
            "There are no chromosomes in the population.",
            "Create the population with generate_population(size, gene_length, fn) and size >= 1",
        )


class CrossoverCountError(ConfigurationError):
    """Raised when the crossover point count is not below the population size."""

    def __init__(self, count: int, population_size: int) -> None:
        message = (
            f"The crossover count ({count}) must be less than the number of chromosomes "
            f"in the population ({population_size})."
        )
        suggestion = "Lower the crossover point count or grow the population"
        super().__init__(message, suggestion, {"count": count, "population_size": population_size})


class ElitismError(ConfigurationError):
    """Raised when more elites are requested than the population holds."""

    def __init__(self, elitism: int, population_size: int) -> None:
        message = (
            f"The elitism count ({elitism}) must be less than or equal to the number of chromosomes "
            f"in the population ({population_size})."
        )
        suggestion = "Lower the elitism count or grow the population"
        super().__init__(message, suggestion, {"elitism": elitism, "population_size": population_size})


# =============================================================================
# Population Errors
# =============================================================================


class PopulationError(GeneticsError):
    """Raised when a population cannot be built or queried."""

    pass


class GeneLengthError(PopulationError):
    """Raised when breeding yields a gene vector of a different length than the population's."""

    def __init__(self, source: str, length: int, expected: int) -> None:
        message = f"{source} yielded a chromosome with {length} genes; expected {expected}."
        suggestion = "Custom selection and crossover functions must return chromosomes of the population's gene length"
        super().__init__(message, suggestion, {"source": source, "length": length, "expected": expected})


# =============================================================================
# Runtime Errors
# =============================================================================


class EvaluationError(GeneticsError):
    """Raised when fitness evaluation produces an unusable value."""

    def __init__(self, message: str, chromosome: Any = None) -> None:
        suggestion = "Check your fitness function; it must return a finite real number"
        super().__init__(message, suggestion, {"chromosome": chromosome})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "GeneticsError",
    # Configuration
    "ConfigurationError",
    "InvalidOperatorError",
    "EmptyPopulationError",
    "CrossoverCountError",
    "ElitismError",
    # Population
    "PopulationError",
    "GeneLengthError",
    # Runtime
    "EvaluationError",
]
