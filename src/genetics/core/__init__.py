"""Chromosome and population data model."""

from .chromosome import Chromosome
from .population import GeneratingFunction, Population, generate_population

__all__ = ["Chromosome", "GeneratingFunction", "Population", "generate_population"]
