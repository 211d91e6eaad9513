"""Bounded gene limits and a generating function drawing genes inside them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

import numpy as np

GeneKind = Literal["float", "int"]


@dataclass(frozen=True)
class GeneLimit:
    """Inclusive lower and exclusive upper bound for one gene position."""

    minimum: float
    maximum: float
    kind: GeneKind = "float"

    def __post_init__(self) -> None:
        if self.kind not in ("float", "int"):
            raise ValueError(f"Unsupported gene kind '{self.kind}'.")
        if self.minimum > self.maximum:
            raise ValueError("minimum must be <= maximum.")
        if self.kind == "int" and int(self.maximum) <= int(self.minimum):
            raise ValueError("Integer gene limits need maximum > minimum.")

    @property
    def span(self) -> float:
        return abs(self.maximum - self.minimum)

    def sample(self, rng: np.random.Generator) -> float:
        if self.kind == "int":
            return float(rng.integers(int(self.minimum), int(self.maximum)))
        return float(self.minimum + rng.random() * (self.maximum - self.minimum))


def _as_limits(limits: Sequence[GeneLimit]) -> tuple[GeneLimit, ...]:
    limits = tuple(limits)
    if not limits:
        raise ValueError("At least one gene limit is required.")
    return limits


class BoundedGenerator:
    """
    Generating function ``(individual_index, gene_index) -> value``.

    Gene ``j`` is drawn uniformly inside ``limits[j]``; integer genes come
    from ``[minimum, maximum)``.
    """

    def __init__(self, limits: Sequence[GeneLimit], rng: np.random.Generator | None = None):
        self.limits = _as_limits(limits)
        self.rng = rng or np.random.default_rng()

    @property
    def gene_length(self) -> int:
        return len(self.limits)

    def __call__(self, individual: int, gene: int) -> float:
        return self.limits[gene].sample(self.rng)


__all__ = ["BoundedGenerator", "GeneKind", "GeneLimit"]
