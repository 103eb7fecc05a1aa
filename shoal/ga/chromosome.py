from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np


class Chromosome:
    """Flat, ordered vector of genes (float64)."""

    __slots__ = ("genes",)

    def __init__(self, genes: Iterable[float] = ()) -> None:
        if not isinstance(genes, np.ndarray):
            genes = list(genes)
        self.genes = np.array(genes, dtype=np.float64).reshape(-1)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> "Chromosome":
        return cls(values)

    def __len__(self) -> int:
        return int(self.genes.shape[0])

    def is_empty(self) -> bool:
        return len(self) == 0

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __getitem__(self, index: int) -> float:
        return float(self.genes[index])

    def __setitem__(self, index: int, value: float) -> None:
        self.genes[index] = value

    def __iter__(self) -> Iterator[float]:
        return (float(g) for g in self.genes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        if len(self) != len(other):
            return False
        return bool(np.allclose(self.genes, other.genes))

    __hash__ = None  # mutable

    def copy(self) -> "Chromosome":
        return Chromosome(self.genes.copy())

    def to_list(self) -> list[float]:
        return self.genes.tolist()

    def __repr__(self) -> str:
        return f"Chromosome({self.to_list()!r})"
