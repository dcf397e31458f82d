"""Capabilities the declension core depends on but does not implement."""
import random
from typing import Protocol


class RandomIndex(Protocol):
    """Uniform random index over a collection of known size."""
    def index(self, size: int) -> int: ...


class SeededRandomIndex:
    """RandomIndex backed by a private `random.Random` instance.

    A fixed seed makes every draw reproducible; no global random state is touched.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def index(self, size: int) -> int:
        if size <= 0:
            raise ValueError(f"Cannot draw an index from an empty collection (size={size})")
        return self._rng.randrange(size)


class FixedIndex:
    """RandomIndex that always returns the same position (clamped to the collection)."""

    __slots__ = ("position",)

    def __init__(self, position: int = 0):
        self.position = position

    def index(self, size: int) -> int:
        return min(self.position, size - 1)
