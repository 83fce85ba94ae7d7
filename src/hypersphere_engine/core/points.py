from __future__ import annotations

import hashlib
import struct
from collections.abc import Iterator, Sequence

from .errors import PointNotFoundError

Point = tuple[int, ...]


class PointSet:
    """Lattice points of a pattern, each tagged with its layer index.

    Consumers only read. Writes go through `_set`, which is reserved for the
    generator and the symmetry closure while a pattern is being built; once
    the builder seals the set it no longer accepts writes.
    """

    __slots__ = ("dimension", "radii", "_points", "_sealed")

    def __init__(self, dimension: int, radii: Sequence[int]):
        self.dimension = dimension
        self.radii = tuple(radii)
        self._points: dict[Point, int] = {}
        self._sealed = False

    def size(self) -> int:
        return len(self._points)

    def layer_count(self) -> int:
        return len(self.radii)

    def contains(self, point: Sequence[int]) -> bool:
        return tuple(point) in self._points

    def layer_of(self, point: Sequence[int]) -> int:
        key = tuple(point)
        try:
            return self._points[key]
        except KeyError:
            raise PointNotFoundError(key) from None

    def iterate(self) -> Iterator[tuple[Point, int]]:
        return iter(self._points.items())

    def points_in_layer(self, layer: int) -> Iterator[Point]:
        return (p for p, lay in self._points.items() if lay == layer)

    def translated(self, center: Sequence[int]) -> Iterator[tuple[Point, int]]:
        """Yield (point, layer) with every point shifted by `center`."""
        center = tuple(center)
        if len(center) != self.dimension:
            raise ValueError("center dimension mismatch")
        for p, layer in self._points.items():
            yield tuple(c + x for c, x in zip(center, p)), layer

    def hash(self) -> str:
        # order-independent: points are packed in sorted order
        n = self.dimension
        h = hashlib.sha256()
        h.update(struct.pack("<II", n, len(self.radii)))
        h.update(struct.pack("<" + "q" * len(self.radii), *self.radii))
        fmt = "<" + "q" * n + "I"
        for p in sorted(self._points):
            h.update(struct.pack(fmt, *p, self._points[p]))
        return h.hexdigest()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, point: object) -> bool:
        if not isinstance(point, Sequence):
            return False
        return self.contains(point)

    def __iter__(self) -> Iterator[tuple[Point, int]]:
        return self.iterate()

    def __repr__(self) -> str:
        return f"PointSet(dimension={self.dimension}, radii={self.radii}, size={self.size()})"

    def _get(self, point: Point) -> int | None:
        return self._points.get(point)

    def _set(self, point: Point, layer: int) -> None:
        if self._sealed:
            raise AssertionError("pattern is sealed")
        self._points[point] = layer

    def _seal(self) -> None:
        self._sealed = True


PatternSet = PointSet
