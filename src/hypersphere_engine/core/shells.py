from __future__ import annotations

import numbers
from collections.abc import Sequence
from dataclasses import dataclass

from .errors import InvalidInputError


@dataclass(frozen=True, slots=True)
class Shells:
    dimension: int
    radii: tuple[int, ...]

    @property
    def outer_radius(self) -> int:
        return self.radii[0]

    @property
    def layer_count(self) -> int:
        return len(self.radii)


def _is_int(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def build_shells(dimension: int, radii: Sequence[int]) -> Shells:
    """Validate build parameters.

    `radii` lists shell radii from the outermost shell inwards; the innermost
    entry may be 0, in which case the last shell is the centre point alone.
    """
    if not _is_int(dimension):
        raise InvalidInputError("dimension must be an integer")
    if dimension < 1:
        raise InvalidInputError("dimension must be >= 1")

    radii = tuple(radii)
    if not radii:
        raise InvalidInputError("at least one radius is required")
    for r in radii:
        if not _is_int(r):
            raise InvalidInputError(f"radius must be an integer, got {r!r}")
        if r < 0:
            raise InvalidInputError("radii must be >= 0")
    for outer, inner in zip(radii, radii[1:]):
        if inner >= outer:
            raise InvalidInputError("radii must be strictly decreasing")

    return Shells(dimension=int(dimension), radii=tuple(int(r) for r in radii))
