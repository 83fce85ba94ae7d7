from __future__ import annotations

import logging
from collections.abc import Sequence

from .octant import generate_octant
from .points import PointSet
from .shells import Shells, build_shells
from .symmetry import close_symmetry

logger = logging.getLogger(__name__)


class HypersphereBuilder:
    """Builds layered lattice hyperspheres centred at the origin.

    Parameters are validated on construction, so an invalid dimension or
    radius list never reaches the generator.
    """

    __slots__ = ("shells", "last_sweeps")

    def __init__(self, dimension: int, radii: Sequence[int]):
        self.shells: Shells = build_shells(dimension, radii)
        self.last_sweeps: int | None = None

    def build(self) -> PointSet:
        n = self.shells.dimension
        radii = self.shells.radii
        logger.debug("building hypersphere dimension=%d radii=%s", n, radii)

        points = PointSet(n, radii)
        generate_octant(points, n, radii)
        logger.debug("octant generated: %d points", points.size())

        self.last_sweeps = close_symmetry(points, n)
        points._seal()
        logger.debug(
            "hypersphere built: %d points after %d closure sweeps", points.size(), self.last_sweeps
        )
        return points


def build_hypersphere(dimension: int, radii: Sequence[int]) -> PointSet:
    """Build the layered hypersphere of `dimension` with shell `radii` (outer first).

    Raises InvalidInputError for dimension < 1, empty radii, negative radii or
    radii that are not strictly decreasing.
    """
    return HypersphereBuilder(dimension, radii).build()
