from __future__ import annotations

import logging

from .points import Point, PointSet

logger = logging.getLogger(__name__)


def _claim(points: PointSet, point: Point, layer: int) -> bool:
    """Record `layer` for `point` unless an inner (or the same) layer is already there."""
    current = points._get(point)
    if current is not None and current >= layer:
        return False
    points._set(point, layer)
    return True


def _swap(point: Point, a: int, b: int) -> Point:
    p = list(point)
    p[a], p[b] = p[b], p[a]
    return tuple(p)


def _negate(point: Point, d: int) -> Point:
    return point[:d] + (-point[d],) + point[d + 1 :]


def diagonal_step(points: PointSet, d: int) -> bool:
    """Mirror every point across the diagonal of axes d and d+1 (mod N)."""
    b = (d + 1) % points.dimension
    if b == d:
        return False
    changed = False
    snapshot = list(points.iterate())
    for p, layer in snapshot:
        if p[d] != p[b]:
            changed |= _claim(points, _swap(p, d, b), layer)
    return changed


def axial_step(points: PointSet, d: int) -> bool:
    """Mirror every point across the hyperplane orthogonal to axis d."""
    changed = False
    snapshot = list(points.iterate())
    for p, layer in snapshot:
        if p[d] != 0:
            changed |= _claim(points, _negate(p, d), layer)
    return changed


def close_symmetry(points: PointSet, dimension: int) -> int:
    """Expand a generated hyperoctant to its full hyperoctahedral orbit.

    One sweep applies the diagonal step for every axis, then the axial step
    for every axis, each step reading a fresh snapshot so it sees what the
    previous steps added. A single sweep of adjacent transpositions does not
    reach every permutation once N >= 4, so sweeps repeat until one changes
    nothing. On return the set is closed under coordinate permutation and
    sign flips and every orbit carries a single layer (the innermost one
    claimed for any of its members).

    Returns the number of sweeps performed, including the final idle one.
    """
    sweeps = 0
    while True:
        sweeps += 1
        changed = False
        for d in range(dimension):
            changed |= diagonal_step(points, d)
        for d in range(dimension):
            changed |= axial_step(points, d)
        logger.debug("closure sweep %d: %d points", sweeps, points.size())
        if not changed:
            return sweeps
