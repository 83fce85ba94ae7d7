"""Hyperoctant generation by recursive midpoint-circle slicing.

An N-dimensional ball of radius R is a stack of (N-1)-dimensional balls
("slices") centred along one axis, slice `x` having the radius that the
midpoint circle algorithm gives for column `x` of a circle of radius R. The
same construction is applied to every slice, down to the last axis where a
slice is a plain segment. In 2D, radius 3, the walked columns are

    x:      0  1  2
    radius: 3  3  2

Only the first octant of each circle is walked (`x <= radius`); the symmetry
closure reconstructs the remainder. Every shell of a layered pattern runs its
own midpoint state in lockstep over the same columns.
"""

from __future__ import annotations

from collections.abc import Sequence

from .points import Point, PointSet


def nested_radii(radii: Sequence[int]) -> list[int]:
    """Force shell radii strictly decreasing.

    A shell reaching its enclosing shell's radius is nudged one unit inside
    it; shells pushed below zero are dropped along with everything inside.
    """
    out: list[int] = []
    for r in radii:
        if out and r >= out[-1]:
            r = out[-1] - 1
        if r < 0:
            break
        out.append(r)
    return out


def _segment(points: PointSet, prefix: Point, radii: Sequence[int]) -> None:
    # innermost shell still reaching the offset
    layer = len(radii) - 1
    for offset in range(radii[0] + 1):
        while radii[layer] < offset:
            layer -= 1
        points._set(prefix + (offset,), layer)
        points._set(prefix + (-offset,), layer)


def _walk(points: PointSet, dimension: int, prefix: Point, radii: Sequence[int]) -> None:
    if len(prefix) == dimension - 1:
        _segment(points, prefix, radii)
        return

    # per-shell midpoint state: [radius, criterion]
    states = [[r, 1 - r] for r in radii]
    x = 0
    while states:
        slice_radii = nested_radii([s[0] for s in states])
        _walk(points, dimension, prefix + (x,), slice_radii)

        x += 1
        for state in states:
            if state[1] > 0:
                state[0] -= 1
                state[1] += 4 * (x - state[0]) + 1
            else:
                state[1] += 4 * x + 1

        for i, state in enumerate(states):
            if state[0] < x:
                del states[i:]
                break


def generate_octant(points: PointSet, dimension: int, radii: Sequence[int]) -> None:
    """Write the non-negative hyperoctant of a layered hypersphere centred at 0.

    Coordinates on the last axis are written with both signs; all other
    coordinates are non-negative. `radii` must be strictly decreasing and
    non-negative (see `build_shells`).
    """
    if dimension < 1:
        raise ValueError("dimension must be >= 1")
    if not radii:
        raise ValueError("radii must not be empty")
    _walk(points, dimension, (), list(radii))
