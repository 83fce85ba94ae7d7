from __future__ import annotations

from hypersphere_engine.core.points import PointSet
from hypersphere_engine.invariants.signed_permutations import apply_signed_permutation, generators


def audit_pattern(pattern: PointSet) -> None:
    """Check the invariants of a built pattern; raise AssertionError on violation.

    NON-MUTATING: the pattern hash is compared before and after.
    """
    before_hash = pattern.hash()
    try:
        _audit_bounds(pattern)
        _audit_symmetry(pattern)
    finally:
        if pattern.hash() != before_hash:
            raise AssertionError("audit_pattern() mutated the pattern (hash mismatch)")


def _audit_bounds(pattern: PointSet) -> None:
    n = pattern.dimension
    radii = pattern.radii
    if not radii:
        raise AssertionError("pattern has no radii")
    for p, layer in pattern.iterate():
        if len(p) != n:
            raise AssertionError(f"point {p} has wrong dimension")
        if not (0 <= layer < len(radii)):
            raise AssertionError(f"point {p} has layer {layer} out of range")
        extent = max(abs(c) for c in p)
        if extent > radii[0]:
            raise AssertionError(f"point {p} lies outside the outer radius")
        if extent > radii[layer]:
            raise AssertionError(f"point {p} lies outside the radius of its layer {layer}")


def _audit_symmetry(pattern: PointSet) -> None:
    # closure under the generators implies closure under the whole group
    gens = generators(pattern.dimension)
    for p, layer in pattern.iterate():
        for g in gens:
            q = apply_signed_permutation(g, p)
            if not pattern.contains(q):
                raise AssertionError(f"symmetric image {q} of {p} is missing")
            if pattern.layer_of(q) != layer:
                raise AssertionError(f"symmetric image {q} of {p} has a different layer")
