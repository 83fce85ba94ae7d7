from __future__ import annotations

from collections.abc import Sequence

from hypersphere_engine.core.builder import HypersphereBuilder
from hypersphere_engine.core.points import PointSet


def _norm2(p: Sequence[int]) -> int:
    return sum(c * c for c in p)


def layer_profile(pattern: PointSet) -> list[dict]:
    """Per-layer point count and squared-norm range (None for empty layers)."""
    counts = [0] * pattern.layer_count()
    lo: list[int | None] = [None] * pattern.layer_count()
    hi: list[int | None] = [None] * pattern.layer_count()
    for p, layer in pattern.iterate():
        n2 = _norm2(p)
        counts[layer] += 1
        if lo[layer] is None or n2 < lo[layer]:
            lo[layer] = n2
        if hi[layer] is None or n2 > hi[layer]:
            hi[layer] = n2
    return [
        {"layer": i, "radius": r, "points": counts[i], "min_norm2": lo[i], "max_norm2": hi[i]}
        for i, r in enumerate(pattern.radii)
    ]


def survey_shells(dimension: int, radii: Sequence[int]) -> dict:
    builder = HypersphereBuilder(dimension, radii)
    pattern = builder.build()
    extent = max((max(abs(c) for c in p) for p, _ in pattern.iterate()), default=0)
    return {
        "dimension": dimension,
        "radii": list(pattern.radii),
        "size": pattern.size(),
        "extent": extent,
        "closure_sweeps": builder.last_sweeps,
        "layers": layer_profile(pattern),
        "hash": pattern.hash(),
    }


def compare_radii(dimension: int, radii_list: Sequence[Sequence[int]]) -> dict:
    runs = [survey_shells(dimension, radii) for radii in radii_list]
    sizes = [r["size"] for r in runs]
    return {
        "dimension": dimension,
        "runs": runs,
        "min_size": min(sizes) if sizes else 0,
        "max_size": max(sizes) if sizes else 0,
    }
