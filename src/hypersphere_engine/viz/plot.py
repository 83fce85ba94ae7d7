from __future__ import annotations

import matplotlib.pyplot as plt

from hypersphere_engine.core.points import PointSet


def plot_pattern(pattern: PointSet, *, ax=None, title: str | None = None):
    """Scatter of a 2-D or 3-D pattern colored by layer index."""
    n = pattern.dimension
    if n not in (2, 3):
        raise ValueError("only 2-D and 3-D patterns can be plotted")

    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection="3d" if n == 3 else None)

    items = list(pattern.iterate())
    cols = [[p[k] for p, _ in items] for k in range(n)]
    colors = [layer for _, layer in items]

    sc = ax.scatter(*cols, c=colors, cmap="viridis", s=30, vmin=0, vmax=max(pattern.layer_count() - 1, 1))
    plt.colorbar(sc, ax=ax, shrink=0.7, pad=0.1, label="layer")

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    if n == 3:
        ax.set_zlabel("z")
        ax.set_box_aspect((1, 1, 1))
    else:
        ax.set_aspect("equal")
    ax.set_title(title or f"Hypersphere N={n} radii={list(pattern.radii)}")
    return ax
