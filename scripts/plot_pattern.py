from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

import matplotlib.pyplot as plt  # noqa: E402

from hypersphere_engine import build_hypersphere  # noqa: E402
from hypersphere_engine.viz.plot import plot_pattern  # noqa: E402


def main() -> None:
    dimension = int(sys.argv[1]) if len(sys.argv) > 1 else 2
    radii = [int(r) for r in sys.argv[2:]] or [12, 8, 3]
    plot_pattern(build_hypersphere(dimension, radii))
    plt.show()


if __name__ == "__main__":
    main()
