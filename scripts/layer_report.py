from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from hypersphere_engine import compare_radii  # noqa: E402


def main() -> None:
    dimension = int(sys.argv[1]) if len(sys.argv) > 1 else 3
    outer = int(sys.argv[2]) if len(sys.argv) > 2 else 8

    # every single inner shell under a fixed outer radius
    radii_list = [[outer]] + [[outer, inner] for inner in range(outer - 1, -1, -1)]
    report = compare_radii(dimension, radii_list)

    print({
        "dimension": report["dimension"],
        "outer": outer,
        "min_size": report["min_size"],
        "max_size": report["max_size"],
        "layers": [(r["radii"], [lay["points"] for lay in r["layers"]]) for r in report["runs"]],
    })


if __name__ == "__main__":
    main()
