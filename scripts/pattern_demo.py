from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from hypersphere_engine import survey_shells  # noqa: E402


def main() -> None:
    print(survey_shells(2, [3]))
    print(survey_shells(2, [5, 3]))
    print(survey_shells(3, [6, 4, 0]))


if __name__ == "__main__":
    main()
