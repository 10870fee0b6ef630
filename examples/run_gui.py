import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from knight_tour_gui.app import run_gui


if __name__ == "__main__":
    raise SystemExit(
        run_gui(
            [
                "--size",
                "8",
                "--start",
                "a8",
                "--tick-ms",
                "200",
            ]
        )
    )
