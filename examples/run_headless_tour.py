import argparse
import sys
from pathlib import Path

# Ensure local repo package is used even if another "knight_tour" is on PYTHONPATH.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from knight_tour import TourEngine


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print a Warnsdorff knight's tour.")
    parser.add_argument("--size", type=int, default=8, help="Board size")
    parser.add_argument("--start", default=None, help="Start square, e.g. e4")
    parser.add_argument(
        "--board",
        action="store_true",
        help="Print the grid of move numbers after the tour",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    tour = TourEngine(args.size)
    if args.start:
        tour.set_start(*tour.notation_to_position(args.start))

    while tour.advance():
        pass

    path = [tour.position_to_notation(x, y) for x, y in tour.move_history]
    print("Path:", " ".join(path))
    print(
        f"Visited {tour.move_count} of {args.size * args.size} squares.",
        "Complete tour." if tour.is_complete else "Dead end.",
    )

    if args.board:
        width = len(str(args.size * args.size))
        for row in tour.get_snapshot().cells:
            print(" ".join(f"{value:>{width}}" for value in row))


if __name__ == "__main__":
    main()
