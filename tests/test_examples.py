import subprocess
import sys
from pathlib import Path

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


def _run_headless(*args: str) -> str:
    result = subprocess.run(
        [sys.executable, str(EXAMPLES_DIR / "run_headless_tour.py"), *args],
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout


def test_headless_tour_on_five_by_five():
    out = _run_headless("--size", "5", "--board")
    lines = out.splitlines()

    assert lines[0].startswith("Path: a5 ")
    assert len(lines[0].split()) == 26
    assert "Visited 25 of 25 squares. Complete tour." in out
    assert lines[2].split()[0] == "1"
    assert len(lines) == 7


def test_headless_tour_from_custom_start():
    out = _run_headless("--size", "3", "--start", "a3")

    assert out.splitlines()[0] == "Path: a3 c2 a1 b3 c1 a2 c3 b1"
    assert "Visited 8 of 9 squares. Dead end." in out
