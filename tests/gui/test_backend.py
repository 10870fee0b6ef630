import pytest

from knight_tour.core.exceptions import InvalidPositionError
from knight_tour.core.tour import TourEngine
from knight_tour.interfaces.tour import Position
from knight_tour_gui.backend import EngineBackend


def test_backend_defaults_to_top_left():
    backend = EngineBackend(TourEngine(8))

    assert backend.board_size == 8
    assert backend.start == Position(0, 0)
    assert backend.snapshot().current == Position(0, 0)


def test_backend_seeds_engine_at_start():
    engine = TourEngine(8)
    backend = EngineBackend(engine, start=Position(3, 4))

    assert engine.current_position == Position(3, 4)
    assert backend.snapshot().history == (Position(3, 4),)


def test_backend_rejects_start_off_board():
    with pytest.raises(InvalidPositionError):
        EngineBackend(TourEngine(4), start=Position(4, 0))


def test_reset_returns_to_chosen_start():
    backend = EngineBackend(TourEngine(6))
    backend.set_start(2, 2)
    backend.advance()
    backend.advance()

    backend.reset()

    snap = backend.snapshot()
    assert snap.current == Position(2, 2)
    assert snap.move_count == 1
    assert backend.start == Position(2, 2)


def test_reset_from_top_left_uses_engine_reset():
    engine = TourEngine(6)
    backend = EngineBackend(engine)
    backend.advance()
    backend.reset()

    assert engine.move_history == [Position(0, 0)]


def test_failed_set_start_keeps_previous_start():
    backend = EngineBackend(TourEngine(6), start=Position(1, 1))
    with pytest.raises(InvalidPositionError):
        backend.set_start(6, 0)

    assert backend.start == Position(1, 1)


def test_notation_helpers():
    backend = EngineBackend(TourEngine(8))

    assert backend.notation(Position(4, 4)) == "e4"
    assert backend.parse_notation("h1") == Position(7, 7)
