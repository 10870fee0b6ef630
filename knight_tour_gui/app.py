"""GUI application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from PySide6 import QtWidgets

from knight_tour.core.exceptions import ConfigurationError, InvalidPositionError
from knight_tour.core.tour import TourEngine
from knight_tour.interfaces.tour import Position
from knight_tour.utils.config_loader import TourConfig, get_config
from knight_tour_gui.backend import EngineBackend
from knight_tour_gui.config import GuiConfig, load_gui_config
from knight_tour_gui.controller import TourController
from knight_tour_gui.sound import SoundPlayer
from knight_tour_gui.view.dialogs import BoardSizeDialog, StartPositionDialog
from knight_tour_gui.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Knight's Tour visualizer")
    parser.add_argument("--size", type=int, default=None, help="Board size (skips the size dialog)")
    parser.add_argument(
        "--start", default=None, help="Start square in algebraic notation, e.g. e4 (skips the dialog)"
    )
    parser.add_argument("--tour-config", default=None, help="Path to tour config YAML")
    parser.add_argument("--gui-config", default=None, help="Path to GUI config YAML")
    parser.add_argument("--tick-ms", type=int, default=None, help="Autoplay interval (ms)")
    parser.add_argument("--autoplay", action="store_true", default=None, help="Start playing immediately")
    parser.add_argument("--mute", action="store_true", help="Disable the move sound")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def _load_configs(args: argparse.Namespace) -> tuple[TourConfig, GuiConfig]:
    """Load both config files; the tour config goes through the shared cache."""
    return get_config(args.tour_config), load_gui_config(args.gui_config)


def _resolve_start(
    parser: argparse.ArgumentParser,
    engine: TourEngine,
    square: str | None,
    parent: QtWidgets.QWidget | None = None,
) -> Position | None:
    """Parse ``square`` or ask for a start square; bad notation exits via ``parser.error``."""
    if not square:
        return StartPositionDialog.ask(engine.board_size, Position(0, 0), parent)
    try:
        return engine.notation_to_position(square)
    except InvalidPositionError as exc:
        parser.error(f"invalid start square: {exc}")


def run_gui(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s: %(message)s")

    try:
        tour_config, gui_config = _load_configs(args)
    except ConfigurationError as exc:
        logger.error(str(exc))
        return 2

    app = QtWidgets.QApplication(sys.argv)

    board_size = args.size
    if board_size is None:
        board_size = BoardSizeDialog.ask(tour_config.limits, tour_config.board_size)
        if board_size is None:
            logger.info("Board size dialog cancelled")
            return 1

    try:
        tour_config = tour_config.with_board_size(board_size)
    except ConfigurationError as exc:
        logger.error(str(exc))
        return 2

    engine = TourEngine(tour_config.board_size)
    start = _resolve_start(parser, engine, args.start or tour_config.start)
    if start is None:
        logger.info("Start position dialog cancelled")
        return 1

    sound = SoundPlayer(gui_config.sound)
    if args.mute:
        sound.set_muted(True)

    backend = EngineBackend(engine, start=start)
    controller = TourController(backend, sound=sound)

    window = MainWindow(
        controller,
        gui_config,
        tick_ms=args.tick_ms,
        autoplay=args.autoplay,
    )
    window.resize(window.preferred_size())
    window.show()
    return app.exec()


def main() -> None:
    raise SystemExit(run_gui())


if __name__ == "__main__":
    main()
