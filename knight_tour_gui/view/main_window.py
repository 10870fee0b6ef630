"""Main GUI window."""

from __future__ import annotations

from PySide6 import QtCore, QtWidgets

from knight_tour.core.exceptions import InvalidPositionError
from knight_tour_gui.config import GuiConfig
from knight_tour_gui.controller import TourController, TourState
from knight_tour_gui.view.board_canvas import BoardCanvas
from knight_tour_gui.view.control_bar import ControlBar
from knight_tour_gui.view.dialogs import StartPositionDialog
from knight_tour_gui.view.history_panel import HistoryPanel


class MainWindow(QtWidgets.QMainWindow):
    def __init__(
        self,
        controller: TourController,
        config: GuiConfig,
        tick_ms: int | None = None,
        autoplay: bool | None = None,
    ):
        super().__init__()
        self._controller = controller
        self._config = config

        self.setWindowTitle(config.window_title)

        central = QtWidgets.QWidget()
        self.setCentralWidget(central)

        self._board_canvas = BoardCanvas(config)
        self._history_panel = HistoryPanel()
        self._control_bar = ControlBar()

        canvas_size = self._board_canvas.canvas_size(controller.board_size)
        self._board_canvas.setMinimumSize(canvas_size // 2, canvas_size // 2)

        layout = QtWidgets.QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._board_canvas, 1)
        layout.addWidget(self._history_panel)
        layout.addWidget(self._control_bar)

        self._control_bar.next_requested.connect(self._controller.next_move)
        self._control_bar.play_toggled.connect(self._controller.set_playing)
        self._control_bar.reset_requested.connect(self._controller.reset)
        self._control_bar.start_requested.connect(self._choose_start)

        self._timer = QtCore.QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(tick_ms if tick_ms is not None else config.playback.tick_ms)

        self._controller.subscribe(self._refresh)
        self._refresh()

        if autoplay if autoplay is not None else config.playback.autoplay:
            self._controller.set_playing(True)

    def preferred_size(self) -> QtCore.QSize:
        canvas_size = self._board_canvas.canvas_size(self._controller.board_size)
        return QtCore.QSize(canvas_size + 20, canvas_size + 220)

    def _tick(self) -> None:
        if self._controller.state == TourState.PLAYING:
            self._controller.next_move()

    def _refresh(self) -> None:
        self._board_canvas.redraw(self._controller.snapshot())
        self._history_panel.update_history(self._controller.history_lines)
        self._control_bar.set_status(self._controller.status_text)
        self._control_bar.set_state(self._controller.state)

    def _choose_start(self) -> None:
        current = self._controller.snapshot().history[0]
        position = StartPositionDialog.ask(self._controller.board_size, current, self)
        if position is None:
            return
        try:
            self._controller.set_start(position.x, position.y)
        except InvalidPositionError as exc:
            QtWidgets.QMessageBox.warning(self, "Invalid position", str(exc))
