from knight_tour_gui.view.board_canvas import BoardCanvas
from knight_tour_gui.view.control_bar import ControlBar
from knight_tour_gui.view.dialogs import BoardSizeDialog, StartPositionDialog
from knight_tour_gui.view.history_panel import HistoryPanel
from knight_tour_gui.view.main_window import MainWindow

__all__ = [
    "BoardCanvas",
    "BoardSizeDialog",
    "ControlBar",
    "HistoryPanel",
    "MainWindow",
    "StartPositionDialog",
]
