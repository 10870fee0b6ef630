"""Startup dialogs: board size and knight start position."""

from __future__ import annotations

from PySide6 import QtWidgets

from knight_tour.interfaces.tour import Position
from knight_tour.utils.config_loader import LimitsConfig


def _spinner(minimum: int, maximum: int, value: int) -> QtWidgets.QSpinBox:
    spin = QtWidgets.QSpinBox()
    spin.setRange(minimum, maximum)
    spin.setValue(max(minimum, min(maximum, value)))
    spin.setMinimumWidth(100)
    return spin


class _SpinnerDialog(QtWidgets.QDialog):
    def __init__(self, title: str, header: str, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self.setWindowTitle(title)

        self._form = QtWidgets.QFormLayout()
        self._form.setHorizontalSpacing(10)
        self._form.setVerticalSpacing(10)

        buttons = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel
        )
        buttons.button(QtWidgets.QDialogButtonBox.Ok).setText("Confirm")
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 10)
        layout.addWidget(QtWidgets.QLabel(header))
        layout.addLayout(self._form)
        layout.addWidget(buttons)


class BoardSizeDialog(_SpinnerDialog):
    """Ask for the side length of the board."""

    def __init__(
        self,
        limits: LimitsConfig,
        default: int,
        parent: QtWidgets.QWidget | None = None,
    ):
        super().__init__("Chess Board Size", "Enter the size of the chess board", parent)
        self._size = _spinner(limits.min_board_size, limits.max_board_size, default)
        self._form.addRow(
            f"Board Size [{limits.min_board_size}-{limits.max_board_size}] :", self._size
        )

    def value(self) -> int:
        return self._size.value()

    @classmethod
    def ask(
        cls,
        limits: LimitsConfig,
        default: int,
        parent: QtWidgets.QWidget | None = None,
    ) -> int | None:
        dialog = cls(limits, default, parent)
        if not dialog.exec():
            return None
        return dialog.value()


class StartPositionDialog(_SpinnerDialog):
    """Ask for the knight's start square as 1-indexed row and column.

    Row 1 is the top row of the board, matching how the board is drawn.
    """

    def __init__(
        self,
        board_size: int,
        default: Position = Position(0, 0),
        parent: QtWidgets.QWidget | None = None,
    ):
        super().__init__(
            "Knight's Initial Position",
            "Please enter the starting position for the knight",
            parent,
        )
        self._row = _spinner(1, board_size, default.y + 1)
        self._col = _spinner(1, board_size, default.x + 1)
        self._form.addRow(f"Row [1-{board_size}] :", self._row)
        self._form.addRow(f"Column [1-{board_size}] :", self._col)

    def value(self) -> Position:
        return Position(self._col.value() - 1, self._row.value() - 1)

    @classmethod
    def ask(
        cls,
        board_size: int,
        default: Position = Position(0, 0),
        parent: QtWidgets.QWidget | None = None,
    ) -> Position | None:
        dialog = cls(board_size, default, parent)
        if not dialog.exec():
            return None
        return dialog.value()
