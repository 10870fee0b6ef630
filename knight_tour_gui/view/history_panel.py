"""Move history panel."""

from __future__ import annotations

from PySide6 import QtGui, QtWidgets


class HistoryPanel(QtWidgets.QWidget):
    def __init__(self, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self._title = QtWidgets.QLabel("Move history")
        self._text = QtWidgets.QPlainTextEdit(self)
        self._text.setReadOnly(True)
        self._text.setMinimumHeight(100)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(10, 0, 10, 0)
        layout.addWidget(self._title)
        layout.addWidget(self._text)

        self._lines: list[str] = []

    def update_history(self, lines: list[str]) -> None:
        shown = len(self._lines)
        # Append only new lines unless the tour restarted.
        if shown and lines[:shown] == self._lines:
            for line in lines[shown:]:
                self._text.appendPlainText(line)
        else:
            self._text.setPlainText("\n".join(lines))
        self._lines = list(lines)
        self._text.moveCursor(QtGui.QTextCursor.End)
