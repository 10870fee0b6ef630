"""Control bar with tour status and action buttons."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from knight_tour_gui.controller import TourState


class ControlBar(QtWidgets.QFrame):
    next_requested = QtCore.Signal()
    play_toggled = QtCore.Signal(bool)
    reset_requested = QtCore.Signal()
    start_requested = QtCore.Signal()

    def __init__(self, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self.setFrameShape(QtWidgets.QFrame.NoFrame)

        self._status_label = QtWidgets.QLabel("")
        self._status_label.setFont(QtGui.QFont("Arial", 14))

        self._next_button = QtWidgets.QPushButton("Next Move")
        self._play_button = QtWidgets.QPushButton("Play")
        self._play_button.setCheckable(True)
        self._reset_button = QtWidgets.QPushButton("Reset")
        self._start_button = QtWidgets.QPushButton("New Start")

        self._next_button.clicked.connect(self.next_requested)
        self._play_button.toggled.connect(self.play_toggled)
        self._reset_button.clicked.connect(self.reset_requested)
        self._start_button.clicked.connect(self.start_requested)

        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(10)
        layout.addWidget(self._status_label)
        layout.addStretch(1)
        layout.addWidget(self._next_button)
        layout.addWidget(self._play_button)
        layout.addWidget(self._reset_button)
        layout.addWidget(self._start_button)

    def set_status(self, text: str) -> None:
        self._status_label.setText(text)

    def set_state(self, state: TourState) -> None:
        finished = state == TourState.FINISHED
        self._next_button.setEnabled(not finished)
        self._play_button.setEnabled(not finished)

        playing = state == TourState.PLAYING
        if self._play_button.isChecked() != playing:
            # Sync without echoing play_toggled back to the controller.
            self._play_button.blockSignals(True)
            self._play_button.setChecked(playing)
            self._play_button.blockSignals(False)
        self._play_button.setText("Pause" if playing else "Play")
