"""Board canvas: squares, move numbers, path arrows and the knight."""

from __future__ import annotations

import math
from pathlib import Path

from PySide6 import QtCore, QtGui, QtWidgets

from knight_tour.interfaces.tour import Position, TourSnapshot
from knight_tour.utils.consts import FILE_LETTERS
from knight_tour_gui.config import GuiConfig


class BoardCanvas(QtWidgets.QGraphicsView):
    def __init__(self, config: GuiConfig, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self._config = config
        self._scene = QtWidgets.QGraphicsScene(self)
        self.setScene(self._scene)
        self.setRenderHints(
            QtGui.QPainter.Antialiasing
            | QtGui.QPainter.SmoothPixmapTransform
            | QtGui.QPainter.TextAntialiasing
        )
        self.setHorizontalScrollBarPolicy(QtCore.Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(QtCore.Qt.ScrollBarAlwaysOff)
        self._knight_pixmap = self._load_knight()

    def _load_knight(self) -> QtGui.QPixmap | None:
        image = self._config.knight.image
        if not image or not Path(image).exists():
            return None
        size = self._config.board.square_size
        pixmap = QtGui.QPixmap(image)
        if pixmap.isNull():
            return None
        return pixmap.scaled(
            size, size, QtCore.Qt.KeepAspectRatio, QtCore.Qt.SmoothTransformation
        )

    def canvas_size(self, board_size: int) -> int:
        style = self._config.board
        return board_size * style.square_size + 2 * style.margin

    def _center(self, position: Position) -> QtCore.QPointF:
        style = self._config.board
        half = style.square_size / 2
        return QtCore.QPointF(
            style.margin + position.x * style.square_size + half,
            style.margin + position.y * style.square_size + half,
        )

    def redraw(self, snapshot: TourSnapshot) -> None:
        self._scene.clear()
        extent = self.canvas_size(snapshot.board_size)
        self._scene.setSceneRect(QtCore.QRectF(0, 0, extent, extent))
        self._scene.setBackgroundBrush(
            QtGui.QBrush(QtGui.QColor(self._config.board.background_color))
        )

        self._draw_squares(snapshot)
        self._draw_coordinates(snapshot.board_size)
        self._draw_arrows(snapshot.history)
        self._draw_knight(snapshot.current)

    def _draw_squares(self, snapshot: TourSnapshot) -> None:
        style = self._config.board
        light = QtGui.QBrush(QtGui.QColor(style.light_color))
        dark = QtGui.QBrush(QtGui.QColor(style.dark_color))
        no_pen = QtGui.QPen(QtCore.Qt.NoPen)
        font = QtGui.QFont("Arial", style.number_font_size)
        number_brush = QtGui.QBrush(QtGui.QColor(style.number_color))

        for row in range(snapshot.board_size):
            for col in range(snapshot.board_size):
                x = style.margin + col * style.square_size
                y = style.margin + row * style.square_size
                brush = light if (row + col) % 2 == 0 else dark
                self._scene.addRect(x, y, style.square_size, style.square_size, no_pen, brush)

                value = snapshot.marker(col, row)
                if value > 0:
                    text = self._scene.addSimpleText(str(value), font)
                    text.setBrush(number_brush)
                    bounds = text.boundingRect()
                    text.setPos(
                        x + (style.square_size - bounds.width()) / 2,
                        y + (style.square_size - bounds.height()) / 2,
                    )

    def _draw_coordinates(self, board_size: int) -> None:
        style = self._config.board
        font = QtGui.QFont("Arial", style.label_font_size)
        brush = QtGui.QBrush(QtGui.QColor(style.label_color))
        bottom = style.margin + board_size * style.square_size

        # Files below the board, ranks to the left (rank 1 at the bottom).
        for col in range(board_size):
            label = self._scene.addSimpleText(FILE_LETTERS[col], font)
            label.setBrush(brush)
            bounds = label.boundingRect()
            label.setPos(
                style.margin + col * style.square_size + (style.square_size - bounds.width()) / 2,
                bottom + (style.margin - bounds.height()) / 2,
            )

        for row in range(board_size):
            label = self._scene.addSimpleText(str(board_size - row), font)
            label.setBrush(brush)
            bounds = label.boundingRect()
            label.setPos(
                (style.margin - bounds.width()) / 2,
                style.margin + row * style.square_size + (style.square_size - bounds.height()) / 2,
            )

    def _draw_arrows(self, history: tuple[Position, ...]) -> None:
        arrow = self._config.arrow
        pen = QtGui.QPen(QtGui.QColor(arrow.color), arrow.width)
        pen.setCapStyle(QtCore.Qt.RoundCap)
        sharpness = math.radians(arrow.head_angle)

        for start, end in zip(history, history[1:]):
            p1 = self._center(start)
            p2 = self._center(end)
            self._scene.addLine(QtCore.QLineF(p1, p2), pen)

            angle = math.atan2(p2.y() - p1.y(), p2.x() - p1.x())
            for side in (angle - sharpness, angle + sharpness):
                tip = QtCore.QPointF(
                    p2.x() - arrow.head_size * math.cos(side),
                    p2.y() - arrow.head_size * math.sin(side),
                )
                self._scene.addLine(QtCore.QLineF(p2, tip), pen)

    def _draw_knight(self, position: Position) -> None:
        style = self._config.board
        center = self._center(position)

        if self._knight_pixmap is not None:
            item = self._scene.addPixmap(self._knight_pixmap)
            item.setPos(
                center.x() - self._knight_pixmap.width() / 2,
                center.y() - self._knight_pixmap.height() / 2,
            )
            return

        font = QtGui.QFont("DejaVu Sans", int(style.square_size * 0.5))
        glyph = self._scene.addSimpleText(self._config.knight.glyph, font)
        glyph.setBrush(QtGui.QBrush(QtGui.QColor(self._config.knight.color)))
        bounds = glyph.boundingRect()
        glyph.setPos(center.x() - bounds.width() / 2, center.y() - bounds.height() / 2)

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), QtCore.Qt.KeepAspectRatio)
