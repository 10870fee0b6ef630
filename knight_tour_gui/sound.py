"""Move sound effect."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6 import QtCore, QtMultimedia

from knight_tour_gui.config import SoundConfig

logger = logging.getLogger(__name__)


class SoundPlayer(QtCore.QObject):
    """Plays the knight move sound; silent when the file is missing."""

    def __init__(self, config: SoundConfig, parent: QtCore.QObject | None = None):
        super().__init__(parent)
        self._effect: QtMultimedia.QSoundEffect | None = None
        self._muted = not config.enabled

        if not config.move_sound:
            logger.debug("No move sound configured")
            return

        path = Path(config.move_sound)
        if not path.exists():
            logger.warning(f"Could not find move sound resource: {path}")
            return

        self._effect = QtMultimedia.QSoundEffect(self)
        self._effect.setSource(QtCore.QUrl.fromLocalFile(str(path)))
        self.set_volume(config.volume)

    @property
    def muted(self) -> bool:
        return self._muted

    def set_muted(self, muted: bool) -> None:
        self._muted = muted

    def set_volume(self, volume: float) -> None:
        if self._effect is not None:
            self._effect.setVolume(max(0.0, min(1.0, volume)))

    def play_move(self) -> None:
        if self._effect is not None and not self._muted:
            self._effect.play()
