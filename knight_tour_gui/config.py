"""GUI configuration loader and data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from knight_tour.core.exceptions import ConfigurationError

DEFAULT_GUI_CONFIG = Path(__file__).parent / "themes" / "default.yaml"


@dataclass(frozen=True)
class BoardStyle:
    square_size: int = 80
    margin: int = 20
    light_color: str = "#ebecd0"
    dark_color: str = "#739552"
    background_color: str = "#302e2b"
    label_color: str = "#f0ead6"
    number_color: str = "#000000"
    label_font_size: int = 14
    number_font_size: int = 20


@dataclass(frozen=True)
class ArrowStyle:
    color: str = "#ff8c00"
    width: float = 3.0
    head_size: float = 10.0
    head_angle: float = 18.0


@dataclass(frozen=True)
class KnightStyle:
    image: str = ""
    glyph: str = "♞"
    color: str = "#000000"


@dataclass(frozen=True)
class SoundConfig:
    move_sound: str = ""
    volume: float = 0.7
    enabled: bool = True


@dataclass(frozen=True)
class PlaybackConfig:
    tick_ms: int = 300
    autoplay: bool = False


@dataclass(frozen=True)
class GuiConfig:
    window_title: str
    board: BoardStyle
    arrow: ArrowStyle
    knight: KnightStyle
    sound: SoundConfig
    playback: PlaybackConfig


def _resolve_asset(base: Path, value: Any) -> str:
    text = str(value or "")
    if not text:
        return ""
    return str((base / text).resolve())


def _parse_board(value: dict[str, Any]) -> BoardStyle:
    defaults = BoardStyle()
    style = BoardStyle(
        square_size=int(value.get("square_size", defaults.square_size)),
        margin=int(value.get("margin", defaults.margin)),
        light_color=str(value.get("light_color", defaults.light_color)),
        dark_color=str(value.get("dark_color", defaults.dark_color)),
        background_color=str(value.get("background_color", defaults.background_color)),
        label_color=str(value.get("label_color", defaults.label_color)),
        number_color=str(value.get("number_color", defaults.number_color)),
        label_font_size=int(value.get("label_font_size", defaults.label_font_size)),
        number_font_size=int(value.get("number_font_size", defaults.number_font_size)),
    )
    if style.square_size <= 0:
        raise ConfigurationError("board.square_size", "must be positive")
    if style.margin < 0:
        raise ConfigurationError("board.margin", "must not be negative")
    return style


def _parse_arrow(value: dict[str, Any]) -> ArrowStyle:
    defaults = ArrowStyle()
    return ArrowStyle(
        color=str(value.get("color", defaults.color)),
        width=float(value.get("width", defaults.width)),
        head_size=float(value.get("head_size", defaults.head_size)),
        head_angle=float(value.get("head_angle", defaults.head_angle)),
    )


def _parse_knight(value: dict[str, Any], base: Path) -> KnightStyle:
    defaults = KnightStyle()
    return KnightStyle(
        image=_resolve_asset(base, value.get("image")),
        glyph=str(value.get("glyph", defaults.glyph)),
        color=str(value.get("color", defaults.color)),
    )


def _parse_sound(value: dict[str, Any], base: Path) -> SoundConfig:
    volume = float(value.get("volume", SoundConfig.volume))
    if not 0.0 <= volume <= 1.0:
        raise ConfigurationError("sound.volume", "must be between 0.0 and 1.0")
    return SoundConfig(
        move_sound=_resolve_asset(base, value.get("move_sound")),
        volume=volume,
        enabled=bool(value.get("enabled", True)),
    )


def _parse_playback(value: dict[str, Any]) -> PlaybackConfig:
    tick_ms = int(value.get("tick_ms", PlaybackConfig.tick_ms))
    if tick_ms <= 0:
        raise ConfigurationError("playback.tick_ms", "must be positive")
    return PlaybackConfig(tick_ms=tick_ms, autoplay=bool(value.get("autoplay", False)))


def load_gui_config(path: str | Path | None = None) -> GuiConfig:
    path = Path(path) if path is not None else DEFAULT_GUI_CONFIG
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to read GUI config {path}: {exc}") from exc

    try:
        return GuiConfig(
            window_title=str(raw.get("window_title", "Knight's Tour")),
            board=_parse_board(raw.get("board") or {}),
            arrow=_parse_arrow(raw.get("arrow") or {}),
            knight=_parse_knight(raw.get("knight") or {}, path.parent),
            sound=_parse_sound(raw.get("sound") or {}, path.parent),
            playback=_parse_playback(raw.get("playback") or {}),
        )
    except (AttributeError, TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid GUI config schema: {exc}") from exc
