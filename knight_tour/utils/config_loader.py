"""Helpers for loading and validating tour configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import threading

import yaml  # type: ignore[import-untyped]

from knight_tour.core.exceptions import ConfigurationError
from knight_tour.utils.consts import TourConsts


@dataclass(frozen=True)
class LimitsConfig:
    min_board_size: int = TourConsts.MIN_BOARD_SIZE
    max_board_size: int = TourConsts.MAX_BOARD_SIZE


@dataclass(frozen=True)
class TourConfig:
    board_size: int
    start: Optional[str]
    limits: LimitsConfig

    def with_board_size(self, board_size: int) -> "TourConfig":
        """Return a copy with a new board size, validated against the limits."""
        _validate_board_size(board_size, self.limits)
        return TourConfig(board_size=board_size, start=self.start, limits=self.limits)


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, TourConfig] = {}
_CACHE_LOCK = threading.RLock()

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "defaults.yaml"


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except Exception as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("Top-level config must be a mapping")
    return raw


def _build_limits(limits_raw: dict[str, Any]) -> LimitsConfig:
    limits = LimitsConfig(
        min_board_size=int(limits_raw.get("min_board_size", TourConsts.MIN_BOARD_SIZE)),
        max_board_size=int(limits_raw.get("max_board_size", TourConsts.MAX_BOARD_SIZE)),
    )
    if limits.min_board_size < 1:
        raise ConfigurationError("limits.min_board_size", "must be at least 1")
    if limits.max_board_size < limits.min_board_size:
        raise ConfigurationError("limits.max_board_size", "must not be below min_board_size")
    # File letters run out after 'z'.
    if limits.max_board_size > 26:
        raise ConfigurationError("limits.max_board_size", "must not exceed 26")
    return limits


def _validate_board_size(board_size: int, limits: LimitsConfig) -> None:
    if not limits.min_board_size <= board_size <= limits.max_board_size:
        raise ConfigurationError(
            "board_size",
            f"{board_size} is outside [{limits.min_board_size}, {limits.max_board_size}]",
            details={"board_size": board_size},
        )


def _parse_tour_cfg_from_dict(raw: dict[str, Any]) -> TourConfig:
    try:
        limits = _build_limits(raw.get("limits") or {})
        board_size = int(raw.get("board_size", TourConsts.DEFAULT_BOARD_SIZE))
        start = raw.get("start")
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc

    _validate_board_size(board_size, limits)
    if start is not None:
        start = str(start).strip().lower()

    return TourConfig(board_size=board_size, start=start or None, limits=limits)


def load_config(path: Optional[str | Path] = None) -> TourConfig:
    """Load and validate tour configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled
            knight_tour/defaults.yaml.

    Returns:
        TourConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    raw = _load_yaml_file(p)

    return _parse_tour_cfg_from_dict(raw)


def get_config(path: Optional[str | Path] = None) -> TourConfig:
    """Return the loaded config for ``path``, loading and caching if necessary.

    THREAD SAFETY: This function is thread-safe.
    """
    key = str(Path(path) if path is not None else DEFAULT_CONFIG_PATH)
    with _CACHE_LOCK:
        if key not in _LOADER_CACHE:
            _LOADER_CACHE[key] = load_config(path)
        return _LOADER_CACHE[key]


def clear_config_cache() -> None:
    """Clear all cached configurations."""
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
