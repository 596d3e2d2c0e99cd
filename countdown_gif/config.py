"""Render settings: canvas geometry, font sizes, palette and frame budget."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional, Tuple, Union

import yaml  # pip install pyyaml

from .errors import ConfigError

Color = Tuple[int, int, int]

# ----------------------------
# Defaults
# ----------------------------
LEFT_MARGIN = 50                 # offset of the first group from the left edge
WIDTH, HEIGHT = 530 + LEFT_MARGIN, 150
VALUE_POINT_SIZE = 25
LABEL_POINT_SIZE = 15
VALUE_LABEL_PADDING = 20         # gap between value and label baselines
GROUP_PADDING = 50               # gap to the next group
TOP_OFFSET = 50
DPI = 150
FRAME_COUNT = 30                 # one frame per second
FRAME_DURATION_MS = 1000
BACKGROUND = (255, 255, 255)
FOREGROUND = (0, 0, 0)
EXPIRED_FOREGROUND = (210, 210, 210)   # light gray
OUTPUT = "countdown.gif"

_COLOR_KEYS = ("background", "foreground", "expired_foreground")


@dataclass(frozen=True)
class RenderConfig:
    width: int = WIDTH
    height: int = HEIGHT
    left_margin: int = LEFT_MARGIN
    top_offset: int = TOP_OFFSET
    value_point_size: int = VALUE_POINT_SIZE
    label_point_size: int = LABEL_POINT_SIZE
    value_label_padding: int = VALUE_LABEL_PADDING
    group_padding: int = GROUP_PADDING
    dpi: int = DPI
    frame_count: int = FRAME_COUNT
    frame_duration_ms: int = FRAME_DURATION_MS
    loop: int = 0
    background: Color = BACKGROUND
    foreground: Color = FOREGROUND
    expired_foreground: Color = EXPIRED_FOREGROUND
    font_path: Optional[str] = None
    output: str = OUTPUT

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def with_overrides(self, **overrides: Any) -> "RenderConfig":
        """Return a copy with the non-None overrides applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return _build(self, values)


def _to_color(key: str, value: Any) -> Color:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ConfigError(f"{key} must be an [r, g, b] triple, got {value!r}")
    if not all(isinstance(c, int) and 0 <= c <= 255 for c in value):
        raise ConfigError(f"{key} channels must be integers in 0..255, got {value!r}")
    return tuple(value)


def _build(base: RenderConfig, values: dict[str, Any]) -> RenderConfig:
    known = {f.name for f in fields(RenderConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    for key in _COLOR_KEYS:
        if key in values:
            values[key] = _to_color(key, values[key])

    cfg = replace(base, **values)
    if cfg.width <= 0 or cfg.height <= 0:
        raise ConfigError(f"Canvas size must be positive, got {cfg.width}x{cfg.height}")
    if cfg.frame_count < 1:
        raise ConfigError("frame_count must be at least 1")
    if cfg.frame_duration_ms <= 0:
        raise ConfigError("frame_duration_ms must be positive")
    if cfg.dpi <= 0 or cfg.value_point_size <= 0 or cfg.label_point_size <= 0:
        raise ConfigError("dpi and point sizes must be positive")
    return cfg


def load_config(config_path: Optional[Union[str, Path]] = None) -> RenderConfig:
    """Load a flat YAML mapping over the defaults; no path means defaults only."""
    if not config_path:
        return RenderConfig()

    cfg_path = Path(config_path).expanduser()
    try:
        user_cfg = yaml.safe_load(cfg_path.read_text()) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config {cfg_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {cfg_path}: {exc}") from exc

    if not isinstance(user_cfg, dict):
        raise ConfigError(f"{cfg_path} must contain a mapping")
    return _build(RenderConfig(), dict(user_cfg))
