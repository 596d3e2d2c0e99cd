"""Render a countdown to a target date/time as a looping animated GIF."""

from .animation import AnimationSequence, Frame, assemble, save_animation
from .config import RenderConfig, load_config
from .errors import ConfigError, CountdownError, FontError, InputError, OutputError
from .fonts import TextMeasurer, download_font
from .layout import DisplayField, DrawCommand, place_group
from .render import FrameRenderer
from .timing import TimeBreakdown, decompose, parse_target, sample_now

__version__ = "0.1.0"

__all__ = [
    "AnimationSequence",
    "ConfigError",
    "CountdownError",
    "DisplayField",
    "DrawCommand",
    "FontError",
    "Frame",
    "FrameRenderer",
    "InputError",
    "OutputError",
    "RenderConfig",
    "TextMeasurer",
    "TimeBreakdown",
    "assemble",
    "decompose",
    "download_font",
    "load_config",
    "parse_target",
    "place_group",
    "sample_now",
    "save_animation",
]
