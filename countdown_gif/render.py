"""Per-tick frame rendering onto a two-color palette canvas."""

from datetime import timedelta
from typing import List, Optional, Sequence, Tuple

import numpy as np  # pip install numpy
from PIL import Image, ImageDraw  # pip install pillow

from .config import Color, RenderConfig
from .fonts import TextMeasurer
from .layout import DisplayField, DrawCommand, display_fields, place_group
from .timing import TICK, decompose

INK = 0          # text is rasterized black on white before palette mapping
PAPER = 255


def quantize(gray: Image.Image, palette: Sequence[Color]) -> Image.Image:
    """Map each grayscale pixel to its nearest palette entry; ties keep the first."""
    levels = np.asarray(gray, dtype=np.int32)[..., None, None]
    colors = np.asarray(palette, dtype=np.int32)[None, None, :, :]
    dist = ((levels - colors) ** 2).sum(axis=-1)
    indices = np.argmin(dist, axis=-1).astype(np.uint8)

    canvas = Image.frombytes("P", gray.size, indices.tobytes())
    canvas.putpalette([channel for color in palette for channel in color])
    return canvas


class FrameRenderer:
    def __init__(self, cfg: RenderConfig, measurer: Optional[TextMeasurer] = None):
        self.cfg = cfg
        self.measurer = measurer or TextMeasurer(cfg.font_path, cfg.dpi)

    def fields_for(self, remaining: timedelta) -> List[DisplayField]:
        """Fields shown for a frame; the breakdown is taken one tick past remaining."""
        return display_fields(decompose(remaining - TICK))

    def layout(self, fields: Sequence[DisplayField]) -> List[DrawCommand]:
        commands: List[DrawCommand] = []
        x = self.cfg.left_margin
        for field in fields:
            group, advance = place_group(self.measurer, self.cfg, x, self.cfg.top_offset, field)
            commands.extend(group)
            x += advance // 2 + self.cfg.group_padding
        return commands

    def draw(self, gray: Image.Image, commands: Sequence[DrawCommand]) -> Image.Image:
        draw = ImageDraw.Draw(gray)
        for cmd in commands:
            face = self.measurer.face(cmd.point_size)
            draw.text((cmd.x, cmd.y), cmd.text, fill=INK, font=face, anchor="ls")
        return gray

    def render_frame(self, remaining: timedelta) -> Tuple[Image.Image, bool]:
        """Render one frame; expired frames use the muted foreground."""
        expired = remaining <= timedelta(0)
        foreground = self.cfg.expired_foreground if expired else self.cfg.foreground

        gray = Image.new("L", self.cfg.size, PAPER)
        self.draw(gray, self.layout(self.fields_for(remaining)))
        return quantize(gray, (self.cfg.background, foreground)), expired
