"""Placement of (label, value) groups with the value centered above its label."""

from typing import List, NamedTuple, Protocol, Tuple

from .config import RenderConfig
from .timing import TimeBreakdown

LABELS = ("days", "hours", "minutes", "seconds")


class Measurer(Protocol):
    def measure(self, text: str, point_size: float) -> int: ...


class DisplayField(NamedTuple):
    label: str
    value: str


class DrawCommand(NamedTuple):
    """Text drawn with its left baseline point at (x, y)."""

    x: int
    y: int
    text: str
    point_size: int


def display_fields(breakdown: TimeBreakdown) -> List[DisplayField]:
    return [DisplayField(label, str(value)) for label, value in zip(LABELS, breakdown)]


def place_group(
    measurer: Measurer, cfg: RenderConfig, x: int, y: int, field: DisplayField
) -> Tuple[List[DrawCommand], int]:
    """Return draw commands for one group and the width used to advance the cursor."""
    label_half = measurer.measure(field.label, cfg.label_point_size) // 2
    value_half = measurer.measure(field.value, cfg.value_point_size) // 2

    # Negative when the value is wider than the label; the value then starts left of x.
    local_offset = label_half - value_half

    value_y = y + cfg.value_point_size
    label_y = value_y + cfg.label_point_size + cfg.value_label_padding
    commands = [
        DrawCommand(x, label_y, field.label, cfg.label_point_size),
        DrawCommand(x + local_offset, value_y, field.value, cfg.value_point_size),
    ]

    # Spacing follows the label measured at the value size, even if the value is wider.
    advance = measurer.measure(field.label, cfg.value_point_size)
    return commands, advance
