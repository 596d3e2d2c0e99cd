"""Shared fixtures: render settings, a real renderer and a fixed-width measurer."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from countdown_gif.config import RenderConfig
from countdown_gif.render import FrameRenderer


class FixedWidthMeasurer:
    """Every character is point_size pixels wide."""

    def measure(self, text: str, point_size: float) -> int:
        return len(text) * int(point_size)


@pytest.fixture()
def cfg() -> RenderConfig:
    return RenderConfig()


@pytest.fixture()
def long_cfg(cfg: RenderConfig) -> RenderConfig:
    return replace(cfg, frame_count=200)


@pytest.fixture()
def renderer(long_cfg: RenderConfig) -> FrameRenderer:
    return FrameRenderer(long_cfg)


@pytest.fixture()
def fixed_measurer() -> FixedWidthMeasurer:
    return FixedWidthMeasurer()


@pytest.fixture()
def noon() -> datetime:
    return datetime(2026, 10, 17, 12, 0, 0, tzinfo=timezone.utc)
