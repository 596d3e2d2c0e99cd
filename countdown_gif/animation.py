"""Frame loop and output writers for the countdown animation."""

import logging
from datetime import timedelta
from pathlib import Path
from typing import List, NamedTuple, Union

import imageio.v2 as imageio  # pip install imageio imageio-ffmpeg
import numpy as np  # pip install numpy
from PIL import Image  # pip install pillow

from .errors import OutputError
from .render import FrameRenderer
from .timing import TICK

log = logging.getLogger(__name__)


class Frame(NamedTuple):
    canvas: Image.Image
    duration_ms: int
    expired: bool


class AnimationSequence:
    """Ordered frames plus a loop count (0 loops forever); sealed once assembled."""

    def __init__(self, loop: int = 0):
        self.loop = loop
        self._frames: List[Frame] = []
        self.sealed = False

    def append_frame(self, canvas: Image.Image, duration_ms: int, expired: bool = False) -> None:
        if self.sealed:
            raise RuntimeError("Cannot append to a sealed animation")
        self._frames.append(Frame(canvas, duration_ms, expired))

    def seal(self) -> "AnimationSequence":
        self.sealed = True
        return self

    @property
    def frames(self) -> tuple:
        return tuple(self._frames)

    @property
    def canvases(self) -> List[Image.Image]:
        return [frame.canvas for frame in self._frames]

    @property
    def durations(self) -> List[int]:
        return [frame.duration_ms for frame in self._frames]

    def __len__(self) -> int:
        return len(self._frames)


def assemble(renderer: FrameRenderer, remaining: timedelta) -> AnimationSequence:
    """Render up to frame_count frames, stopping after the first expired one."""
    cfg = renderer.cfg
    sequence = AnimationSequence(loop=cfg.loop)

    for i in range(cfg.frame_count):
        canvas, expired = renderer.render_frame(remaining)
        log.debug("frame %d: remaining=%s expired=%s", i, remaining, expired)
        remaining = remaining - TICK
        sequence.append_frame(canvas, cfg.frame_duration_ms, expired)
        if expired:
            break

    return sequence.seal()


# ----------------------------
# Writers
# ----------------------------
def write_gif(sequence: AnimationSequence, path: Path) -> None:
    first, *rest = sequence.canvases
    first.save(
        path,
        save_all=True,
        append_images=rest,
        duration=sequence.durations,
        loop=sequence.loop,
        optimize=False,
    )


def write_mp4(sequence: AnimationSequence, path: Path) -> None:
    """Write frames through the ffmpeg plugin; one video frame per animation frame."""
    fps = 1000 / sequence.frames[0].duration_ms
    writer = imageio.get_writer(str(path), fps=fps, codec="libx264", quality=8, macro_block_size=2)
    try:
        for canvas in sequence.canvases:
            writer.append_data(np.array(canvas.convert("RGB")))
    finally:
        writer.close()


WRITERS = {
    ".gif": write_gif,
    ".mp4": write_mp4,
}


def save_animation(sequence: AnimationSequence, path: Union[str, Path]) -> Path:
    path = Path(path)
    if not len(sequence):
        raise OutputError("Animation has no frames")
    writer = WRITERS.get(path.suffix.lower())
    if writer is None:
        raise OutputError(f"Unsupported output format {path.suffix!r} (use .gif or .mp4)")

    try:
        writer(sequence, path)
    except OSError as exc:
        raise OutputError(f"Cannot write {path}: {exc}") from exc
    log.info("Saved: %s (%d frames)", path, len(sequence))
    return path
