"""Font loading and text measurement at a fixed rendering DPI."""

import io
import logging
import math
import zipfile
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import requests  # pip install requests
from PIL import ImageFont  # pip install pillow

from .errors import FontError

log = logging.getLogger(__name__)

DEJAVU_URL = "https://netcologne.dl.sourceforge.net/project/dejavu/dejavu/2.37/dejavu-fonts-ttf-2.37.zip"
DEJAVU_MEMBER = "dejavu-fonts-ttf-2.37/ttf/DejaVuSans.ttf"
DEJAVU_FILENAME = "DejaVuSans.ttf"


def pixel_size(point_size: float, dpi: int) -> float:
    return point_size * dpi / 72


class TextMeasurer:
    """Holds one font and hands out sized faces and advance widths.

    ``font_path`` of None selects Pillow's bundled scalable font. Faces and widths are
    cached per (text, size); the cache never changes a result.
    """

    def __init__(self, font_path: Optional[Union[str, Path]] = None, dpi: int = 150):
        self.font_path = str(font_path) if font_path else None
        self.dpi = dpi
        self._faces: Dict[float, ImageFont.FreeTypeFont] = {}
        self._widths: Dict[Tuple[str, float], int] = {}

    def face(self, point_size: float) -> ImageFont.FreeTypeFont:
        face = self._faces.get(point_size)
        if face is None:
            face = self._load(pixel_size(point_size, self.dpi))
            self._faces[point_size] = face
        return face

    def _load(self, size_px: float) -> ImageFont.FreeTypeFont:
        if self.font_path is None:
            return ImageFont.load_default(size=size_px)
        try:
            return ImageFont.truetype(self.font_path, size_px)
        except OSError as exc:
            raise FontError(f"Cannot load font {self.font_path}: {exc}") from exc

    def measure(self, text: str, point_size: float) -> int:
        """Rendered advance width of text in whole pixels, rounded up."""
        key = (text, point_size)
        width = self._widths.get(key)
        if width is None:
            width = math.ceil(self.face(point_size).getlength(text))
            self._widths[key] = width
        return width


def download_font(cache_dir: Union[str, Path] = ".") -> Path:
    """Download DejaVu Sans into cache_dir if not already present."""
    font_path = Path(cache_dir) / DEJAVU_FILENAME
    if font_path.exists():
        return font_path

    log.info("Downloading font from %s", DEJAVU_URL)
    try:
        response = requests.get(DEJAVU_URL, timeout=15)
        response.raise_for_status()
        with zipfile.ZipFile(io.BytesIO(response.content)) as z:
            data = z.read(DEJAVU_MEMBER)
    except (requests.RequestException, zipfile.BadZipFile, KeyError) as exc:
        raise FontError(f"Font download failed: {exc}") from exc

    font_path.parent.mkdir(parents=True, exist_ok=True)
    font_path.write_bytes(data)
    log.info("Font saved to %s", font_path)
    return font_path
