"""
Persists generated images and derives a quarter-width PNG preview.
"""

import asyncio
import base64
import io
import logging
import time
from pathlib import Path
from typing import Tuple

from PIL import Image

from ..ai_interfaces.models import GeneratedAsset
from ..config.settings import FALLBACK_WIDTH, GENERATED_PREFIX, PREVIEW_DIVISOR

logger = logging.getLogger(__name__)

def round_half_up(value: float) -> int:
    return int(value + 0.5)

def preview_size(width: int, height: int, divisor: int = PREVIEW_DIVISOR) -> Tuple[int, int]:
    """
    Target width is round(width / divisor), half rounding up, never below 1.
    Height follows the aspect ratio, also never below 1.
    """
    target_width = max(1, round_half_up(width / divisor))
    target_height = max(1, round_half_up(height * target_width / width))
    return target_width, target_height

# Modes the PNG encoder writes as-is
PNG_MODES = ("1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA")

def to_png_mode(img: Image.Image) -> Image.Image:
    """Convert to a mode the PNG encoder accepts, keeping alpha where present"""
    if img.mode in PNG_MODES:
        return img
    if img.mode == "F":
        return img.convert("L")
    if img.mode in ("PA", "La", "RGBa"):
        return img.convert("RGBA")
    return img.convert("RGB")

def make_preview(image_bytes: bytes, divisor: int = PREVIEW_DIVISOR) -> bytes:
    """Resize to fit inside the preview width and re-encode as PNG"""
    with Image.open(io.BytesIO(image_bytes)) as img:
        width = img.width or FALLBACK_WIDTH
        height = img.height or width
        size = preview_size(width, height, divisor)
        preview = to_png_mode(img).resize(size, Image.Resampling.LANCZOS)

        output = io.BytesIO()
        preview.save(output, format="PNG")
        return output.getvalue()

class OutputMaterializer:
    """Writes full-resolution images under a fixed output directory"""
    
    def __init__(self, output_dir: Path, prefix: str = GENERATED_PREFIX):
        self.output_dir = Path(output_dir).resolve()
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.prefix = prefix
        self._last_timestamp = 0

    def _next_filepath(self) -> Path:
        # Monotonic within this instance; other processes writing the same
        # directory in the same millisecond can still collide
        timestamp = max(int(time.time() * 1000), self._last_timestamp + 1)
        self._last_timestamp = timestamp
        return self.output_dir / f"{self.prefix}{timestamp}.png"

    async def materialize(self, image_bytes: bytes) -> GeneratedAsset:
        """Save the original bytes verbatim, then build the preview"""
        filepath = self._next_filepath()
        await asyncio.to_thread(filepath.write_bytes, image_bytes)

        preview = await asyncio.to_thread(make_preview, image_bytes)
        logger.info(f"Saved image to {filepath} (preview {len(preview)} bytes)")

        return GeneratedAsset(
            filepath=filepath,
            preview_base64=base64.b64encode(preview).decode('utf-8'),
        )
