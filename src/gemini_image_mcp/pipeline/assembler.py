"""
Builds the multimodal request sent to the model from a prompt and reference images.
"""

import asyncio
import logging
from pathlib import Path
from typing import Sequence

from ..ai_interfaces.exceptions import MissingReferenceImage
from ..ai_interfaces.models import InlineImagePart, MultimodalRequest, TextPart
from ..config.settings import REFERENCE_IMAGE_MIME_TYPE

logger = logging.getLogger(__name__)

async def read_reference_image(path: str) -> bytes:
    """Read a reference image as raw bytes; no format validation"""
    file_path = Path(path)
    if not file_path.is_file():
        raise MissingReferenceImage(path)
    return await asyncio.to_thread(file_path.read_bytes)

async def assemble(prompt: str, reference_image_paths: Sequence[str] = ()) -> MultimodalRequest:
    """
    Text part first, then one image part per path in caller order.
    Reference images are always labelled with REFERENCE_IMAGE_MIME_TYPE.
    """
    parts = [TextPart(prompt)]
    for path in reference_image_paths:
        data = await read_reference_image(path)
        parts.append(InlineImagePart(mime_type=REFERENCE_IMAGE_MIME_TYPE, data=data))
        logger.debug(f"Attached reference image {path} ({len(data)} bytes)")

    return MultimodalRequest(parts=parts)
