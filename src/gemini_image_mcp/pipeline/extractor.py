"""
Pulls generated images or analysis text out of a model response.

The response is a nested structure where almost every level is optional
(candidates -> content -> parts -> inline_data / text). Each absent level
maps onto a named error instead of an attribute fault.
"""

import base64
import binascii
import logging
from typing import Any, List, Optional, Sequence

from ..ai_interfaces.exceptions import EmptyResult, MalformedResponse

logger = logging.getLogger(__name__)

def _first_candidate_parts(response: Any) -> Optional[Sequence[Any]]:
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    if content is None:
        return None
    return getattr(content, "parts", None)

def _decode_inline_data(data: Any) -> bytes:
    """The SDK hands back raw bytes; JSON-shaped responses carry base64 text"""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, TypeError, ValueError) as e:
        raise MalformedResponse(f"Invalid inline image data: {e}") from e

def extract_images(response: Any) -> List[bytes]:
    """Return decoded bytes of every image part in the first candidate, in order"""
    parts = _first_candidate_parts(response)
    if parts is None:
        raise MalformedResponse("Invalid response data")

    images = []
    for part in parts:
        inline_data = getattr(part, "inline_data", None)
        if inline_data is None:
            continue
        mime_type = getattr(inline_data, "mime_type", None) or ""
        data = getattr(inline_data, "data", None)
        if not mime_type.startswith("image/") or not data:
            continue
        images.append(_decode_inline_data(data))

    if not images:
        raise EmptyResult("No images were generated")

    logger.debug(f"Extracted {len(images)} image part(s)")
    return images

def extract_text(response: Any) -> str:
    """
    Return the text of the first part of the first candidate.
    Later parts and candidates are ignored.
    """
    parts = _first_candidate_parts(response)
    if not parts:
        raise MalformedResponse("Invalid response data")

    text = getattr(parts[0], "text", None)
    if not text:
        raise MalformedResponse("Invalid response data")
    return text
