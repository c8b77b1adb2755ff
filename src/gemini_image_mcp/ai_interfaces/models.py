"""
Data models for the image tool pipeline - all @dataclass definitions.
"""

from __future__ import annotations
import base64
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

# ============================================================================
# Request Models
# ============================================================================

@dataclass(frozen=True)
class TextPart:
    """Plain text part of a multimodal request"""
    text: str

@dataclass(frozen=True)
class InlineImagePart:
    """Raw image bytes embedded in a multimodal request"""
    mime_type: str
    data: bytes

MultimodalPart = Union[TextPart, InlineImagePart]

@dataclass
class MultimodalRequest:
    """Ordered parts attributed to a single user turn"""
    parts: List[MultimodalPart] = field(default_factory=list)
    role: str = "user"

    @property
    def image_parts(self) -> List[InlineImagePart]:
        return [p for p in self.parts if isinstance(p, InlineImagePart)]

# ============================================================================
# Result Models
# ============================================================================

@dataclass(frozen=True)
class GeneratedAsset:
    """A persisted full-resolution image plus its transport preview"""
    filepath: Path
    preview_base64: str
    preview_mime_type: str = "image/png"

    @property
    def preview_bytes(self) -> bytes:
        """Decoded preview image"""
        return base64.b64decode(self.preview_base64)
