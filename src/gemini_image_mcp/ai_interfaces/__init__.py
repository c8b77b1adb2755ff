"""
AI Interfaces Package - data models, errors and the model invoker seam.
"""

from .models import TextPart, InlineImagePart, MultimodalPart, MultimodalRequest, GeneratedAsset
from .image.protocols import ModelInvokerInterface
from .exceptions import (
    ImageToolError, FieldViolation, ValidationError, MissingReferenceImage, MalformedResponse,
    EmptyResult, UpstreamError, RateLimitError, AuthenticationError, UnknownOperation, OperationFailed
)

# Public API
__all__ = [
    # Model exports
    "TextPart", "InlineImagePart", "MultimodalPart", "MultimodalRequest", "GeneratedAsset",
    "ModelInvokerInterface",

    # Exception exports
    "ImageToolError", "FieldViolation", "ValidationError", "MissingReferenceImage", "MalformedResponse",
    "EmptyResult", "UpstreamError", "RateLimitError", "AuthenticationError", "UnknownOperation",
    "OperationFailed"
]
