"""
Custom exceptions for the image tool pipeline.
"""

from dataclasses import dataclass
from typing import List, Optional

class ImageToolError(Exception):
    """Base exception for image tool errors"""
    
    def __init__(self, message: str, operation: Optional[str] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.error_code = error_code

@dataclass(frozen=True)
class FieldViolation:
    """A single field-level validation failure"""
    field: str
    message: str
    kind: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"

class ValidationError(ImageToolError):
    """Raised when tool arguments do not match the declared schema"""
    
    def __init__(self, operation: str, violations: List[FieldViolation]):
        detail = "; ".join(str(v) for v in violations)
        super().__init__(f"Invalid arguments for {operation}: {detail}", operation, "validation_error")
        self.violations = violations

class MissingReferenceImage(ImageToolError):
    """Raised when a reference image path does not exist"""
    
    def __init__(self, path: str):
        super().__init__(f"Reference image file does not exist: {path}", error_code="missing_reference_image")
        self.path = path

class MalformedResponse(ImageToolError):
    """Raised when the model response lacks the expected structure"""
    
    def __init__(self, message: str = "Invalid response data"):
        super().__init__(message, error_code="malformed_response")

class EmptyResult(ImageToolError):
    """Raised when a well-formed response carries no usable output"""
    
    def __init__(self, message: str = "No images were generated"):
        super().__init__(message, error_code="empty_result")

class UpstreamError(ImageToolError):
    """Raised when the remote model call itself fails"""
    
    def __init__(self, message: str, error_code: str = "upstream_error"):
        super().__init__(message, error_code=error_code)

class RateLimitError(UpstreamError):
    """Raised when rate limits are exceeded"""
    
    def __init__(self, message: str, retry_after: Optional[int] = None):
        super().__init__(message, "rate_limit")
        self.retry_after = retry_after

class AuthenticationError(UpstreamError):
    """Raised when authentication fails or no credential is configured"""
    
    def __init__(self, message: str):
        super().__init__(message, "authentication_error")

class UnknownOperation(ImageToolError):
    """Raised when dispatching on an unregistered operation name"""
    
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}", name, "unknown_operation")
        self.name = name

class OperationFailed(ImageToolError):
    """Uniform failure surfaced to the caller; the original error stays on `cause`"""
    
    def __init__(self, operation: str, label: str, cause: BaseException):
        super().__init__(f"{label} failed: {cause}", operation, "operation_failed")
        self.cause = cause
