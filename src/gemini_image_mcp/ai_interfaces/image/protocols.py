"""
Protocol definitions for the remote model interface.
"""

from typing import Any, Protocol
from ..models import MultimodalRequest

class ModelInvokerInterface(Protocol):
    """Protocol defining the interface for a remote multimodal model"""
    
    async def invoke(self, request: MultimodalRequest, temperature: float, model_name: str) -> Any:
        """Send the request once and return the raw, uninterpreted response"""
        ...
