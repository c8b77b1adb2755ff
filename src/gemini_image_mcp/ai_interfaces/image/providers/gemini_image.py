"""
Gemini model invoker built on the google-genai SDK.
"""

import asyncio
import logging
import re
from typing import Any, List, Optional

from google import genai
from google.genai import types

from ...models import InlineImagePart, MultimodalRequest, TextPart
from ...exceptions import AuthenticationError, RateLimitError, UpstreamError

logger = logging.getLogger(__name__)

class GeminiImageClient:
    """
    Thin async wrapper around `genai.Client`.
    Exactly one call per invocation: no retry, no timeout override.
    """
    
    def __init__(self, api_key: Optional[str] = None, client: Any = None):
        """
        Args:
            api_key: Gemini API key; required unless `client` is given
            client: Pre-built client exposing `models.generate_content`
        """
        if client is None:
            if not api_key:
                raise AuthenticationError("GEMINI_API_KEY or GOOGLE_API_KEY environment variable is not set")
            client = genai.Client(api_key=api_key)
            logger.info("Initialized Gemini client")

        self.client = client

    def _handle_gemini_error(self, error: Exception) -> None:
        """Convert Gemini errors to standard exceptions"""
        error_str = str(error).lower()
        
        if "429" in str(error) or "quota" in error_str or "rate limit" in error_str:
            retry_after = None
            delay_match = re.search(r'retry_delay\s*{\s*seconds:\s*(\d+)', str(error))
            if delay_match:
                retry_after = int(delay_match.group(1))
            raise RateLimitError(f"Gemini rate limit exceeded: {error}", retry_after) from error
        elif "authentication" in error_str or "api key" in error_str:
            raise AuthenticationError(f"Gemini authentication failed: {error}") from error
        else:
            raise UpstreamError(f"Gemini API error: {error}") from error

    def _build_contents(self, request: MultimodalRequest) -> List[types.Content]:
        """Convert request parts to Gemini content, preserving order"""
        parts = []
        for part in request.parts:
            if isinstance(part, TextPart):
                parts.append(types.Part.from_text(text=part.text))
            elif isinstance(part, InlineImagePart):
                parts.append(types.Part.from_bytes(data=part.data, mime_type=part.mime_type))
        return [types.Content(role=request.role, parts=parts)]

    async def invoke(self, request: MultimodalRequest, temperature: float, model_name: str) -> Any:
        """Issue a single generate_content call and return the raw response"""
        contents = self._build_contents(request)
        config = types.GenerateContentConfig(temperature=temperature)
        logger.debug(f"Calling {model_name} with {len(request.parts)} part(s), temperature={temperature}")

        try:
            response = await asyncio.to_thread(
                self.client.models.generate_content,
                model=model_name,
                contents=contents,
                config=config,
            )
        except Exception as e:
            logger.error(f"Gemini call to {model_name} failed: {e}")
            self._handle_gemini_error(e)

        logger.info(f"Received response from {model_name}")
        return response
