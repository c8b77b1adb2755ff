from .gemini_image import GeminiImageClient

__all__ = ["GeminiImageClient"]
