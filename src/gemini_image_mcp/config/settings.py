"""
Configuration settings for the Gemini image server.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

def get_api_key(*key_names: str) -> Optional[str]:
    """Get the first API key set in environment variables"""
    for key_name in key_names:
        value = os.getenv(key_name)
        if value:
            return value
    return None

# Default models
GENERATION_MODEL = "gemini-3-pro-image-preview"
ANALYSIS_MODEL = "gemini-3-pro-preview"

# Defaults
DEFAULT_TEMPERATURE = 0.8
DEFAULT_IMAGES_DIR = "temp"
REFERENCE_IMAGE_MIME_TYPE = "image/png"
PREVIEW_DIVISOR = 4
FALLBACK_WIDTH = 1024
GENERATED_PREFIX = "generated_"

API_KEY_NAMES = ("GEMINI_API_KEY", "GOOGLE_API_KEY")

def resolve_images_dir(raw: Optional[str] = None) -> Path:
    """Resolve the output directory and create it if missing"""
    raw = raw if raw is not None else os.getenv("IMAGES_DIR")
    images_dir = Path(raw).resolve() if raw else Path.cwd() / DEFAULT_IMAGES_DIR
    images_dir.mkdir(parents=True, exist_ok=True)
    return images_dir

@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, resolved once at startup"""
    api_key: Optional[str]
    images_dir: Path
    generation_model: str = GENERATION_MODEL
    analysis_model: str = ANALYSIS_MODEL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_key=get_api_key(*API_KEY_NAMES),
            images_dir=resolve_images_dir(),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

def validate_environment() -> Dict[str, bool]:
    """Check which API keys are available"""
    return {name: bool(os.getenv(name)) for name in API_KEY_NAMES}
