"""Shared test fixtures and factories."""

import io
from pathlib import Path
from typing import List, Optional
from unittest.mock import AsyncMock

import pytest
from google.genai import types
from PIL import Image

from gemini_image_mcp.config.settings import Settings
from gemini_image_mcp.pipeline.materializer import OutputMaterializer
from gemini_image_mcp.server.handlers import ImageToolService


def make_png(width: int = 64, height: int = 48, color=(255, 0, 0)) -> bytes:
    output = io.BytesIO()
    Image.new("RGB", (width, height), color).save(output, format="PNG")
    return output.getvalue()


def make_response(parts: Optional[List[types.Part]]) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=parts))]
    )


def image_part(data: bytes, mime_type: str = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(mime_type=mime_type, data=data))


def text_part(text: str) -> types.Part:
    return types.Part(text=text)


@pytest.fixture
def png_bytes() -> bytes:
    return make_png()


@pytest.fixture
def reference_images(tmp_path: Path) -> List[str]:
    paths = []
    for i, color in enumerate([(255, 0, 0), (0, 255, 0), (0, 0, 255)]):
        path = tmp_path / f"ref_{i}.png"
        path.write_bytes(make_png(16, 16, color))
        paths.append(str(path))
    return paths


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(api_key="test-key", images_dir=tmp_path / "out")


@pytest.fixture
def invoker() -> AsyncMock:
    mock = AsyncMock()
    mock.invoke.return_value = make_response([image_part(make_png())])
    return mock


@pytest.fixture
def service(settings: Settings, invoker: AsyncMock) -> ImageToolService:
    return ImageToolService(settings, invoker, OutputMaterializer(settings.images_dir))
