"""Tests for multimodal request assembly."""

from pathlib import Path

import pytest

from gemini_image_mcp.ai_interfaces.exceptions import MissingReferenceImage
from gemini_image_mcp.ai_interfaces.models import InlineImagePart, TextPart
from gemini_image_mcp.pipeline.assembler import assemble


class TestAssemble:
    async def test_prompt_only_request_has_single_text_part(self):
        request = await assemble("a red circle", [])

        assert request.parts == [TextPart("a red circle")]
        assert request.image_parts == []
        assert request.role == "user"

    async def test_text_first_then_images_in_input_order(self, reference_images):
        request = await assemble("combine these", reference_images)

        assert len(request.parts) == 1 + len(reference_images)
        assert request.parts[0] == TextPart("combine these")
        for part, path in zip(request.parts[1:], reference_images):
            assert isinstance(part, InlineImagePart)
            assert part.data == Path(path).read_bytes()

    async def test_reference_images_are_labelled_png(self, tmp_path):
        jpeg_named = tmp_path / "photo.jpg"
        jpeg_named.write_bytes(b"not really an image")

        request = await assemble("describe", [str(jpeg_named)])

        assert request.image_parts[0].mime_type == "image/png"
        assert request.image_parts[0].data == b"not really an image"

    async def test_missing_reference_image(self, tmp_path, reference_images):
        missing = str(tmp_path / "missing.png")

        with pytest.raises(MissingReferenceImage) as exc_info:
            await assemble("describe", [reference_images[0], missing])

        assert exc_info.value.path == missing
        assert "does not exist" in str(exc_info.value)

    async def test_directory_is_not_a_reference_image(self, tmp_path):
        with pytest.raises(MissingReferenceImage):
            await assemble("describe", [str(tmp_path)])
