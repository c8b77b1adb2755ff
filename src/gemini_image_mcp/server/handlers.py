"""
Operation handlers: validate, assemble, invoke, extract, materialize.

Every failure after validation is wrapped into OperationFailed with the
original error kept on `cause`. Validation errors and unknown operation
names pass through unchanged.
"""

import logging
from typing import Any, Dict, List, Optional

from ..ai_interfaces.exceptions import ImageToolError, OperationFailed
from ..ai_interfaces.image.protocols import ModelInvokerInterface
from ..ai_interfaces.models import GeneratedAsset
from ..config.settings import Settings
from ..pipeline.assembler import assemble
from ..pipeline.extractor import extract_images, extract_text
from ..pipeline.materializer import OutputMaterializer
from ..schema.registry import AnalyzeImageArgs, Err, GenerateImageArgs, ToolName, validate

logger = logging.getLogger(__name__)

FAILURE_LABELS = {
    ToolName.GENERATE_IMAGE: "Image generation",
    ToolName.ANALYZE_IMAGE: "Image analysis",
}

class ImageToolService:
    """Runs the generate/analyze pipelines against a model invoker"""
    
    def __init__(self, settings: Settings, invoker: ModelInvokerInterface,
                 materializer: Optional[OutputMaterializer] = None):
        self.settings = settings
        self.invoker = invoker
        self.materializer = materializer or OutputMaterializer(settings.images_dir)

    async def generate_image(self, args: GenerateImageArgs) -> List[GeneratedAsset]:
        request = await assemble(args.prompt, args.images)
        response = await self.invoker.invoke(request, args.temperature, self.settings.generation_model)

        assets = []
        for image_bytes in extract_images(response):
            assets.append(await self.materializer.materialize(image_bytes))
        return assets

    async def analyze_image(self, args: AnalyzeImageArgs) -> str:
        request = await assemble(args.prompt, args.images)
        response = await self.invoker.invoke(request, args.temperature, self.settings.analysis_model)
        return extract_text(response)

    async def dispatch(self, name: str, arguments: Optional[Dict[str, Any]]) -> Any:
        """
        Validate and run one tool call.

        Returns a list of GeneratedAsset for generate_image and the analysis
        text for analyze_image.
        """
        result = validate(name, arguments)
        if isinstance(result, Err):
            raise result.error

        operation = ToolName(name)
        logger.info(f"Running {operation.value}")
        try:
            if operation is ToolName.GENERATE_IMAGE:
                return await self.generate_image(result.value)
            return await self.analyze_image(result.value)
        except Exception as e:
            if not isinstance(e, ImageToolError):
                logger.exception(f"Unexpected error in {operation.value}")
            else:
                logger.error(f"{operation.value} failed: {e}")
            raise OperationFailed(operation.value, FAILURE_LABELS[operation], e) from e
