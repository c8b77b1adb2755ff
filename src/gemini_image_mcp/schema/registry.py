"""
Tool catalog and argument validation.

The JSON schema advertised to the transport is generated once from the same
pydantic model that `validate` enforces, so the two cannot drift apart.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..ai_interfaces.exceptions import FieldViolation, UnknownOperation, ValidationError
from ..config.settings import DEFAULT_TEMPERATURE

class ToolName(str, Enum):
    GENERATE_IMAGE = "generate_image"
    ANALYZE_IMAGE = "analyze_image"

class GenerateImageArgs(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    prompt: str = Field(min_length=1, description="Text prompt (input in English)")
    images: List[str] = Field(
        default_factory=list, description="Array of reference image file paths (optional)"
    )
    temperature: float = Field(
        default=DEFAULT_TEMPERATURE, ge=0.0, le=1.0,
        description="Sampling temperature (0-1.0, default: 0.8)",
    )

class AnalyzeImageArgs(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    prompt: str = Field(
        min_length=1, description="Text prompt to ask questions about the image (input in English)"
    )
    images: List[str] = Field(description="Array of image file paths to analyze")
    temperature: float = Field(
        default=DEFAULT_TEMPERATURE, ge=0.0, le=1.0,
        description="Sampling temperature (0-1.0, default: 0.8)",
    )

ValidatedArgs = Union[GenerateImageArgs, AnalyzeImageArgs]

@dataclass(frozen=True)
class OperationSpec:
    name: ToolName
    description: str
    args_model: Type[BaseModel]
    input_schema: Dict[str, Any]

@dataclass(frozen=True)
class Ok:
    value: ValidatedArgs

@dataclass(frozen=True)
class Err:
    error: ValidationError

ParseResult = Union[Ok, Err]

def _spec(name: ToolName, description: str, args_model: Type[BaseModel]) -> OperationSpec:
    return OperationSpec(
        name=name,
        description=description,
        args_model=args_model,
        input_schema=args_model.model_json_schema(),
    )

OPERATIONS: Mapping[str, OperationSpec] = MappingProxyType({
    ToolName.GENERATE_IMAGE.value: _spec(
        ToolName.GENERATE_IMAGE,
        "Generate images from text prompts, or combine with reference images to create new images",
        GenerateImageArgs,
    ),
    ToolName.ANALYZE_IMAGE.value: _spec(
        ToolName.ANALYZE_IMAGE,
        "Analyze images and provide quality checks and improvement advice",
        AnalyzeImageArgs,
    ),
})

def list_operations() -> List[OperationSpec]:
    return list(OPERATIONS.values())

def get_operation(name: str) -> OperationSpec:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise UnknownOperation(name) from None

def _violations(error: PydanticValidationError) -> List[FieldViolation]:
    violations = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item["loc"]) or "arguments"
        violations.append(FieldViolation(field=field, message=item["msg"], kind=item["type"]))
    return violations

def validate(operation_name: str, raw_arguments: Optional[Dict[str, Any]]) -> ParseResult:
    """
    Parse raw tool arguments for `operation_name`.

    Raises UnknownOperation for unregistered names; every other problem is
    returned as Err so callers can branch on the result.
    """
    spec = get_operation(operation_name)
    try:
        return Ok(spec.args_model.model_validate(raw_arguments or {}))
    except PydanticValidationError as e:
        return Err(ValidationError(operation_name, _violations(e)))
