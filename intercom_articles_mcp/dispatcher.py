"""Turns a tool name and argument bag into a uniform ``ToolResult``."""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import ToolError, ValidationError
from .tools import ToolSpec, get_tool

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolResult:
    """Either the upstream payload as pretty JSON, or an error message."""

    text: str
    is_error: bool = False

    @classmethod
    def success(cls, payload: Any) -> "ToolResult":
        return cls(text=json.dumps(payload, indent=2, ensure_ascii=False))

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(text=f"Error: {message}", is_error=True)


def _format_validation_error(e: PydanticValidationError) -> str:
    parts = []
    for error in e.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()))
        msg = error.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def is_blank(value: Any) -> bool:
    """True for null, false, "" and zero. Empty objects and lists are values."""
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or value != value
    return False


def parse_arguments(spec: ToolSpec, arguments: Dict[str, Any]) -> BaseModel:
    """Check required arguments against the tool's schema and validate the rest.

    Raises:
        ValidationError: A required argument is missing or empty, or an
            argument has the wrong type or value.
    """
    if spec.skip_falsy:
        # Unknown keys are kept so extra="forbid" still rejects them.
        fields = spec.input_model.model_fields
        arguments = {
            key: value
            for key, value in arguments.items()
            if key not in fields or not is_blank(value)
        }

    missing = [name for name in spec.required if is_blank(arguments.get(name))]
    if missing:
        raise ValidationError(f"Missing required argument(s): {', '.join(missing)}")

    try:
        return spec.input_model.model_validate(arguments)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid arguments for {spec.name}: {_format_validation_error(e)}"
        ) from e


async def invoke(tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
    """Run one tool call. Never raises; failures come back as error results."""
    logger.info("tool_call name=%s", tool_name)
    try:
        spec = get_tool(tool_name)
        params = parse_arguments(spec, dict(arguments or {}))
        result = await spec.handler(params)
    except ToolError as e:
        logger.warning("tool_failed name=%s error=%s", tool_name, e)
        return ToolResult.failure(str(e))
    except Exception as e:
        logger.exception("tool_crashed name=%s", tool_name)
        return ToolResult.failure(f"{type(e).__name__}: {e}")
    return ToolResult.success(result)
