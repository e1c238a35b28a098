"""
Payload validation against the fixed request schemas.

Violations are reported as a list of detail entries, one per invalid field::

    {"message": '"description" is required',
     "path": ["description"],
     "type": "any.required",
     "context": {"key": "description", "label": "description"}}
"""

from typing import Any, Dict, List, Type, TypeVar

import pydantic
from pydantic import BaseModel

from .errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# pydantic error type -> (detail type, message template)
_ERROR_TYPES = {
    "missing": ("any.required", '"{label}" is required'),
    "string_type": ("string.base", '"{label}" must be a string'),
    "string_too_short": ("string.empty", '"{label}" is not allowed to be empty'),
    "extra_forbidden": ("object.unknown", '"{label}" is not allowed'),
    "model_type": ("object.base", '"{label}" must be of type object'),
}


def _to_detail(error: Dict[str, Any]) -> Dict[str, Any]:
    path = [str(part) for part in error["loc"]]
    label = ".".join(path) or "value"
    detail_type, template = _ERROR_TYPES.get(error["type"], ("any.invalid", '"{label}" is invalid'))
    context: Dict[str, Any] = {"label": label}
    if path:
        context["key"] = path[-1]
    return {
        "message": template.format(label=label),
        "path": path,
        "type": detail_type,
        "context": context,
    }


def validate_payload(schema: Type[SchemaT], payload: Any) -> SchemaT:
    """
    Validate ``payload`` against ``schema``.

    Returns:
        The validated model instance.

    Raises:
        ValidationError: With one detail entry per violated field.
    """
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as e:
        details: List[Dict[str, Any]] = []
        seen = set()
        for error in e.errors():
            loc = tuple(error["loc"])
            if loc in seen:
                continue
            seen.add(loc)
            details.append(_to_detail(error))
        raise ValidationError(details) from None


def schema_fields_only(schema: Type[BaseModel], payload: Any) -> Any:
    """Keep only the keys ``schema`` declares; non-mapping payloads are returned unchanged."""
    if not isinstance(payload, dict):
        return payload
    return {key: payload[key] for key in schema.model_fields if key in payload}
