import json
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterable, List, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    errors: List[Dict[str, str]] = field(default_factory=list)


ValidationResult = Union[Valid, Invalid]


def format_errors(errors: Iterable[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts to ``{"field": "images.0.url", "message": ...}`` pairs."""
    formatted = []
    for error in errors:
        if error.get("type") == "json_invalid":
            # loc holds a character offset here, not a field
            loc = []
        else:
            loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        formatted.append({
            "field": ".".join(loc),
            "message": error.get("msg", "Invalid value"),
        })
    return formatted


def decode_body(raw: Union[bytes, str]) -> Union[Any, Invalid]:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return Invalid([{"field": "", "message": "Request body is not valid JSON"}])


def validate(schema: Type[T], payload: Any) -> ValidationResult:
    """
    Check a request body against ``schema``.

    ``payload`` is either the raw body (bytes or str, decoded here) or an
    already decoded JSON value. Never raises: the caller gets ``Valid``
    holding the parsed model, or ``Invalid`` holding every problem found.
    """
    if isinstance(payload, (bytes, str)):
        payload = decode_body(payload)
        if isinstance(payload, Invalid):
            return payload
    if not isinstance(payload, dict):
        return Invalid([{"field": "", "message": "Request body must be a JSON object"}])
    try:
        return Valid(schema.model_validate(payload))
    except PydanticValidationError as e:
        return Invalid(format_errors(e.errors()))
