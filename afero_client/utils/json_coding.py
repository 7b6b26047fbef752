"""
JSON coding helpers.

Decode raw JSON values returned by the HTTP layer into Pydantic models, and
encode models into request bodies. Every shape mismatch surfaces as
UnexpectedResultTypeError so callers can branch on a single error type.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import UnexpectedResultTypeError

T = TypeVar("T", bound=BaseModel)


def decode_model(model: Type[T], value: Any) -> T:
    """
    Decode a JSON value into model, rejecting missing values.

    Raises:
        UnexpectedResultTypeError: If value is None or does not validate
    """
    if value is None:
        raise UnexpectedResultTypeError("Unable to unwrap expected non-nil value.")
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise UnexpectedResultTypeError(
            f"Unexpected result for {model.__name__}: {value!r}", e
        ) from e


def decode_optional_model(model: Type[T], value: Any) -> Optional[T]:
    """Decode a JSON value into model, tolerating a missing value."""
    if value is None:
        return None
    return decode_model(model, value)


def decode_model_list(model: Type[T], value: Any) -> List[T]:
    """
    Decode a JSON array into a list of model instances.

    Raises:
        UnexpectedResultTypeError: If value is not a list or any element does not validate
    """
    if not isinstance(value, list):
        raise UnexpectedResultTypeError(
            f"Expected a list of {model.__name__}, got {type(value).__name__}."
        )
    return [decode_model(model, item) for item in value]


def decode_dict(value: Any) -> Dict[str, Any]:
    """Return value if it is a JSON object, otherwise raise UnexpectedResultTypeError."""
    if not isinstance(value, dict):
        raise UnexpectedResultTypeError("Unexpected Result.")
    return value


def decode_dict_list(value: Any) -> List[Dict[str, Any]]:
    """Return value if it is a JSON array of objects, otherwise raise UnexpectedResultTypeError."""
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise UnexpectedResultTypeError("Unable to unwrap expected non-nil value.")
    return value


def encode_model(model: BaseModel) -> Dict[str, Any]:
    """Serialize a model to a JSON-ready dict using wire (alias) names, dropping None fields."""
    return model.model_dump(by_alias=True, exclude_none=True, mode="json")
