"""
azconfig/models/validator.py

Coerces untyped decoded documents (plain dicts from TOML / YAML) into
pydantic-based types using TypeAdapter.
"""

from typing import Any, Type, TypeVar
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from azconfig.errors import DecodeError

T = TypeVar("T")


def validate_type(obj: Any, expected_type: Type[T]) -> T:
    """
    Validates that a given Python object conforms to the expected pydantic-based type.

    Args:
        obj (Any): The decoded object to validate.
        expected_type (Type[T]): The type (pydantic or otherwise) to validate against.

    Returns:
        T: The validated object, cast to the expected type.

    Raises:
        DecodeError: If the object cannot be coerced into the expected type.
    """
    try:
        adapter = TypeAdapter(expected_type)
        return adapter.validate_python(obj)
    except PydanticValidationError as e:
        name = getattr(expected_type, "__name__", repr(expected_type))
        raise DecodeError(f"cannot decode document into {name}: {e}") from e
