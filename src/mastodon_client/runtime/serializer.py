"""
JSON deserialization into entity models.

A single cached TypeAdapter per target type is shared by every request, so
parsing the same entity type repeatedly does not rebuild its validator.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Any, Callable, List, Optional, Type, TypeVar
import json

from pydantic import TypeAdapter, ValidationError

from .errors import ErrorKind, MastodonRequestException

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(entity: Any) -> TypeAdapter:
    return TypeAdapter(entity)


def _deserialization_error(entity: Any, error: Exception) -> MastodonRequestException:
    name = getattr(entity, "__name__", repr(entity))
    return MastodonRequestException(
        f"Failed to parse response as {name}",
        ErrorKind.DESERIALIZATION,
        cause=error,
    )


def parse_entity(text: str, entity: Type[T]) -> T:
    """
    Parse a JSON document into a single entity.

    Args:
        text: Raw JSON response body
        entity: Target entity type

    Returns:
        The validated entity

    Raises:
        MastodonRequestException: If the body is not valid JSON or does not match the entity
    """
    try:
        return _adapter(entity).validate_json(text)
    except (ValidationError, ValueError) as e:
        raise _deserialization_error(entity, e) from e


def parse_list(text: str, entity: Type[T],
               on_json: Optional[Callable[[str], None]] = None) -> List[T]:
    """
    Parse a JSON array into a list of entities.

    Args:
        text: Raw JSON response body
        entity: Element entity type
        on_json: Optional callback receiving the raw JSON of every element

    Returns:
        List of validated entities in server order

    Raises:
        MastodonRequestException: If the body is not a JSON array of the entity
    """
    try:
        elements = json.loads(text)
    except ValueError as e:
        raise _deserialization_error(entity, e) from e

    if not isinstance(elements, list):
        raise MastodonRequestException(
            f"Expected a JSON array of {entity.__name__}, got {type(elements).__name__}",
            ErrorKind.DESERIALIZATION,
        )

    adapter = _adapter(entity)
    result: List[T] = []
    for element in elements:
        if on_json is not None:
            on_json(json.dumps(element, ensure_ascii=False))
        try:
            result.append(adapter.validate_python(element))
        except ValidationError as e:
            raise _deserialization_error(entity, e) from e
    return result


__all__ = ["parse_entity", "parse_list"]
