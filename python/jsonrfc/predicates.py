"""Predicates classifying a container together with the segment addressing into it."""

from typing import Any

from .constants import APPEND_MARKER
from .types import is_index


def is_object(value: Any) -> bool:
    return isinstance(value, dict)


def is_object_key(obj: Any, key: Any) -> bool:
    return isinstance(obj, dict) and isinstance(key, str) and key in obj


def is_array_index(array: Any, index: Any) -> bool:
    return isinstance(array, list) and is_index(index) and 0 <= index < len(array)


def is_array_append(array: Any, index: Any) -> bool:
    return isinstance(array, list) and isinstance(index, str) and index == APPEND_MARKER


def is_array(array: Any, index: Any) -> bool:
    return is_array_index(array, index) or is_array_append(array, index)
