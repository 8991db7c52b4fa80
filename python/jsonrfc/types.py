from enum import Enum, auto
from typing import Any, List, Tuple, Union

from typing_extensions import TypeAlias

Document: TypeAlias = Any

Segment: TypeAlias = Union[str, int]
Path: TypeAlias = Tuple[Segment, ...]

# what callers may pass wherever a location is expected: pointer text or a pre-parsed path
PointerOrPath: TypeAlias = Union[str, Path, List[Segment]]


class NodeKind(Enum):
    OBJECT = auto()
    SEQUENCE = auto()
    SCALAR = auto()


def node_kind(value: Document) -> NodeKind:
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, list):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def is_index(segment: Any) -> bool:
    # bool is a subclass of int, but True is not an array index
    return isinstance(segment, int) and not isinstance(segment, bool)


def object_key(segment: Segment) -> str:
    """
    Objects only ever have string keys, while the parser has no context to know whether
    a numeric token addresses an array or an object. Integers are turned back into text here.
    """
    if is_index(segment):
        return str(segment)
    return segment  # type: ignore[return-value]
