"""
Represent document transformations as a series of JSON Patch (RFC 6902) compatible operations.

Every operation is realised through `pointer.transform` with an update acting on the parent
container of the final segment, so the input document is never modified.

>>> doc = {"foo": [], "byebye": 5}
>>> ops = [
...     add("/bar", 3),
...     replace("/foo", {}),
...     remove("/byebye"),
...     move("/bar", "/foo/bar"),
...     copy("/foo", "/baz"),
... ]
>>> evaluate(doc, ops)
Result.ok({'foo': {'bar': 3}, 'baz': {'bar': 3}})
"""

from abc import ABC, abstractmethod  # pylint: disable=[no-name-in-module]
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Mapping, Sequence, Tuple, Type, Union

from .errors import ErrorKind
from .logging import get_logger
from .pointer import OnContainer, fetch, stringify, transform
from .predicates import is_array_append, is_array_index, is_object
from .types import Document, PointerOrPath, Segment, object_key
from .utils.functional import Result

logger = get_logger(__name__)


def _pointer_text(pointer: PointerOrPath) -> str:
    if isinstance(pointer, str):
        return pointer
    return stringify(pointer)


class Op(ABC):
    op: ClassVar[str]

    @abstractmethod
    def eval(self, document: Document) -> "Result[Document, Any]":
        """Apply the operation, returning a new document."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Return the RFC 6902 record of this operation."""


@dataclass(frozen=True)
class AddOp(Op):
    path: PointerOrPath
    value: Any

    op: ClassVar[str] = "add"

    def eval(self, document: Document) -> "Result[Document, Any]":
        value = self.value

        # inserting into an array shifts the following elements right, nothing is overwritten
        def _add(container: Document, segment: Segment) -> "Result[Document, ErrorKind]":
            if is_array_index(container, segment):
                return Result.ok(container[:segment] + [value] + container[segment:])
            if is_array_append(container, segment):
                return Result.ok(container + [value])
            if is_object(container):
                return Result.ok({**container, object_key(segment): value})
            return Result.err(ErrorKind.INVALID_TARGET)

        return transform(document, self.path, OnContainer(_add))

    def to_dict(self) -> Dict[str, Any]:
        return {"op": self.op, "path": _pointer_text(self.path), "value": self.value}


@dataclass(frozen=True)
class ReplaceOp(Op):
    path: PointerOrPath
    value: Any

    op: ClassVar[str] = "replace"

    def eval(self, document: Document) -> "Result[Document, Any]":
        value = self.value

        def _replace(container: Document, segment: Segment) -> "Result[Document, ErrorKind]":
            if is_array_index(container, segment):
                return Result.ok(container[:segment] + [value] + container[segment + 1 :])
            if is_object(container) and object_key(segment) in container:
                return Result.ok({**container, object_key(segment): value})
            return Result.err(ErrorKind.INVALID_TARGET)

        return transform(document, self.path, OnContainer(_replace))

    def to_dict(self) -> Dict[str, Any]:
        return {"op": self.op, "path": _pointer_text(self.path), "value": self.value}


@dataclass(frozen=True)
class RemoveOp(Op):
    path: PointerOrPath

    op: ClassVar[str] = "remove"

    def eval(self, document: Document) -> "Result[Document, Any]":
        def _remove(container: Document, segment: Segment) -> "Result[Document, ErrorKind]":
            if is_array_index(container, segment):
                return Result.ok(container[:segment] + container[segment + 1 :])
            if is_object(container) and object_key(segment) in container:
                key = object_key(segment)
                return Result.ok({k: v for k, v in container.items() if k != key})
            return Result.err(ErrorKind.INVALID_TARGET)

        return transform(document, self.path, OnContainer(_remove))

    def to_dict(self) -> Dict[str, Any]:
        return {"op": self.op, "path": _pointer_text(self.path)}


@dataclass(frozen=True)
class MoveOp(Op):
    source: PointerOrPath
    path: PointerOrPath

    op: ClassVar[str] = "move"

    def eval(self, document: Document) -> "Result[Document, Any]":
        # the target is resolved after the removal, so index shifts caused by it are observed
        return fetch(document, self.source).then(
            lambda value: evaluate(document, [RemoveOp(self.source), AddOp(self.path, value)])
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"op": self.op, "from": _pointer_text(self.source), "path": _pointer_text(self.path)}


@dataclass(frozen=True)
class CopyOp(Op):
    source: PointerOrPath
    path: PointerOrPath

    op: ClassVar[str] = "copy"

    def eval(self, document: Document) -> "Result[Document, Any]":
        # no deep copy needed, documents are never mutated so the subtree can be shared
        return fetch(document, self.source).then(lambda value: AddOp(self.path, value).eval(document))

    def to_dict(self) -> Dict[str, Any]:
        return {"op": self.op, "from": _pointer_text(self.source), "path": _pointer_text(self.path)}


def add(pointer: PointerOrPath, value: Any) -> AddOp:
    return AddOp(pointer, value)


def replace(pointer: PointerOrPath, value: Any) -> ReplaceOp:
    return ReplaceOp(pointer, value)


def remove(pointer: PointerOrPath) -> RemoveOp:
    return RemoveOp(pointer)


def move(source: PointerOrPath, path: PointerOrPath) -> MoveOp:
    return MoveOp(source, path)


def copy(source: PointerOrPath, path: PointerOrPath) -> CopyOp:
    return CopyOp(source, path)


_OPS: Dict[str, Type[Op]] = {cls.op: cls for cls in (AddOp, ReplaceOp, RemoveOp, MoveOp, CopyOp)}

# fields required by each operation, in the order of the constructor arguments
_OP_FIELDS: Dict[str, Tuple[str, ...]] = {
    "add": ("path", "value"),
    "replace": ("path", "value"),
    "remove": ("path",),
    "move": ("from", "path"),
    "copy": ("from", "path"),
}


def operation_from_dict(record: Any) -> "Result[Op, ErrorKind]":
    """Map an RFC 6902 operation record, e.g. ``{"op": "move", "from": "/a", "path": "/b"}``."""
    if isinstance(record, Op):
        return Result.ok(record)
    if not isinstance(record, Mapping):
        return Result.err(ErrorKind.INVALID_OPERATION)

    name = record.get("op")
    if name not in _OPS:
        logger.debug("unknown patch operation '%s'", name)
        return Result.err(ErrorKind.INVALID_OPERATION)

    fields = _OP_FIELDS[name]
    missing = [f for f in fields if f not in record]
    if missing:
        logger.debug("'%s' operation is missing %s", name, ", ".join(f"'{m}'" for m in missing))
        return Result.err(ErrorKind.INVALID_OPERATION)

    return Result.ok(_OPS[name](*(record[f] for f in fields)))


Operation = Union[Op, Mapping[str, Any]]


def _evaluate_one(document: Document, operation: Operation) -> "Result[Document, Any]":
    return operation_from_dict(operation).then(lambda op: op.eval(document))


def evaluate(document: Document, ops: Union[Operation, Sequence[Operation]]) -> "Result[Document, Any]":
    """
    Apply a single operation, or a list of operations one after another.

    A list is reduced left to right over the successive documents and stops on the first
    failure, which is returned as is. Intermediate documents are never exposed.
    """
    if not isinstance(ops, (list, tuple)):
        return _evaluate_one(document, ops)

    res: "Result[Document, Any]" = Result.ok(document)
    for i, op in enumerate(ops):
        res = _evaluate_one(res.unwrap(), op)
        if res.is_err():
            logger.debug("json patch stopped on step %d: %s", i, res.unwrap_err())
            return res
        logger.debug("json patch step %d applied", i)
    return res


def evaluate_with_ops(
    document: Document, ops: Union[Operation, List[Operation]]
) -> "Result[Tuple[Document, Union[Operation, List[Operation]]], Any]":
    """Like `evaluate`, pairing the resulting document with the operations that produced it."""
    return evaluate(document, ops).then(lambda result: Result.ok((result, ops)))
