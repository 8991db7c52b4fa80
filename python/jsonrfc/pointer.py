"""
Implements JSON pointer resolution based on RFC 6901: https://www.rfc-editor.org/rfc/rfc6901.

Besides read-only lookup, pointers drive persistent updates: `transform` rebuilds only the
containers on the way from the root to the target and shares every other subtree with the
original document, which is never mutated.
"""

import inspect
import re
from typing import Any, Callable, List, Optional, Union

from .constants import POINTER_SEPARATOR
from .errors import ErrorKind
from .predicates import is_array_index
from .types import Document, NodeKind, Path, PointerOrPath, Segment, is_index, node_kind, object_key
from .utils.functional import Result

_INTEGER_TOKEN = re.compile(r"0|[1-9][0-9]*")


def _decode_token(token: str) -> str:
    """Resolve escaped characters " and \\, then ~ and /."""
    # the order of the replace statements is important, do not change without
    # consulting the RFC
    return token.replace('\\"', '"').replace("\\\\", "\\").replace("~1", "/").replace("~0", "~")


def _encode_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _classify_token(token: str) -> Segment:
    # canonical JSON numbers have no leading zeros, so "03" can only be an object key
    if _INTEGER_TOKEN.fullmatch(token):
        return int(token)
    return token


def parse(pointer: Any) -> "Result[Path, ErrorKind]":
    """
    Parse pointer text into a path.

    >>> parse("/foo/bar/4/baz")
    Result.ok(('foo', 'bar', 4, 'baz'))
    >>> parse("whatever")
    Result.err(<ErrorKind.INVALID_POINTER: 'invalid_pointer'>)
    """
    if not isinstance(pointer, str):
        return Result.err(ErrorKind.INVALID_POINTER)

    # pointer to the root
    if pointer == "":
        return Result.ok(())

    if not pointer.startswith(POINTER_SEPARATOR):
        return Result.err(ErrorKind.INVALID_POINTER)

    tokens = pointer[1:].split(POINTER_SEPARATOR)
    return Result.ok(tuple(_classify_token(_decode_token(tok)) for tok in tokens))


def stringify(path: Union[Path, List[Segment]]) -> str:
    return "".join(POINTER_SEPARATOR + _encode_token(str(segment)) for segment in path)


def to_path(pointer: PointerOrPath) -> "Result[Path, ErrorKind]":
    """Accept either pointer text or an already parsed path."""
    if isinstance(pointer, (list, tuple)):
        if all(isinstance(segment, str) or is_index(segment) for segment in pointer):
            return Result.ok(tuple(pointer))
        return Result.err(ErrorKind.INVALID_POINTER)
    return parse(pointer)


def fetch(document: Document, pointer: PointerOrPath) -> "Result[Document, ErrorKind]":
    """
    Evaluate the pointer in the context of the document.

    >>> fetch({"foo": [{"bar": "baz"}]}, "/foo/0/bar")
    Result.ok('baz')
    """
    return to_path(pointer).then(lambda path: _fetch(document, path))


def _fetch(document: Document, path: Path) -> "Result[Document, ErrorKind]":
    current = document
    for segment in path:
        kind = node_kind(current)

        if kind is NodeKind.OBJECT:
            key = object_key(segment)
            if key not in current:
                return Result.err(ErrorKind.INVALID_PATH)
            current = current[key]

        elif kind is NodeKind.SEQUENCE:
            # the append marker never holds a value
            if not is_array_index(current, segment):
                return Result.err(ErrorKind.INVALID_PATH)
            current = current[segment]

        else:
            return Result.err(ErrorKind.INVALID_PATH)

    return Result.ok(current)


class Direct:
    """Update receiving the value found at the end of the path; the return value takes its place."""

    def __init__(self, func: Callable[[Document], Any]) -> None:
        self.func = func

    def __call__(self, value: Document) -> Any:
        return self.func(value)


class OnContainer:
    """
    Update receiving the container holding the final segment, and the segment itself.

    The return value replaces the whole container, which allows inserting and deleting
    keys or indices instead of only overwriting the addressed value.
    """

    def __init__(self, func: Callable[[Document, Segment], Any]) -> None:
        self.func = func

    def __call__(self, container: Document, segment: Segment) -> Any:
        return self.func(container, segment)


Update = Union[Direct, OnContainer, Callable[..., Any]]


def _positional_arity(func: Callable[..., Any]) -> Optional[int]:
    """Return None when the signature is unknown (builtins such as str) or takes *args."""
    try:
        params = list(inspect.signature(func).parameters.values())
    except (ValueError, TypeError):
        return None
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return None
    positional = [
        p for p in params if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    ]
    required = len([p for p in positional if p.default is inspect.Parameter.empty])
    # e.g. str(object="") still accepts the value as its first argument
    if required == 0 and positional:
        return 1
    return required


def as_update(update: Update) -> Union[Direct, OnContainer]:
    if isinstance(update, (Direct, OnContainer)):
        return update

    arity = _positional_arity(update)
    # a callable we cannot introspect can only be applied safely to the value itself
    if arity is None or arity == 1:
        return Direct(update)
    if arity == 2:
        return OnContainer(update)
    raise TypeError(f"update callback must take one or two positional arguments, '{update}' takes {arity}")


def _outcome(value: Any) -> "Result[Any, Any]":
    if isinstance(value, Result):
        return value
    return Result.ok(value)


def transform(document: Document, pointer: PointerOrPath, update: Update) -> "Result[Document, Any]":
    """
    Transform the document by transforming the value at the pointer.

    >>> transform({"foo": {"bar": [15]}}, "/foo/bar/0", lambda v: v * 100)
    Result.ok({'foo': {'bar': [1500]}})
    >>> transform({"foo": {"bar": 3}}, "/foo/bar", lambda c, k: {n: v for n, v in c.items() if n != k})
    Result.ok({'foo': {}})
    """
    upd = as_update(update)
    return to_path(pointer).then(lambda path: _transform(document, path, upd))


def _transform(node: Document, path: Path, update: Union[Direct, OnContainer]) -> "Result[Document, Any]":
    if not path and isinstance(update, Direct):
        return _outcome(update(node))

    # here the node plays the role of the parent container of the last segment
    if len(path) == 1 and isinstance(update, OnContainer):
        return _outcome(update(node, path[0]))

    if not path:
        return Result.err(ErrorKind.INVALID_PATH)

    head, rest = path[0], path[1:]
    kind = node_kind(node)

    if kind is NodeKind.OBJECT:
        key = object_key(head)
        if key not in node:
            return Result.err(ErrorKind.INVALID_PATH)
        res = _transform(node[key], rest, update)
        if res.is_err():
            return res
        return Result.ok({**node, key: res.unwrap()})

    if kind is NodeKind.SEQUENCE:
        if not is_array_index(node, head):
            return Result.err(ErrorKind.INVALID_PATH)
        res = _transform(node[head], rest, update)
        if res.is_err():
            return res
        rebuilt = list(node)
        rebuilt[head] = res.unwrap()
        return Result.ok(rebuilt)

    return Result.err(ErrorKind.INVALID_PATH)
