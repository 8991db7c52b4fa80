"""Implementations of JSON Pointer (RFC 6901) and JSON Patch (RFC 6902) over immutable documents."""

from .constants import APPEND_MARKER, VERSION
from .errors import BaseJsonRfcError, DataError, DataParsingError, DataSerializationError, ErrorKind, PatchError
from .patch import (
    AddOp,
    CopyOp,
    MoveOp,
    Op,
    RemoveOp,
    ReplaceOp,
    add,
    copy,
    evaluate,
    evaluate_with_ops,
    move,
    operation_from_dict,
    remove,
    replace,
)
from .pointer import Direct, OnContainer, fetch, parse, stringify, transform
from .predicates import is_array, is_array_append, is_array_index, is_object, is_object_key
from .utils.functional import Result

__version__ = VERSION

__all__ = [
    "APPEND_MARKER",
    "AddOp",
    "BaseJsonRfcError",
    "CopyOp",
    "DataError",
    "DataParsingError",
    "DataSerializationError",
    "Direct",
    "ErrorKind",
    "MoveOp",
    "OnContainer",
    "Op",
    "PatchError",
    "RemoveOp",
    "ReplaceOp",
    "Result",
    "add",
    "copy",
    "evaluate",
    "evaluate_with_ops",
    "fetch",
    "is_array",
    "is_array_append",
    "is_array_index",
    "is_object",
    "is_object_key",
    "move",
    "operation_from_dict",
    "parse",
    "remove",
    "replace",
    "stringify",
    "transform",
]
