from enum import Enum, auto
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")

Succ = TypeVar("Succ")
Err = TypeVar("Err")


class _Status(Enum):
    OK = auto()
    ERROR = auto()


class _ResultSentinel:
    pass


_RESULT_SENTINEL = _ResultSentinel()


class Result(Generic[Succ, Err]):
    """
    Success or failure of a computation, returned instead of raising.

    Both variants carry exactly one value. Results compare structurally, so
    ``Result.ok(1) == Result.ok(1)`` holds.
    """

    @staticmethod
    def ok(succ: T) -> "Result[T, Any]":
        return Result(_Status.OK, succ=succ)

    @staticmethod
    def err(err: T) -> "Result[Any, T]":
        return Result(_Status.ERROR, err=err)

    def __init__(
        self,
        status: _Status,
        succ: Union[Succ, _ResultSentinel] = _RESULT_SENTINEL,
        err: Union[Err, _ResultSentinel] = _RESULT_SENTINEL,
    ) -> None:
        super().__init__()
        self._status: _Status = status
        self._succ: Union[_ResultSentinel, Succ] = succ
        self._err: Union[_ResultSentinel, Err] = err

    def unwrap(self) -> Succ:
        assert self._status is _Status.OK
        assert not isinstance(self._succ, _ResultSentinel)
        return self._succ

    def unwrap_err(self) -> Err:
        assert self._status is _Status.ERROR
        assert not isinstance(self._err, _ResultSentinel)
        return self._err

    def is_ok(self) -> bool:
        return self._status is _Status.OK

    def is_err(self) -> bool:
        return self._status is _Status.ERROR

    def then(self, func: "Callable[[Succ], Result[U, Any]]") -> "Result[U, Any]":
        """Chain another fallible step; an error is passed through untouched."""
        if self.is_err():
            return self  # type: ignore
        return func(self.unwrap())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._status is other._status and self._succ == other._succ and self._err == other._err

    def __repr__(self) -> str:
        if self.is_ok():
            return f"Result.ok({self._succ!r})"
        return f"Result.err({self._err!r})"
