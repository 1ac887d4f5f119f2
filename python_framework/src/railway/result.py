"""
Result — a value on either the success track or the failure track.

    load_topology ──Success──▶ synthesize ──Success──▶ render ──▶ Result[T]
          │                         │                    │
          └──────── Failure ────────┴────────────────────┴──────▶ Result[T]

Stages are chained with flat_map/map. The first failure short-circuits the
rest of the chain, so each stage only describes its own happy path.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from railway.failure import ErrorCode, FailureDescription

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


class Result(Generic[T]):
    """
    Base of Success and Failure.

        >>> Result.success(2).map(lambda x: x * 21).value()
        42
        >>> Result.failure(ErrorCode.NOT_FOUND, "missing").map(lambda x: x).is_failure()
        True
    """

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def value(self) -> T:
        """Return the success value. Raises ValueError on a Failure."""
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise ValueError(f"Cannot get value from a Failure: {err.message}")
        raise TypeError("unreachable")  # pragma: no cover

    def error(self) -> FailureDescription:
        """Return the failure description. Raises ValueError on a Success."""
        match self:
            case Failure(err):
                return err
            case Success(v):
                raise ValueError(f"Cannot get error from a Success: {v!r}")
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Transformations ────────────────────────

    def either(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[FailureDescription], R],
    ) -> R:
        """Collapse both tracks into a single value."""
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map(self, mapper: Callable[[T], U]) -> Result[U]:
        """Transform the success value; failures pass through untouched."""
        match self:
            case Success(v):
                return Success(mapper(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, mapper: Callable[[T], Result[U]]) -> Result[U]:
        """Chain a Result-returning stage; failures short-circuit."""
        match self:
            case Success(v):
                return mapper(v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def peek(self, action: Callable[[T], Any]) -> Result[T]:
        """Run a side effect (usually logging) on the success value."""
        match self:
            case Success(v):
                action(v)
        return self

    def peek_failure(self, action: Callable[[FailureDescription], Any]) -> Result[T]:
        match self:
            case Failure(err):
                action(err)
        return self

    # ──────────────────────── Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Result[T]:
        return Success(value)

    @staticmethod
    def failure(
        code: ErrorCode,
        message: str,
        exception: BaseException | None = None,
    ) -> Result[T]:
        return Failure(FailureDescription(code=code, message=message, exception=exception))

    @staticmethod
    def from_computation(
        computation: Callable[[], T],
        error_code: ErrorCode,
        error_message: str,
    ) -> Result[T]:
        """
        Run a computation that may raise and put its outcome on a track.

        This is the boundary between exception-raising library code and the
        railway: adapters wrap their work in it instead of writing try/except.
        """
        try:
            return Result.success(computation())
        except Exception as e:
            return Result.failure(error_code, error_message, e)

    def __bool__(self) -> bool:
        return self.is_success()


@dataclass(frozen=True, slots=True, eq=False)
class Success(Result[T]):
    """The success track."""

    _value: T

    def __post_init__(self) -> None:
        if self._value is None:
            raise TypeError("Success value must not be None")

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Success):
            return self._value == other._value
        if isinstance(other, Result):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Success", self._value))


@dataclass(frozen=True, slots=True, eq=False)
class Failure(Result[T]):
    """The failure track. Equality ignores the timestamp and exception."""

    _error: FailureDescription

    def __post_init__(self) -> None:
        if self._error is None:
            raise TypeError("Failure error must not be None")

    def __repr__(self) -> str:
        return f"Failure({self._error.code.value}: {self._error.message!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Failure):
            return self._error.code == other._error.code and self._error.message == other._error.message
        if isinstance(other, Result):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Failure", self._error.code, self._error.message))
