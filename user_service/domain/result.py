from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import Error

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Success carrying a value, or failure carrying an Error. Never both."""

    _value: T | None = None
    _error: Error | None = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(_value=value)

    @classmethod
    def failure(cls, error: Error) -> "Result[T]":
        if error is None:
            raise ValueError("failure requires an error")
        return cls(_error=error)

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        if self._error is not None:
            raise ValueError(f"failed result has no value ({self._error.code})")
        return self._value

    @property
    def error(self) -> Error:
        if self._error is None:
            raise ValueError("successful result has no error")
        return self._error
