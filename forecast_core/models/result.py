from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..errors import ForecastError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a pipeline step: either a value or the error that stopped it."""

    value: Optional[T] = None
    error: Optional[ForecastError] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("Result needs exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ForecastError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the stored error if there is none."""
        if self.error is not None:
            raise self.error
        return self.value
