"""Result type returned by every public client operation"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Tagged outcome of an operation that can fail.

    A successful result carries ``value``; a failed one carries ``error``,
    which is either an exception instance (client creation) or an error
    payload (API error body or system error mapping).

    Example:
        >>> result = get(client, "/sellers/me")
        >>> if result.success:
        ...     print(result.value)
        ... else:
        ...     print(result.error)
    """

    success: bool
    value: Optional[T] = None
    error: Optional[Any] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        """Create successful result"""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: Any) -> "Result[T]":
        """Create failed result"""
        return cls(success=False, error=error)

    @property
    def failed(self) -> bool:
        return not self.success

    def unwrap(self) -> T:
        """Return the value or raise if the result is a failure"""
        if not self.success:
            if isinstance(self.error, Exception):
                raise self.error
            raise ValueError(f"Called unwrap() on a failed result: {self.error!r}")
        return self.value  # type: ignore[return-value]
