"""Exception classes for Tiki SDK"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class TikiErrorCategory(str, Enum):
    """Tiki error category codes"""
    VALIDATION = "VAL"
    NETWORK = "NET"
    DECODE = "DECODE"
    CONFIG = "CONFIG"
    UNKNOWN = "UNKNOWN"


class TikiError(Exception):
    """
    Base exception for Tiki SDK errors

    All errors in the SDK extend from this class.
    Provides consistent error handling and categorization.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.cause = cause
        self.details = details
        self.timestamp = datetime.now(timezone.utc)
        self.category = self._determine_category(code)

    def _determine_category(self, code: Optional[str]) -> TikiErrorCategory:
        """Determine error category from code"""
        if not code:
            return TikiErrorCategory.UNKNOWN

        if code.startswith("VAL"):
            return TikiErrorCategory.VALIDATION
        if code.startswith("NET"):
            return TikiErrorCategory.NETWORK
        if code.startswith("DECODE"):
            return TikiErrorCategory.DECODE
        if code.startswith("CONFIG"):
            return TikiErrorCategory.CONFIG

        return TikiErrorCategory.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": str(self),
            "code": self.code,
            "status_code": self.status_code,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }

    def has_code(self, code: str) -> bool:
        """Check if error has a specific code"""
        return self.code == code

    def is_category(self, category: TikiErrorCategory) -> bool:
        """Check if error belongs to a category"""
        return self.category == category

    def get_description(self) -> str:
        """Get human-readable error description"""
        parts = [str(self)]

        if self.code:
            parts.insert(0, f"[{self.code}]")

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        return " ".join(parts)


class ValidationError(TikiError):
    """
    Validation error

    Carries the names of every field that failed validation.
    """

    def __init__(
        self,
        message: str,
        fields: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.fields = list(fields or [])

    @classmethod
    def from_pydantic(cls, error: Any, prefix: str) -> "ValidationError":
        """Create from a pydantic ValidationError, one field per failing location"""
        fields = [".".join(str(p) for p in err["loc"]) for err in error.errors()]
        return cls(
            f"{prefix}: {', '.join(fields)}",
            fields=fields,
            details={"errors": error.errors(include_url=False)},
        )


class NetworkError(TikiError):
    """
    Network error for HTTP transport layer failures
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        network_code: str = "NET10",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            message, code=network_code, status_code=status_code, cause=cause
        )
        self.network_code = network_code

    @classmethod
    def timeout(
        cls, message: str = "Request timed out", cause: Optional[Exception] = None
    ) -> "NetworkError":
        """Create a timeout error"""
        return cls(message, status_code=408, network_code="NET01", cause=cause)

    @classmethod
    def connection_refused(
        cls, message: str = "Connection refused", cause: Optional[Exception] = None
    ) -> "NetworkError":
        """Create a connection refused error"""
        return cls(message, network_code="NET02", cause=cause)


class DecodeError(TikiError):
    """Response body could not be decoded"""

    def __init__(
        self,
        message: str,
        code: str = "DECODE01",
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, cause=cause, details=details)


class ConfigError(TikiError):
    """Configuration error"""

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
