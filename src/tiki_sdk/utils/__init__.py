"""Utilities module initialization"""

from tiki_sdk.utils.helpers import (
    clean_none,
    generate_request_id,
    redact_sensitive_data,
)
from tiki_sdk.utils.result import Result

__all__ = ["Result", "clean_none", "generate_request_id", "redact_sensitive_data"]
