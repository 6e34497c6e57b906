"""Small helpers shared by the client and services"""

import time
import uuid
from typing import Any, Dict, Mapping

# Sensitive fields that should be redacted in logs
SENSITIVE_FIELDS = [
    "authorization",
    "client_secret",
    "access_token",
    "password",
]


def redact_sensitive_data(obj: Any) -> Any:
    """Redact sensitive data from object for logging"""
    if obj is None or isinstance(obj, (str, bytes)):
        return obj

    if isinstance(obj, (list, tuple)):
        return [redact_sensitive_data(item) for item in obj]

    if isinstance(obj, Mapping):
        redacted = {}
        for key, value in obj.items():
            lower_key = str(key).lower()
            is_sensitive = any(field in lower_key for field in SENSITIVE_FIELDS)

            if is_sensitive:
                redacted[key] = "[REDACTED]"
            elif isinstance(value, (Mapping, list, tuple)):
                redacted[key] = redact_sensitive_data(value)
            else:
                redacted[key] = value
        return redacted

    return obj


def clean_none(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Filter out None values from a mapping"""
    return {k: v for k, v in data.items() if v is not None}


def generate_request_id() -> str:
    """Generate unique request ID for traceability"""
    timestamp = hex(int(time.time() * 1000))[2:]
    unique_id = uuid.uuid4().hex[:8]
    return f"tiki-{timestamp}-{unique_id}"
