"""
Tiki Configuration Types and Schema
Type-safe settings objects for the Tiki SDK
"""

import importlib
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


# Base URL used when no endpoint override is given
DEFAULT_ENDPOINT = "https://open-api.tiktokglobalshop.com"

# Credential keys and whether they are required for signed requests
CREDENTIAL_FIELDS = {
    "client_id": True,
    "client_secret": True,
    "access_token": False,
    "shop_id": False,
}

# Environment variable mapping, dotted keys are nested under the credential
ENV_VAR_MAPPING = {
    "TIKI_PROXY": "proxy",
    "TIKI_TIMEOUT": "timeout",
    "TIKI_RESPONSE_HANDLER": "response_handler",
    "TIKI_CLIENT_ID": "credential.client_id",
    "TIKI_CLIENT_SECRET": "credential.client_secret",
    "TIKI_ACCESS_TOKEN": "credential.access_token",
    "TIKI_SHOP_ID": "credential.shop_id",
}


def _validate_http_url(name: str, v: Optional[str]) -> Optional[str]:
    if v is not None and v != "":
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"{name} must be a valid HTTP/HTTPS URL")
    return v or None


def import_handler(path: str) -> Callable[..., Any]:
    """
    Import a response handler from a ``"module:attr"`` or ``"module.attr"`` path

    Raises:
        ValueError: If the path cannot be imported or is not callable
    """
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ValueError(f"response_handler must be an import path, got {path!r}")

    try:
        module = importlib.import_module(module_name)
        handler = getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise ValueError(f"Cannot import response_handler {path!r}: {e}") from e

    if not callable(handler):
        raise ValueError(f"response_handler {path!r} is not callable")
    return handler


class TikiSettings(BaseModel):
    """
    Process-wide Tiki settings

    Loaded once at process start and passed to ``create_client``.
    Per-call ``ClientOptions`` take precedence over these values.
    """

    proxy: Optional[str] = Field(
        default=None,
        description="Forward proxy URL used for every request"
    )
    credential: Dict[str, Any] = Field(
        default_factory=dict,
        description="Default app/shop credential"
    )
    timeout: Optional[int] = Field(
        default=None,
        description="Request timeout in milliseconds",
        gt=0
    )
    response_handler: Optional[Callable[..., Any]] = Field(
        default=None,
        description="Custom handler turning a RequestOutcome into a Result"
    )
    middlewares: List[Any] = Field(
        default_factory=list,
        description="Custom middlewares appended after the built-in chain"
    )

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }

    @field_validator("proxy")
    @classmethod
    def validate_proxy(cls, v: Optional[str]) -> Optional[str]:
        """Validate proxy is a valid URL"""
        return _validate_http_url("proxy", v)

    @field_validator("response_handler", mode="before")
    @classmethod
    def resolve_response_handler(cls, v: Any) -> Any:
        """Allow the handler to be configured as an import path"""
        if isinstance(v, str):
            return import_handler(v)
        return v

    @field_validator("middlewares")
    @classmethod
    def validate_middlewares(cls, v: List[Any]) -> List[Any]:
        """Every custom middleware must be callable or expose ``call``"""
        for index, middleware in enumerate(v):
            if not (callable(middleware) or callable(getattr(middleware, "call", None))):
                raise ValueError(f"middlewares[{index}] is not a middleware")
        return v


class ClientOptions(BaseModel):
    """
    Per-call client options
    All fields are optional and override the process-wide settings
    """

    credential: Dict[str, Any] = Field(
        default_factory=dict,
        description="Partial credential override"
    )
    endpoint: Optional[str] = Field(
        default=None,
        description="Override default endpoint"
    )
    form_data: bool = Field(
        default=False,
        description="Send form-urlencoded bodies instead of JSON"
    )
    skip_signing: bool = Field(
        default=False,
        description="Skip credential validation and signing"
    )

    model_config = {
        "frozen": True,
    }

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: Optional[str]) -> Optional[str]:
        """Validate endpoint is a valid URL"""
        return _validate_http_url("endpoint", v)


class ClientConfig(BaseModel):
    """Fully resolved configuration a client is built from"""

    proxy: Optional[str] = None
    endpoint: str = DEFAULT_ENDPOINT
    timeout: Optional[int] = None
    form_data: bool = False
    skip_signing: bool = False
    credential: Dict[str, Any] = Field(default_factory=dict)
    middlewares: Tuple[Any, ...] = ()
    response_handler: Callable[..., Any]

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }
