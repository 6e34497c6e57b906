"""
Tiki Open API SDK for Python

Main entry point for the SDK
"""

from tiki_sdk.exceptions import (
    TikiError,
    TikiErrorCategory,
    ValidationError,
    NetworkError,
    DecodeError,
    ConfigError,
)

# HTTP Client
from tiki_sdk.client import (
    Client,
    create_client,
    get,
    post,
    put,
    delete,
    RequestOptions,
    RequestOutcome,
    RequestsAdapter,
    ErrorKind,
    handle_response,
    Env,
    Middleware,
)

# Configuration
from tiki_sdk.config import (
    TikiSettings,
    ClientOptions,
    ClientConfig,
    SettingsLoader,
    CredentialValidator,
    DEFAULT_ENDPOINT,
    ENV_VAR_MAPPING,
)

# Models
from tiki_sdk.models import (
    SellerWarehouseQuery,
    WarehouseStatus,
    WarehouseType,
)

from tiki_sdk.utils import Result

__version__ = "0.1.0"

__all__ = [
    # Client
    "Client",
    "create_client",
    "get",
    "post",
    "put",
    "delete",
    "RequestOptions",
    "RequestOutcome",
    "RequestsAdapter",
    "ErrorKind",
    "handle_response",
    "Env",
    "Middleware",
    "Result",
    # Exceptions
    "TikiError",
    "TikiErrorCategory",
    "ValidationError",
    "NetworkError",
    "DecodeError",
    "ConfigError",
    # Configuration
    "TikiSettings",
    "ClientOptions",
    "ClientConfig",
    "SettingsLoader",
    "CredentialValidator",
    "DEFAULT_ENDPOINT",
    "ENV_VAR_MAPPING",
    # Models
    "SellerWarehouseQuery",
    "WarehouseStatus",
    "WarehouseType",
]
