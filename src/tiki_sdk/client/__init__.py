"""
HTTP Client module for Tiki SDK
"""

from tiki_sdk.client.adapter import RequestsAdapter
from tiki_sdk.client.factory import (
    Client,
    build_middleware,
    create_client,
    resolve_client_config,
)
from tiki_sdk.client.http_client import (
    HttpMethod,
    RequestOptions,
    delete,
    get,
    post,
    put,
)
from tiki_sdk.client.middleware import (
    BaseUrl,
    Custom,
    DecodeJson,
    Env,
    FormUrlencoded,
    Json,
    Middleware,
    Opts,
    SaveRequestBody,
    Timeout,
)
from tiki_sdk.client.response import (
    ErrorKind,
    RequestOutcome,
    ResponseHandler,
    handle_response,
)

__all__ = [
    "Client",
    "create_client",
    "resolve_client_config",
    "build_middleware",
    "RequestsAdapter",
    "HttpMethod",
    "RequestOptions",
    "get",
    "post",
    "put",
    "delete",
    "Env",
    "Middleware",
    "BaseUrl",
    "Opts",
    "SaveRequestBody",
    "FormUrlencoded",
    "DecodeJson",
    "Json",
    "Timeout",
    "Custom",
    "ErrorKind",
    "RequestOutcome",
    "ResponseHandler",
    "handle_response",
]
