"""
Client construction

Resolves settings and per-call options into a ClientConfig, validates the
credential and assembles the middleware chain a Client runs requests
through.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from tiki_sdk.client.adapter import RequestsAdapter
from tiki_sdk.client.middleware import (
    Adapter,
    BaseUrl,
    DecodeJson,
    Env,
    FormUrlencoded,
    Json,
    Middleware,
    Opts,
    SaveRequestBody,
    Timeout,
    as_middleware,
    execute,
)
from tiki_sdk.client.response import handle_response
from tiki_sdk.config.credential_validator import validate_credential
from tiki_sdk.config.settings import (
    DEFAULT_ENDPOINT,
    ClientConfig,
    ClientOptions,
    TikiSettings,
)
from tiki_sdk.exceptions import ValidationError
from tiki_sdk.utils.helpers import clean_none
from tiki_sdk.utils.result import Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Client:
    """
    Immutable handle binding a middleware chain to a transport adapter

    Safe to share between threads and reuse for any number of requests.
    """
    config: ClientConfig
    credential: Optional[Dict[str, Any]]
    middlewares: Tuple[Middleware, ...]
    adapter: Adapter

    def execute(self, env: Env) -> Env:
        """Run ``env`` through the chain and the adapter"""
        return execute(self.middlewares, self.adapter, env)


def resolve_client_config(
    settings: TikiSettings, options: ClientOptions
) -> ClientConfig:
    """
    Merge process-wide settings with per-call options

    The credential is shallow-merged with per-call keys taking precedence.
    No validation happens here.
    """
    return ClientConfig(
        proxy=settings.proxy,
        endpoint=options.endpoint or DEFAULT_ENDPOINT,
        timeout=settings.timeout,
        form_data=options.form_data,
        skip_signing=options.skip_signing,
        credential={**settings.credential, **options.credential},
        middlewares=tuple(settings.middlewares),
        response_handler=settings.response_handler or handle_response,
    )


def build_middleware(
    config: ClientConfig, credential: Optional[Dict[str, Any]]
) -> Tuple[Middleware, ...]:
    """Assemble the chain for a resolved config and validated credential"""
    proxy_adapter = {"proxy": config.proxy} if config.proxy else None
    options = clean_none({"adapter": proxy_adapter, "credential": credential})

    # Request signing is not part of the chain; the credential is only
    # carried in opts.
    middlewares: List[Middleware] = [
        BaseUrl(config.endpoint),
        Opts(options),
        SaveRequestBody(),
    ]

    if config.form_data:
        middlewares += [FormUrlencoded(), DecodeJson()]
    else:
        middlewares += [Json()]

    if config.timeout:
        middlewares.insert(0, Timeout(config.timeout))

    middlewares += [as_middleware(m) for m in config.middlewares]
    return tuple(middlewares)


def create_client(
    options: Optional[Union[ClientOptions, Dict[str, Any]]] = None,
    settings: Optional[TikiSettings] = None,
    adapter: Optional[Adapter] = None,
) -> Result[Client]:
    """
    Create a new client

    Args:
        options: Per-call ClientOptions (or a dict of them)
        settings: Process-wide settings, empty defaults when omitted
        adapter: Transport adapter, RequestsAdapter by default

    Returns:
        ``Result.ok(Client)`` or ``Result.fail(ValidationError)`` when the
        credential is invalid

    Example:
        >>> result = create_client({"credential": {"client_id": "a", "client_secret": "b"}})
        >>> client = result.unwrap()
    """
    if options is None:
        options = ClientOptions()
    elif isinstance(options, dict):
        try:
            options = ClientOptions(**options)
        except PydanticValidationError as e:
            return Result.fail(ValidationError.from_pydantic(e, "Invalid client options"))
    settings = settings or TikiSettings()

    config = resolve_client_config(settings, options)

    validated = validate_credential(config.credential, config.skip_signing)
    if not validated.success:
        logger.warning(f"Client creation failed: {validated.error}")
        return Result.fail(validated.error)

    middlewares = build_middleware(config, validated.value)
    logger.debug(
        "Client created with chain: "
        + ", ".join(type(m).__name__ for m in middlewares)
    )

    return Result.ok(Client(
        config=config,
        credential=validated.value,
        middlewares=middlewares,
        adapter=adapter or RequestsAdapter(),
    ))
