"""
Request dispatch for the Tiki API
Runs GET/POST/PUT/DELETE through a client's chain and normalizes the outcome
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from tiki_sdk.client.factory import Client
from tiki_sdk.client.middleware import Env
from tiki_sdk.client.response import RequestOutcome, process
from tiki_sdk.utils.helpers import generate_request_id

logger = logging.getLogger(__name__)


class HttpMethod(str, Enum):
    """HTTP method types supported"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestOptions:
    """Per-request options"""
    query: Optional[Any] = None
    headers: Optional[Dict[str, str]] = None
    body: Optional[Any] = None  # only used by get/delete
    opts: Optional[Dict[str, Any]] = None


def _request(
    client: Client,
    method: HttpMethod,
    path: str,
    body: Optional[Any],
    options: Optional[RequestOptions],
) -> Any:
    options = options or RequestOptions()
    request_id = generate_request_id()

    env = Env(
        method=method.value,
        url=path,
        query=options.query if options.query is not None else {},
        headers=dict(options.headers or {}),
        body=body,
        opts={**(options.opts or {}), "api_name": path, "request_id": request_id},
    )

    start_time = time.time()
    try:
        outcome = RequestOutcome.from_env(client.execute(env))
    except Exception as e:
        logger.warning(f"[{path}] {method.value} failed ({request_id}): {e}")
        outcome = RequestOutcome.failure(e, env)
    else:
        duration = int((time.time() - start_time) * 1000)
        logger.info(
            f"[{path}] {method.value} {outcome.env.url if outcome.env else path} "
            f"-> {outcome.status} in {duration}ms ({request_id})"
        )

    return process(client.config.response_handler, outcome)


def get(client: Client, path: str, options: Optional[RequestOptions] = None) -> Any:
    """
    Perform GET request

        get(client, "/sellers/me")
        get(client, "/sellers/me/warehouses", RequestOptions(query={"page": 1}))

    Args:
        client: Client built by ``create_client``
        path: Request path (relative to the client endpoint)
        options: Optional request options

    Returns:
        Result produced by the client's response handler
    """
    body = options.body if options else None
    return _request(client, HttpMethod.GET, path, body, options)


def post(
    client: Client,
    path: str,
    body: Any,
    options: Optional[RequestOptions] = None,
) -> Any:
    """
    Perform POST request

        post(client, "/products", {"name": "Jon"})
        post(client, "/products", {"name": "Jon"}, RequestOptions(query={"dry_run": 1}))
    """
    return _request(client, HttpMethod.POST, path, body, options)


def put(
    client: Client,
    path: str,
    body: Any,
    options: Optional[RequestOptions] = None,
) -> Any:
    """Perform PUT request"""
    return _request(client, HttpMethod.PUT, path, body, options)


def delete(client: Client, path: str, options: Optional[RequestOptions] = None) -> Any:
    """
    Perform DELETE request

        delete(client, "/products/1")
        delete(client, "/products", RequestOptions(body={"ids": [1, 2]}))
    """
    body = options.body if options else None
    return _request(client, HttpMethod.DELETE, path, body, options)
