"""
Request/response middleware for the Tiki HTTP client

A chain is an ordered tuple of middlewares. The first element is the
outermost: it sees the request first and the response last. Each middleware
receives the current ``Env`` and a ``next_`` callable that runs the rest of
the chain (and finally the transport adapter), and returns the resulting
``Env``.
"""

import json
import logging
import time
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple
from urllib.parse import urlencode

import requests

from tiki_sdk.exceptions import DecodeError, NetworkError
from tiki_sdk.utils.helpers import redact_sensitive_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Env:
    """
    Request/response value flowing through the chain

    On the way out ``headers`` and ``body`` describe the request; once the
    adapter has run they hold the response headers and body, and ``status``
    is set.
    """
    method: str
    url: str
    query: Any = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    opts: Dict[str, Any] = field(default_factory=dict)
    status: Optional[int] = None
    timeout: Optional[float] = None  # seconds

    def get_header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup"""
        lower = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lower:
                return value
        return None

    def put_header(self, name: str, value: str) -> "Env":
        headers = {k: v for k, v in self.headers.items() if k.lower() != name.lower()}
        headers[name] = value
        return replace(self, headers=headers)


Next = Callable[[Env], Env]
Adapter = Callable[[Env], Env]


class Middleware:
    """Base class for chain steps"""

    def call(self, env: Env, next_: Next) -> Env:
        return next_(env)


@dataclass(frozen=True)
class BaseUrl(Middleware):
    """Rewrite relative paths against a base URL"""
    url: str

    def call(self, env: Env, next_: Next) -> Env:
        return next_(replace(env, url=self.join(env.url)))

    def join(self, path: str) -> str:
        if path.lower().startswith(("http://", "https://")):
            return path
        if not path:
            return self.url
        return f"{self.url.rstrip('/')}/{path.lstrip('/')}"


@dataclass(frozen=True)
class Opts(Middleware):
    """Carry client-level options (proxy adapter, credential) on every call"""
    options: Mapping[str, Any] = field(default_factory=dict)

    def call(self, env: Env, next_: Next) -> Env:
        return next_(replace(env, opts={**self.options, **env.opts}))


@dataclass(frozen=True)
class SaveRequestBody(Middleware):
    """Keep the raw request body in ``opts["raw_body"]`` before it is encoded"""

    def call(self, env: Env, next_: Next) -> Env:
        if env.body is not None:
            logger.debug(
                f"[{env.opts.get('api_name', env.url)}] raw request body: "
                f"{redact_sensitive_data(env.body)}"
            )
        return next_(replace(env, opts={**env.opts, "raw_body": env.body}))


def _decode_json(env: Env) -> Env:
    content_type = env.get_header("Content-Type") or ""
    if "json" not in content_type.lower():
        return env
    if not isinstance(env.body, (str, bytes)) or not env.body.strip():
        return env

    try:
        return replace(env, body=json.loads(env.body))
    except ValueError as e:
        raise DecodeError(
            f"Invalid JSON in response from {env.url}",
            cause=e,
            details={"status": env.status},
        ) from e


@dataclass(frozen=True)
class Json(Middleware):
    """Encode request bodies as JSON and decode JSON responses"""

    def call(self, env: Env, next_: Next) -> Env:
        if isinstance(env.body, (dict, list)):
            env = replace(env, body=json.dumps(env.body)).put_header(
                "Content-Type", "application/json"
            )
        return _decode_json(next_(env))


@dataclass(frozen=True)
class FormUrlencoded(Middleware):
    """Encode mapping request bodies as application/x-www-form-urlencoded"""

    def call(self, env: Env, next_: Next) -> Env:
        if isinstance(env.body, Mapping):
            env = replace(env, body=urlencode(env.body, doseq=True)).put_header(
                "Content-Type", "application/x-www-form-urlencoded"
            )
        return next_(env)


@dataclass(frozen=True)
class DecodeJson(Middleware):
    """Decode JSON responses"""

    def call(self, env: Env, next_: Next) -> Env:
        return _decode_json(next_(env))


@dataclass(frozen=True)
class Timeout(Middleware):
    """
    Bound the wrapped chain by ``timeout`` milliseconds

    The value is handed to the transport as its per-request timeout, and a
    call that still exceeds it once the inner chain returns is reported as a
    timeout.
    """
    timeout: int

    def call(self, env: Env, next_: Next) -> Env:
        seconds = self.timeout / 1000.0
        started = time.monotonic()

        try:
            result = next_(replace(env, timeout=seconds))
        except requests.exceptions.Timeout as e:
            raise NetworkError.timeout(cause=e) from e

        elapsed = time.monotonic() - started
        if elapsed > seconds:
            raise NetworkError.timeout(
                f"Request exceeded timeout of {self.timeout}ms "
                f"({int(elapsed * 1000)}ms)"
            )
        return result


@dataclass(frozen=True)
class Custom(Middleware):
    """Adapt a plain ``func(env, next_)`` callable into a chain step"""
    func: Callable[[Env, Next], Env]

    def call(self, env: Env, next_: Next) -> Env:
        return self.func(env, next_)


def as_middleware(obj: Any) -> Middleware:
    """Wrap user supplied middleware into the chain's uniform interface"""
    if isinstance(obj, Middleware):
        return obj
    call = getattr(obj, "call", None)
    if callable(call):
        return Custom(call)
    if callable(obj):
        return Custom(obj)
    raise TypeError(f"Not a middleware: {obj!r}")


def execute(middlewares: Sequence[Middleware], adapter: Adapter, env: Env) -> Env:
    """Run ``env`` through ``middlewares`` and finally ``adapter``"""
    chain: Tuple[Middleware, ...] = tuple(middlewares)

    def run(index: int, current: Env) -> Env:
        if index == len(chain):
            return adapter(current)
        return chain[index].call(current, lambda e: run(index + 1, e))

    return run(0, env)
