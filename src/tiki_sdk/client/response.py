"""
Response processing
Turns the raw transport outcome into a Result
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional

from tiki_sdk.client.middleware import Env
from tiki_sdk.utils.result import Result


class ErrorKind(str, Enum):
    """Kinds of error payload produced by the built-in handler"""
    SYSTEM_ERROR = "system_error"


@dataclass(frozen=True)
class RequestOutcome:
    """
    Raw result of running a request through the chain

    ``success`` is True when a response was received and decoded; ``body``
    is then the decoded body. Otherwise ``error`` holds the exception raised
    by the transport or a middleware.
    """
    success: bool
    status: Optional[int] = None
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    error: Optional[Exception] = None
    env: Optional[Env] = None

    @classmethod
    def from_env(cls, env: Env) -> "RequestOutcome":
        return cls(
            success=True,
            status=env.status,
            headers=dict(env.headers),
            body=env.body,
            env=env,
        )

    @classmethod
    def failure(cls, error: Exception, env: Optional[Env] = None) -> "RequestOutcome":
        return cls(success=False, error=error, env=env)


ResponseHandler = Callable[[RequestOutcome], Any]


def system_error(outcome: RequestOutcome) -> Dict[str, Any]:
    return {"kind": ErrorKind.SYSTEM_ERROR.value, "raw": outcome}


def handle_response(outcome: RequestOutcome) -> Result[Any]:
    """
    Default response handler

    - A response whose body is a mapping with a truthy ``error`` field is
      an API error; the body is returned as the error payload.
    - Any other response with a status below 400 is a success; the body is
      returned as-is.
    - Everything else is a system error wrapping the raw outcome.
    """
    if outcome.success:
        body = outcome.body
        if isinstance(body, Mapping) and body.get("error"):
            return Result.fail(body)
        if outcome.status is None or outcome.status < 400:
            return Result.ok(body)

    return Result.fail(system_error(outcome))


def process(handler: Optional[ResponseHandler], outcome: RequestOutcome) -> Any:
    """Hand ``outcome`` to ``handler``, falling back to the built-in one"""
    return (handler or handle_response)(outcome)
