"""
Shared fixtures for unit tests
"""

import json
from dataclasses import replace
from typing import Any, Dict, List, Optional

import pytest

from tiki_sdk.client.middleware import Env


class FakeAdapter:
    """Transport double that records requests and replies with a canned response"""

    def __init__(
        self,
        status: int = 200,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.status = status
        self.body = body
        self.headers = headers
        self.error = error
        self.calls: List[Env] = []

    def __call__(self, env: Env) -> Env:
        self.calls.append(env)
        if self.error is not None:
            raise self.error

        if self.headers is not None:
            headers = self.headers
            body = self.body
        elif isinstance(self.body, (dict, list)):
            headers = {"Content-Type": "application/json; charset=utf-8"}
            body = json.dumps(self.body)
        else:
            headers = {"Content-Type": "text/plain"}
            body = self.body

        return replace(env, status=self.status, headers=headers, body=body)

    @property
    def last(self) -> Env:
        return self.calls[-1]


@pytest.fixture
def credential() -> dict:
    return {"client_id": "a", "client_secret": "b"}


@pytest.fixture
def fake_adapter() -> FakeAdapter:
    return FakeAdapter(body={"id": "S1"})


@pytest.fixture
def make_adapter():
    return FakeAdapter
