"""
Middleware Unit Tests
"""

import json
import logging
from dataclasses import replace
from urllib.parse import parse_qs

import pytest
import requests

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
    as_middleware,
    execute,
)
from tiki_sdk.exceptions import DecodeError, NetworkError


def echo(env: Env) -> Env:
    return replace(env, status=200)


@pytest.fixture
def env() -> Env:
    return Env(method="GET", url="/sellers/me", opts={"api_name": "/sellers/me"})


class TestBaseUrl:
    """Tests for BaseUrl"""

    @pytest.mark.parametrize("base,path,expected", [
        ("https://api.example.com", "/sellers/me", "https://api.example.com/sellers/me"),
        ("https://api.example.com/", "/sellers/me", "https://api.example.com/sellers/me"),
        ("https://api.example.com", "sellers/me", "https://api.example.com/sellers/me"),
        ("https://api.example.com/v2", "/sellers", "https://api.example.com/v2/sellers"),
        ("https://api.example.com", "", "https://api.example.com"),
    ])
    def test_join(self, base, path, expected):
        assert BaseUrl(base).join(path) == expected

    def test_absolute_url_untouched(self, env):
        """Should leave absolute URLs alone"""
        env = replace(env, url="http://other.example.com/x")
        result = BaseUrl("https://api.example.com").call(env, echo)
        assert result.url == "http://other.example.com/x"


class TestOpts:
    """Tests for Opts"""

    def test_merges_under_call_opts(self, env):
        """Per-call opts should win over client opts"""
        middleware = Opts({"credential": {"client_id": "a"}, "api_name": "client"})
        result = middleware.call(env, echo)
        assert result.opts["credential"] == {"client_id": "a"}
        assert result.opts["api_name"] == "/sellers/me"

    def test_does_not_mutate_input(self, env):
        Opts({"adapter": {"proxy": "http://p.local"}}).call(env, echo)
        assert "adapter" not in env.opts


class TestSaveRequestBody:
    """Tests for SaveRequestBody"""

    def test_stores_raw_body_before_encoding(self, env):
        """The stored body should be the one before Json encoding"""
        seen = []
        body = {"name": "Jon"}
        env = replace(env, method="POST", body=body)
        execute([SaveRequestBody(), Json()], lambda e: seen.append(e) or e, env)
        assert seen[0].opts["raw_body"] == body
        assert seen[0].body == json.dumps(body)

    def test_logs_redacted_body(self, env, caplog):
        env = replace(env, body={"client_secret": "s3cret", "name": "Jon"})
        with caplog.at_level(logging.DEBUG, logger="tiki_sdk.client.middleware"):
            SaveRequestBody().call(env, echo)
        assert "s3cret" not in caplog.text
        assert "[REDACTED]" in caplog.text


class TestJson:
    """Tests for Json"""

    def test_encodes_mapping_body(self, env):
        seen = []

        def adapter(e):
            seen.append(e)
            return replace(e, status=200, headers={}, body="")

        Json().call(replace(env, body={"a": 1}), adapter)

        assert seen[0].body == '{"a": 1}'
        assert seen[0].get_header("content-type") == "application/json"

    def test_leaves_string_body(self, env):
        seen = []
        Json().call(replace(env, body="raw"), lambda e: seen.append(e) or e)
        assert seen[0].body == "raw"
        assert seen[0].get_header("Content-Type") is None

    def test_decodes_json_response(self, env):
        def adapter(e):
            return replace(e, status=200, headers={"content-type": "application/json"},
                           body='{"id": 42}')

        result = Json().call(env, adapter)
        assert result.body == {"id": 42}

    def test_skips_non_json_response(self, env):
        def adapter(e):
            return replace(e, status=200, headers={"Content-Type": "text/html"},
                           body="<html></html>")

        assert Json().call(env, adapter).body == "<html></html>"

    def test_skips_empty_body(self, env):
        def adapter(e):
            return replace(e, status=204, headers={"Content-Type": "application/json"},
                           body="")

        assert Json().call(env, adapter).body == ""

    def test_invalid_json_raises(self, env):
        def adapter(e):
            return replace(e, status=200, headers={"Content-Type": "application/json"},
                           body="{broken")

        with pytest.raises(DecodeError):
            Json().call(env, adapter)


class TestFormUrlencoded:
    """Tests for FormUrlencoded and DecodeJson"""

    def test_encodes_mapping_body(self, env):
        seen = []
        body = {"name": "Jon", "tags": ["a", "b"]}
        FormUrlencoded().call(replace(env, body=body), lambda e: seen.append(e) or e)

        assert parse_qs(seen[0].body) == {"name": ["Jon"], "tags": ["a", "b"]}
        assert seen[0].get_header("Content-Type") == "application/x-www-form-urlencoded"

    def test_decode_json_only_touches_response(self, env):
        seen = []

        def adapter(e):
            seen.append(e)
            return replace(e, status=200, headers={"Content-Type": "application/json"},
                           body='{"ok": true}')

        result = DecodeJson().call(replace(env, body={"a": 1}), adapter)

        assert seen[0].body == {"a": 1}
        assert result.body == {"ok": True}


class TestTimeout:
    """Tests for Timeout"""

    def test_sets_transport_timeout(self, env):
        result = Timeout(2500).call(env, echo)
        assert result.timeout == 2.5

    def test_transport_timeout_becomes_network_error(self, env):
        def adapter(e):
            raise requests.exceptions.ReadTimeout("slow")

        with pytest.raises(NetworkError) as exc_info:
            Timeout(1000).call(env, adapter)

        assert exc_info.value.has_code("NET01")

    def test_overrun_is_reported(self, env, monkeypatch):
        """A chain finishing after the deadline is a timeout"""
        ticks = iter([100.0, 102.0])
        monkeypatch.setattr(
            "tiki_sdk.client.middleware.time.monotonic", lambda: next(ticks, 102.0)
        )

        with pytest.raises(NetworkError) as exc_info:
            Timeout(1000).call(env, echo)

        assert exc_info.value.status_code == 408


class TestChain:
    """Tests for chain execution and custom middleware"""

    def test_order(self, env):
        """First middleware is outermost in both directions"""
        trace = []

        def tracer(name):
            def step(e, next_):
                trace.append(f"{name}>")
                result = next_(e)
                trace.append(f"<{name}")
                return result
            return Custom(step)

        def adapter(e):
            trace.append("wire")
            return e

        execute([tracer("a"), tracer("b"), tracer("c")], adapter, env)

        assert trace == ["a>", "b>", "c>", "wire", "<c", "<b", "<a"]

    def test_empty_chain_calls_adapter(self, env):
        assert execute([], echo, env).status == 200

    def test_as_middleware(self):
        def fn(e, next_):
            return next_(e)

        class WithCall:
            def call(self, e, next_):
                return next_(e)

        instance = WithCall()
        base = Json()

        assert as_middleware(base) is base
        assert as_middleware(fn) == Custom(fn)
        assert as_middleware(instance) == Custom(instance.call)
        assert isinstance(as_middleware(fn), Middleware)

    def test_as_middleware_rejects_non_callable(self):
        with pytest.raises(TypeError):
            as_middleware(42)
