"""
Utilities and Exceptions Unit Tests
"""

import re

import pytest

from tiki_sdk.exceptions import NetworkError, TikiError, TikiErrorCategory
from tiki_sdk.utils import Result, clean_none, generate_request_id, redact_sensitive_data


class TestResult:
    """Tests for Result"""

    def test_ok(self):
        result = Result.ok({"id": 1})
        assert result.success is True
        assert result.failed is False
        assert result.unwrap() == {"id": 1}

    def test_fail_with_exception_reraises(self):
        error = TikiError("boom")
        with pytest.raises(TikiError):
            Result.fail(error).unwrap()

    def test_fail_with_payload(self):
        result = Result.fail({"error": "bad"})
        assert result.failed is True
        with pytest.raises(ValueError):
            result.unwrap()


class TestHelpers:
    """Tests for helper functions"""

    def test_redact_nested(self):
        data = {
            "client_id": "a",
            "credential": {"client_secret": "s", "access_token": "t"},
            "items": [{"Authorization": "Bearer x"}],
        }
        assert redact_sensitive_data(data) == {
            "client_id": "a",
            "credential": {"client_secret": "[REDACTED]", "access_token": "[REDACTED]"},
            "items": [{"Authorization": "[REDACTED]"}],
        }

    def test_redact_leaves_scalars(self):
        assert redact_sensitive_data("text") == "text"
        assert redact_sensitive_data(None) is None

    def test_clean_none(self):
        assert clean_none({"a": 1, "b": None, "c": False}) == {"a": 1, "c": False}

    def test_request_id_format(self):
        assert re.fullmatch(r"tiki-[0-9a-f]+-[0-9a-f]{8}", generate_request_id())


class TestTikiError:
    """Tests for TikiError"""

    def test_category_from_code(self):
        assert NetworkError.timeout().category == TikiErrorCategory.NETWORK
        assert TikiError("x").category == TikiErrorCategory.UNKNOWN

    def test_description(self):
        error = NetworkError.timeout()
        assert error.get_description() == "[NET01] Request timed out (HTTP 408)"

    def test_to_dict(self):
        data = NetworkError.connection_refused().to_dict()
        assert data["name"] == "NetworkError"
        assert data["code"] == "NET02"
        assert data["category"] == "NET"
