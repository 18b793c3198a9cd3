"""
Tests for envelope building and parsing
"""
import json
import pytest

from dwapi.envelope import (
    NO_AUTH_COMMANDS,
    build_auth,
    build_request,
    encode_request,
    parse_response,
    to_key_value_list
)
from dwapi.errors import ApiError, ConfigurationError, TransportError
from dwapi.result import Exchange

EXCHANGE = Exchange(command="gateway.list", sent="{}")


class TestBuildAuth:
    """Test auth block generation"""

    def test_no_auth_commands(self):
        """Test ping/authenticate need no auth"""
        assert NO_AUTH_COMMANDS == {"api.ping", "api.authenticate"}
        for command in NO_AUTH_COMMANDS:
            assert build_auth(command, "", "") is None
            assert build_auth(command, "app", "session") is None

    def test_auth_block(self):
        """Test tokens are placed in the auth block"""
        assert build_auth("gateway.list", "app", "session") == {
            "applicationToken": "app",
            "sessionId": "session",
        }

    def test_missing_application_token(self):
        with pytest.raises(ConfigurationError, match="application token"):
            build_auth("gateway.list", "", "session")

    def test_missing_session_id(self):
        with pytest.raises(ConfigurationError, match="session id"):
            build_auth("gateway.list", "app", "")


class TestRequest:
    """Test request envelope"""

    def test_encode_preserves_order(self):
        """Test serialized JSON keeps the envelope and param key order"""
        envelope = build_request("user.org.set", {"id": "o1", "extra": 2}, None)
        assert encode_request(envelope) == (
            '{"auth": null, "data": {"command": "user.org.set", '
            '"params": {"id": "o1", "extra": 2}}}'
        )

    def test_empty_params_serialize_as_object(self):
        """Test empty params are an object, not a list"""
        envelope = json.loads(encode_request(build_request("api.ping", {}, None)))
        assert envelope["data"]["params"] == {}


class TestParseResponse:
    """Test response unwrapping"""

    def test_params(self):
        body = '{"data": {"params": {"sessionId": "XYZ"}}}'
        assert parse_response(body, EXCHANGE) == {"sessionId": "XYZ"}

    def test_list_params_pass_through(self):
        body = '{"data": {"params": [{"id": 1}]}}'
        assert parse_response(body, EXCHANGE) == [{"id": 1}]

    def test_error_message(self):
        with pytest.raises(ApiError) as excinfo:
            parse_response('{"data": {"errorMessage": "bad token"}}', EXCHANGE)
        assert excinfo.value.message == "bad token"
        assert excinfo.value.exchange is EXCHANGE

    @pytest.mark.parametrize("body", [None, "", "\n", "not json", "null", '{"data": "x"}'])
    def test_unusable(self, body):
        with pytest.raises(TransportError) as excinfo:
            parse_response(body, EXCHANGE)
        assert excinfo.value.exchange is EXCHANGE


class TestKeyValueList:
    """Test mapping to key/value list conversion"""

    def test_order_preserved(self):
        assert to_key_value_list({"a": 1, "b": 2}) == [
            {"key": "a", "value": 1},
            {"key": "b", "value": 2},
        ]

    def test_empty(self):
        assert to_key_value_list({}) == []
        assert to_key_value_list(None) == []

    def test_nested_values_untouched(self):
        value = {"x": [1, 2]}
        assert to_key_value_list({"payload": value}) == [{"key": "payload", "value": value}]
