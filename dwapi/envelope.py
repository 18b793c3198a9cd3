"""
Request/response envelope handling

Builds the `{auth, data: {command, params}}` request envelope, decodes the
`{data: {params, errorMessage}}` response envelope, and converts mappings
into the `[{key, value}, ...]` lists some commands expect.
"""

import json
from typing import Any, Dict, List, Mapping, Optional

from .errors import ApiError, ConfigurationError, TransportError
from .result import Exchange

# Commands the endpoint accepts without an auth block
NO_AUTH_COMMANDS = frozenset(("api.ping", "api.authenticate"))


def build_auth(command: str, application_token: str, session_id: str) -> Optional[Dict[str, str]]:
    """Build the auth block for a command

    Args:
        command: Command to be executed
        application_token: Application token of the caller
        session_id: Session ID returned by api.authenticate

    Returns:
        Dict: applicationToken/sessionId pair, or None for commands that need no auth

    Raises:
        ConfigurationError: A token required by the command is missing
    """
    if command in NO_AUTH_COMMANDS:
        return None

    if not application_token:
        raise ConfigurationError("No application token has been defined.")

    if not session_id:
        raise ConfigurationError("No session id has been defined.")

    return {"applicationToken": application_token, "sessionId": session_id}


def build_request(command: str, params: Mapping[str, Any], auth: Optional[Dict[str, str]]) -> Dict[str, Any]:
    """Assemble the request envelope for a command"""
    return {
        "auth": auth,
        "data": {
            "command": command,
            "params": dict(params),
        },
    }


def encode_request(envelope: Dict[str, Any]) -> str:
    """Serialize a request envelope to JSON, keeping key order"""
    return json.dumps(envelope)


def parse_response(body: Optional[str], exchange: Exchange) -> Any:
    """Decode a response body and unwrap data.params

    Args:
        body: Raw response body
        exchange: Exchange attached to any error raised

    Returns:
        The data.params value of the response ({} when absent)

    Raises:
        TransportError: Body is empty, not JSON, or has no data object
        ApiError: Endpoint reported an errorMessage
    """
    if not body or not body.strip():
        raise TransportError("Empty response body", exchange)

    try:
        response = json.loads(body)
    except ValueError as e:
        raise TransportError(f"Response is not valid JSON: {e}", exchange) from e

    data = response.get("data") if isinstance(response, dict) else None
    if not isinstance(data, dict):
        raise TransportError("Response has no data object", exchange)

    error_message = data.get("errorMessage")
    if error_message:
        raise ApiError(str(error_message), exchange)

    params = data.get("params")
    return {} if params is None else params


def to_key_value_list(values: Optional[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Convert a mapping into an ordered list of {key, value} pairs

    >>> to_key_value_list({"a": 1, "b": 2})
    [{'key': 'a', 'value': 1}, {'key': 'b', 'value': 2}]
    """
    if not values:
        return []
    return [{"key": key, "value": value} for key, value in values.items()]
