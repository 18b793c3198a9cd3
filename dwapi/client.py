"""
DeviceWISE public API client

Every operation is one synchronous POST of the envelope
`{"auth": ..., "data": {"command": ..., "params": ...}}` to the configured
endpoint. Commands other than api.ping and api.authenticate need both an
application token and a session ID.

A client instance is not thread-safe: `last_exchange` is overwritten by every
call. Use one client per thread, or read diagnostics from the CallResult /
error.exchange of the call itself.
"""

import logging
import time
from typing import Any, Mapping, Optional

from .config import ClientConfig, DEFAULT_TIMEOUT
from .credentials import OrganizationToken, UserCredentials
from .envelope import build_auth, build_request, encode_request, parse_response, to_key_value_list
from .errors import ApiError, ConfigurationError, TransportError
from .result import CallResult, Exchange
from .telemetry.metrics import increment_counter, record_latency
from .telemetry.tracer import create_span, inject_trace_headers
from .transport import RequestsTransport, TransportInterface

logger = logging.getLogger(__name__)


class DwApiClient:
    """Client for the DeviceWISE JSON API"""

    def __init__(self,
                 endpoint: str = "",
                 application_token: str = "",
                 organization_token: str = "",
                 session_id: str = "",
                 timeout: Optional[float] = DEFAULT_TIMEOUT,
                 transport: Optional[TransportInterface] = None):
        """Initialize the client

        Args:
            endpoint: API endpoint for POSTing (e.g. https://www.example.com/api)
            application_token: This application's token
            organization_token: Organization token used by authenticate()
            session_id: Session ID given by the portal
            timeout: Request timeout in seconds, None to wait forever
            transport: Transport to use instead of RequestsTransport
        """
        self.endpoint = endpoint or ""
        self.application_token = application_token or ""
        self.organization_token = organization_token or ""
        self.session_id = session_id or ""
        self.timeout = timeout
        self.transport = transport or RequestsTransport()
        self.last_exchange: Optional[Exchange] = None

    @classmethod
    def from_config(cls, config: ClientConfig,
                    transport: Optional[TransportInterface] = None) -> "DwApiClient":
        """Create a client from a ClientConfig"""
        return cls(
            endpoint=config.endpoint,
            application_token=config.application_token,
            organization_token=config.organization_token,
            session_id=config.session_id,
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def last_sent(self) -> Optional[str]:
        """Last JSON string sent to the endpoint"""
        return self.last_exchange.sent if self.last_exchange else None

    @property
    def last_received(self) -> Optional[str]:
        """Last body received from the endpoint"""
        return self.last_exchange.received if self.last_exchange else None

    def call(self, command: str, params: Optional[Mapping[str, Any]] = None) -> CallResult:
        """Send a command and return the full result of the call

        Args:
            command: Command to be run, e.g. "gateway.list"
            params: Command params

        Returns:
            CallResult: data.params of the response plus the raw exchange

        Raises:
            ConfigurationError: Endpoint or a required credential is missing
            TransportError: POST failed or the response was unusable
            ApiError: The endpoint returned an errorMessage
        """
        if not command:
            raise ValueError("Command must be a non-empty string")
        if params is None:
            params = {}

        with create_span(f"dwapi.{command}", {"dwapi.command": command}):
            try:
                auth = build_auth(command, self.application_token, self.session_id)
                if not self.endpoint:
                    raise ConfigurationError("No endpoint has been defined.")
            except ConfigurationError as e:
                logger.error(f"Cannot send {command}: {e}")
                increment_counter("dwapi.client.errors", 1, {"type": "configuration", "command": command})
                raise

            sent = encode_request(build_request(command, params, auth))
            exchange = Exchange(command=command, sent=sent)
            self.last_exchange = exchange

            logger.debug(f"Sending {command} to {self.endpoint}")
            increment_counter("dwapi.client.requests", 1, {"command": command})
            start_time = time.time()

            try:
                body = self.transport.post(
                    self.endpoint,
                    sent,
                    headers=inject_trace_headers(),
                    timeout=self.timeout,
                )
            except TransportError as e:
                if e.body is not None:
                    exchange = Exchange(command=command, sent=sent, received=e.body)
                    self.last_exchange = exchange
                e.exchange = exchange
                increment_counter("dwapi.client.errors", 1, {"type": "transport", "command": command})
                raise

            latency_ms = (time.time() - start_time) * 1000
            record_latency("dwapi.client.latency", latency_ms, {"command": command})
            logger.debug(f"Received response for {command}, latency: {latency_ms:.2f}ms")

            exchange = Exchange(command=command, sent=sent, received=body)
            self.last_exchange = exchange

            try:
                result = parse_response(body, exchange)
            except TransportError as e:
                logger.error(f"Unusable response to {command}: {e}")
                increment_counter("dwapi.client.errors", 1, {"type": "malformed_response", "command": command})
                raise
            except ApiError as e:
                logger.error(f"API error for {command}: {e}")
                increment_counter("dwapi.client.errors", 1, {"type": "api_error", "command": command})
                raise

            increment_counter("dwapi.client.success", 1, {"command": command})
            return CallResult(command=command, params=result, exchange=exchange)

    def send(self, command: str, params: Optional[Mapping[str, Any]] = None, want_result: bool = True) -> Any:
        """Send a command

        Args:
            command: Command to be run
            params: Command params
            want_result: Return data.params when true, otherwise just True

        Returns:
            data.params of the response, or True
        """
        result = self.call(command, params)
        if want_result:
            return result.params
        return True

    def ping(self) -> bool:
        """Do an API-level ping"""
        return self.send("api.ping", {}, want_result=False)

    def authenticate(self,
                     application_token: Optional[str] = None,
                     organization_token: Optional[str] = None,
                     user: Optional[UserCredentials] = None) -> str:
        """Authenticate the application/organization and return the session ID

        Arguments left out fall back to the values the client was created
        with. User credentials, when given, take precedence over any
        organization token.

        Args:
            application_token: Application token to authenticate with
            organization_token: Organization token to authenticate with
            user: Portal username/password to authenticate with

        Returns:
            str: Session ID for subsequent calls

        Raises:
            ConfigurationError: No application token, or neither an organization
                token nor user credentials
        """
        application_token = application_token or self.application_token
        if user is not None and not user.is_empty():
            credential = user
        else:
            credential = OrganizationToken(organization_token or self.organization_token)

        if not application_token:
            raise ConfigurationError("No application token has been given.")

        if credential.is_empty():
            raise ConfigurationError("No organization token, username or password have been given.")

        params = {"applicationToken": application_token}
        params.update(credential.to_params())

        result = self.call("api.authenticate", params)
        session_id = result.params.get("sessionId") if isinstance(result.params, dict) else None
        if not session_id:
            raise ApiError("Authentication response did not include a sessionId", result.exchange)
        return session_id

    def login(self,
              application_token: Optional[str] = None,
              organization_token: Optional[str] = None,
              user: Optional[UserCredentials] = None) -> str:
        """Authenticate and keep the session ID for later calls"""
        session_id = self.authenticate(application_token, organization_token, user)
        if application_token:
            self.application_token = application_token
        self.session_id = session_id
        logger.info("Authenticated, session established")
        return session_id

    def list_organizations(self) -> Any:
        """Return all organizations available to the user"""
        return self.send("user.org.list", {})

    def set_organization(self, org_id: str) -> Any:
        """Set the currently active organization for the user"""
        return self.send("user.org.set", {"id": org_id})

    def list_gateways(self) -> Any:
        """Return all gateways"""
        return self.send("gateway.list", {})

    def gateway_details(self, cloudlink_id: str) -> Any:
        """Return details for the gateway with the given CloudLINK ID"""
        return self.send("gateway.details", {"cloudlinkId": cloudlink_id})

    def list_attributes(self, cloudlink_id: str, type: str = "both") -> Any:
        """Return the attributes of a gateway

        Args:
            cloudlink_id: CloudLINK ID of the gateway
            type: Attribute kind, e.g. "user", "system" or "both"
        """
        return self.send("gateway.attribute.list", {"cloudlinkId": cloudlink_id, "type": type})

    def list_userops(self, cloudlink_id: str) -> Any:
        """Return all user operations on a gateway"""
        return self.send("gateway.userop.list", {"cloudlinkId": cloudlink_id})

    def exec_userop(self, cloudlink_id: str, operation: str,
                    inputs: Optional[Mapping[str, Any]] = None) -> bool:
        """Execute a user operation

        Args:
            cloudlink_id: CloudLINK ID to execute the operation on
            operation: Name of the operation
            inputs: Operation inputs (arguments) as a mapping

        Returns:
            bool: True once the endpoint accepted the request
        """
        params = {
            "cloudlinkId": cloudlink_id,
            "operation": operation,
            "inputs": to_key_value_list(inputs),
        }
        return self.send("gateway.userop.exec", params, want_result=False)

    def list_remote_triggers(self, cloudlink_id: str) -> Any:
        """Return all remote triggers on a gateway"""
        return self.send("gateway.remtrigger.list", {"cloudlinkId": cloudlink_id})

    def exec_remote_trigger(self, cloudlink_id: str, identifier: str,
                            variables: Optional[Mapping[str, Any]] = None) -> Any:
        """Execute a remote trigger

        Args:
            cloudlink_id: CloudLINK ID to execute the remote trigger on
            identifier: Identifier of the remote trigger
            variables: Notification variables as a mapping
        """
        params = {
            "cloudlinkId": cloudlink_id,
            "identifier": identifier,
            "notificationItems": to_key_value_list(variables),
        }
        return self.send("gateway.remtrigger.exec", params)
