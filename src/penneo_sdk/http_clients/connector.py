"""
Asynchronous connector for the Penneo API

The connector owns a configuration and an ``httpx.AsyncClient``. Every verb
checks the configuration and builds its request synchronously, so
configuration, method and signing errors are raised at call time before
anything is sent. The returned awaitable dispatches the request exactly once
and resolves to a ``ResponseEnvelope``.
"""

import logging
from typing import Any, Awaitable, Mapping, Optional, Union

import httpx

from ..config import ConnectorConfig
from ..exceptions import ConfigurationError, TransportError
from ..signing.types import HttpMethod
from .request_builder import RequestDescriptor, build_request, build_file_request
from .response import ResponseEnvelope, normalize_response

logger = logging.getLogger(__name__)


class Connector:
    """
    Authenticated request layer for the Penneo API.
    
    No retries, no timeout of its own (httpx defaults apply) and no
    cancellation of in-flight requests.
    """
    
    def __init__(
        self,
        config: Optional[ConnectorConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the connector.
        
        Args:
            config: Configuration to use (a new, empty one if not provided)
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``
            client: Optional existing client; it is not closed by ``aclose``
        """
        self.config = config if config is not None else ConnectorConfig()
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(transport=transport)
    
    async def __aenter__(self) -> "Connector":
        return self
    
    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
    
    def init(self, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        """
        Merge connection options into the configuration.
        
        Args:
            options: Mapping with any of base_url, key, secret, token, session_auth
            **kwargs: The same options given as keyword arguments
            
        Raises:
            ValidationError: If the base URL is invalid
        """
        self.config.update(options, **kwargs)
        logger.info(
            f"Penneo connector initialized for: {self.config.base_url} "
            f"(auth scheme: {self.config.auth_scheme.value})"
        )
    
    def is_configured(self) -> bool:
        return self.config.is_configured()
    
    def _ensure_configured(self) -> None:
        if not self.config.is_configured():
            raise ConfigurationError()
    
    def build(
        self,
        method: Union[str, HttpMethod],
        resource: str,
        payload: Optional[Any] = None
    ) -> RequestDescriptor:
        """
        Build the request a call would send, without sending it.
        
        Raises:
            ConfigurationError: If the connector has not been initialized
            UnsupportedMethodError: For verbs outside the supported set
            SigningError: If the authentication header cannot be computed
        """
        self._ensure_configured()
        return build_request(method, resource, payload, self.config)
    
    async def _dispatch(self, descriptor: RequestDescriptor) -> ResponseEnvelope:
        method = descriptor.method.value
        logger.debug(f"Making {method} request to {descriptor.url}")
        
        try:
            response = await self._client.request(**descriptor.to_httpx_kwargs())
        except httpx.TransportError as e:
            raise TransportError(
                f"{method} {descriptor.url} failed: {e}",
                details={'method': method, 'url': descriptor.url}
            ) from e
        
        logger.debug(f"Received HTTP {response.status_code} for {method} {descriptor.url}")
        return normalize_response(response)
    
    def request(
        self,
        method: Union[str, HttpMethod],
        resource: str,
        payload: Optional[Any] = None
    ) -> Awaitable[ResponseEnvelope]:
        """
        Send a request to ``resource`` relative to the configured base URL.
        
        Args:
            method: HTTP verb
            resource: Resource path, e.g. ``casefiles`` or ``casefiles/1``
            payload: Query parameters for GET, JSON body for POST/PUT/PATCH
            
        Returns:
            Awaitable resolving to a ResponseEnvelope; awaiting it raises
            TransportError or MalformedResponseError on failure
            
        Raises:
            ConfigurationError: If the connector has not been initialized
            UnsupportedMethodError: For verbs outside the supported set
            SigningError: If the authentication header cannot be computed
        """
        return self._dispatch(self.build(method, resource, payload))
    
    def get(self, resource: str, params: Optional[Mapping[str, Any]] = None) -> Awaitable[ResponseEnvelope]:
        return self.request(HttpMethod.GET, resource, params)
    
    def post(self, resource: str, data: Optional[Any] = None) -> Awaitable[ResponseEnvelope]:
        return self.request(HttpMethod.POST, resource, data)
    
    def put(self, resource: str, data: Optional[Any] = None) -> Awaitable[ResponseEnvelope]:
        return self.request(HttpMethod.PUT, resource, data)
    
    def patch(self, resource: str, data: Optional[Any] = None) -> Awaitable[ResponseEnvelope]:
        return self.request(HttpMethod.PATCH, resource, data)
    
    def delete(self, resource: str) -> Awaitable[ResponseEnvelope]:
        return self.request(HttpMethod.DELETE, resource)
    
    def file(
        self,
        resource: str,
        fields: Mapping[str, Any],
        method: Union[str, HttpMethod] = 'post'
    ) -> Awaitable[ResponseEnvelope]:
        """
        Upload files as multipart form data.
        
        Args:
            resource: Resource path
            fields: Mapping of form field name to file object or
                (filename, content[, content_type]) tuple
            method: post, put or patch
            
        Returns:
            Awaitable resolving to a ResponseEnvelope
        """
        self._ensure_configured()
        descriptor = build_file_request(method, resource, fields, self.config)
        return self._dispatch(descriptor)
    
    async def aclose(self) -> None:
        """Close the underlying HTTP client if this connector created it."""
        if self._owns_client:
            await self._client.aclose()
            logger.debug("HTTP client closed")


def create_connector(
    base_url: str,
    key: Optional[str] = None,
    secret: Optional[str] = None,
    token: Optional[str] = None,
    session_auth: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> Connector:
    """
    Create and initialize a connector in one call.
    
    Args:
        base_url: Penneo API base URL
        key: API key for WSSE signing
        secret: API secret for WSSE signing
        token: Token for the X-Auth-Token scheme
        session_auth: Pre-formed Authorization header value
        transport: Optional httpx transport
        
    Returns:
        Connector: Initialized connector
    """
    connector = Connector(transport=transport)
    connector.init(
        base_url=base_url,
        key=key,
        secret=secret,
        token=token,
        session_auth=session_auth
    )
    return connector
