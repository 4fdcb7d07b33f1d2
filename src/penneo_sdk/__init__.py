"""
Penneo Python SDK
Authenticated asynchronous client for the Penneo document signing API
"""

from .version import __version__
from .config import ConnectorConfig
from .exceptions import (
    PenneoSDKError,
    ConfigurationError,
    ValidationError,
    UnsupportedMethodError,
    SigningError,
    TransportError,
    MalformedResponseError,
)
from .signing import (
    HttpMethod,
    AuthScheme,
    resolve_auth_headers,
    generate_wsse_header,
)
from .http_clients import (
    Connector,
    create_connector,
    RequestDescriptor,
    ResponseEnvelope,
    build_request,
    build_file_request,
    normalize_response,
)
from .entities import CaseFiles


# Public API exports
__all__ = [
    '__version__',
    # Configuration
    'ConnectorConfig',
    # Exceptions
    'PenneoSDKError',
    'ConfigurationError',
    'ValidationError',
    'UnsupportedMethodError',
    'SigningError',
    'TransportError',
    'MalformedResponseError',
    # Authentication
    'HttpMethod',
    'AuthScheme',
    'resolve_auth_headers',
    'generate_wsse_header',
    # Connector
    'Connector',
    'create_connector',
    'RequestDescriptor',
    'ResponseEnvelope',
    'build_request',
    'build_file_request',
    'normalize_response',
    # Resources
    'CaseFiles',
]
