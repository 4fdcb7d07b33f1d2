"""
Penneo Python SDK - Request Authentication Module

WSSE UsernameToken signing and authentication header resolution for the
bearer-token, signed-request and session schemes.
"""

from .types import (
    HttpMethod,
    AuthScheme,
    WsseToken,
)

from .wsse import (
    compute_password_digest,
    create_wsse_token,
    format_wsse_header,
    generate_wsse_header,
)

from .auth_headers import (
    resolve_auth_headers,
    WSSE_HEADER,
    TOKEN_HEADER,
    SESSION_HEADER,
)

from .utils import (
    generate_nonce,
    generate_timestamp,
    format_created_timestamp,
)

# Public API exports
__all__ = [
    # Types
    'HttpMethod',
    'AuthScheme',
    'WsseToken',
    # WSSE
    'compute_password_digest',
    'create_wsse_token',
    'format_wsse_header',
    'generate_wsse_header',
    # Header resolution
    'resolve_auth_headers',
    'WSSE_HEADER',
    'TOKEN_HEADER',
    'SESSION_HEADER',
    # Utilities
    'generate_nonce',
    'generate_timestamp',
    'format_created_timestamp',
]
