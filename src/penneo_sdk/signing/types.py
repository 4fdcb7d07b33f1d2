"""
Type definitions for request authentication

This module provides the enums and data classes shared by the WSSE token
generator and the authentication header resolver.
"""

from typing import Dict
from dataclasses import dataclass
from enum import Enum


class HttpMethod(str, Enum):
    """HTTP methods supported by the connector"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class AuthScheme(str, Enum):
    """Authentication schemes, listed in resolution priority order"""
    BEARER_TOKEN = "bearer_token"       # X-Auth-Token
    SIGNED_REQUEST = "signed_request"   # X-WSSE
    SESSION = "session"                 # Authorization
    UNAUTHENTICATED = "unauthenticated"


@dataclass(frozen=True)
class WsseToken:
    """
    A single WSSE UsernameToken
    
    Attributes:
        username: API key the token was issued for
        password_digest: Base64 SHA-1 digest of nonce + created + secret
        nonce: Raw nonce used in the digest
        created: ISO 8601 UTC creation timestamp
    """
    username: str
    password_digest: str
    nonce: str
    created: str


# Type aliases for convenience
HeaderDict = Dict[str, str]
