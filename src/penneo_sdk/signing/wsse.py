"""
WSSE UsernameToken generation

Implements the signed-request scheme used by the Penneo API: the secret never
leaves the client, only a SHA-1 digest of ``nonce + created + secret``.
"""

import hashlib
import base64
from typing import Optional

from ..exceptions import SigningError
from .types import WsseToken
from .utils import generate_nonce, format_created_timestamp, b64encode_text


def compute_password_digest(nonce: str, created: str, password: str) -> str:
    """
    Compute the WSSE PasswordDigest.
    
    Args:
        nonce: Raw nonce
        created: Creation timestamp as it appears in the header
        password: API secret
        
    Returns:
        str: Base64 encoded SHA-1 digest
    """
    digest = hashlib.sha1((nonce + created + password).encode('utf-8')).digest()
    return base64.b64encode(digest).decode('ascii')


def create_wsse_token(
    username: str,
    password: str,
    nonce: Optional[str] = None,
    created: Optional[str] = None
) -> WsseToken:
    """
    Create a WSSE UsernameToken.
    
    Args:
        username: API key
        password: API secret
        nonce: Custom nonce (random if not provided)
        created: Custom creation timestamp (now if not provided)
        
    Returns:
        WsseToken: The generated token
        
    Raises:
        SigningError: If the credentials are missing or not strings
    """
    if not username or not password:
        raise SigningError(
            "WSSE signing requires both an API key and an API secret",
            details={'has_key': bool(username), 'has_secret': bool(password)}
        )
    
    if not isinstance(username, str) or not isinstance(password, str):
        raise SigningError(
            "API key and secret must be strings",
            details={'key_type': type(username).__name__, 'secret_type': type(password).__name__}
        )
    
    nonce = nonce or generate_nonce()
    created = created or format_created_timestamp()
    
    try:
        password_digest = compute_password_digest(nonce, created, password)
    except UnicodeEncodeError as e:
        raise SigningError(f"Failed to compute password digest: {e}") from e
    
    return WsseToken(
        username=username,
        password_digest=password_digest,
        nonce=nonce,
        created=created
    )


def format_wsse_header(token: WsseToken, nonce_base64: bool = True) -> str:
    """
    Render a token as the value of the X-WSSE header.
    
    Args:
        token: Token to render
        nonce_base64: Base64 encode the nonce, as the Penneo API expects
        
    Returns:
        str: Header value
    """
    nonce = b64encode_text(token.nonce) if nonce_base64 else token.nonce
    return (
        f'UsernameToken Username="{token.username}", '
        f'PasswordDigest="{token.password_digest}", '
        f'Nonce="{nonce}", '
        f'Created="{token.created}"'
    )


def generate_wsse_header(username: str, password: str) -> str:
    """Create a fresh token and render it as an X-WSSE header value."""
    return format_wsse_header(create_wsse_token(username, password))
