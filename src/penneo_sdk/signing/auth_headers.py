"""
Authentication header resolution

Maps a connector configuration to the headers sent with every request.
"""

import logging
from typing import TYPE_CHECKING

from .types import AuthScheme, HeaderDict
from .wsse import generate_wsse_header

if TYPE_CHECKING:
    from ..config import ConnectorConfig

logger = logging.getLogger(__name__)

WSSE_HEADER = 'X-WSSE'
TOKEN_HEADER = 'X-Auth-Token'
SESSION_HEADER = 'Authorization'


def base_headers(scheme: AuthScheme) -> HeaderDict:
    headers = {'Accept': 'application/json'}
    if scheme == AuthScheme.SESSION:
        headers['X-Requested-With'] = 'XHttpRequest'
    else:
        headers['Accept-charset'] = 'utf-8'
    return headers


def resolve_auth_headers(config: 'ConnectorConfig') -> HeaderDict:
    """
    Build the authentication and content negotiation headers for a request.
    
    The first configured scheme wins: bearer token, then WSSE key/secret,
    then session credential. Without credentials no auth header is emitted.
    
    Args:
        config: Connector configuration
        
    Returns:
        dict: Headers to send
        
    Raises:
        SigningError: If the WSSE header cannot be computed
    """
    scheme = config.auth_scheme
    headers = base_headers(scheme)
    
    if scheme == AuthScheme.BEARER_TOKEN:
        headers[TOKEN_HEADER] = config.token
    elif scheme == AuthScheme.SIGNED_REQUEST:
        headers[WSSE_HEADER] = generate_wsse_header(config.key, config.secret)
    elif scheme == AuthScheme.SESSION:
        headers[SESSION_HEADER] = config.session_auth
    
    logger.debug(f"Resolved authentication headers using scheme: {scheme.value}")
    return headers
