"""
Connection configuration for the Penneo connector

Holds the base URL and the credential set of a single connector. The schema is
closed: no attribute outside ``CONFIG_FIELDS`` can ever be set.
"""

import logging
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse
from dataclasses import dataclass, field, fields

from ..exceptions import ValidationError
from ..signing.types import AuthScheme

logger = logging.getLogger(__name__)

CREDENTIAL_FIELDS = ('key', 'secret', 'token', 'session_auth')
CONFIG_FIELDS = ('base_url',) + CREDENTIAL_FIELDS

REDACTED = '***'


def normalize_base_url(base_url: Optional[str]) -> Optional[str]:
    """
    Validate a base URL and make it end with exactly one slash.
    
    Args:
        base_url: Base URL of the Penneo API, or None to unset it
        
    Returns:
        str: Normalized base URL, or None
        
    Raises:
        ValidationError: If the URL is empty or not an http(s) URL
    """
    if base_url is None:
        return None
    
    if not isinstance(base_url, str) or not base_url.strip():
        raise ValidationError("Base URL cannot be empty")
    
    parsed = urlparse(base_url)
    if parsed.scheme not in ('http', 'https') or not parsed.netloc:
        raise ValidationError(
            f"Invalid base URL format: {base_url}",
            details={'base_url': base_url}
        )
    
    return base_url.rstrip('/') + '/'


@dataclass
class ConnectorConfig:
    """
    Configuration for a Penneo connector.
    
    All fields start out unset. Exactly one credential set is used per request,
    chosen by ``auth_scheme``: a bearer token wins over a key/secret pair, which
    wins over a session credential.
    
    Attributes:
        base_url: Base URL of the API, always stored with a trailing slash
        key: API key for the WSSE signed-request scheme
        secret: API secret for the WSSE signed-request scheme
        token: Token sent verbatim in the X-Auth-Token header
        session_auth: Pre-formed Authorization header value
    """
    base_url: Optional[str] = None
    key: Optional[str] = None
    secret: Optional[str] = field(default=None, repr=False)
    token: Optional[str] = field(default=None, repr=False)
    session_auth: Optional[str] = field(default=None, repr=False)
    
    def __setattr__(self, name: str, value: Any) -> None:
        if name not in CONFIG_FIELDS:
            raise AttributeError(f"ConnectorConfig has no configuration key '{name}'")
        if name == 'base_url':
            value = normalize_base_url(value)
        object.__setattr__(self, name, value)
    
    def update(self, partial: Optional[Mapping[str, Any]] = None, **options: Any) -> None:
        """
        Shallow-merge recognized configuration keys.
        
        Unrecognized keys are ignored and logged. Explicit ``None`` values
        unset the corresponding field.
        
        Args:
            partial: Mapping of configuration keys to new values
            **options: Configuration keys given as keyword arguments
            
        Raises:
            ValidationError: If a new base URL is invalid
        """
        merged = dict(partial or {})
        merged.update(options)
        
        accepted = {}
        for name, value in merged.items():
            if name not in CONFIG_FIELDS:
                logger.warning(f"Ignoring unrecognized configuration key: {name}")
                continue
            accepted[name] = value
        
        # Validate before applying so a rejected base URL leaves the config untouched
        if 'base_url' in accepted:
            accepted['base_url'] = normalize_base_url(accepted['base_url'])
        
        for name, value in accepted.items():
            setattr(self, name, value)
    
    def is_configured(self) -> bool:
        """Only the base URL is required; every credential set is optional."""
        return bool(self.base_url)
    
    @property
    def auth_scheme(self) -> AuthScheme:
        if self.token:
            return AuthScheme.BEARER_TOKEN
        if self.key or self.secret:
            return AuthScheme.SIGNED_REQUEST
        if self.session_auth:
            return AuthScheme.SESSION
        return AuthScheme.UNAUTHENTICATED
    
    def to_dict(self, redact: bool = True) -> Dict[str, Any]:
        """
        Snapshot the configuration.
        
        Args:
            redact: Replace configured credentials with a placeholder
            
        Returns:
            dict: Configuration keys and values
        """
        snapshot = {f.name: getattr(self, f.name) for f in fields(self)}
        if redact:
            for name in CREDENTIAL_FIELDS:
                if snapshot[name] is not None:
                    snapshot[name] = REDACTED
        return snapshot
