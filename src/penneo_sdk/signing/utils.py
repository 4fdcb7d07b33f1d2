"""
Utility functions for request authentication

This module provides nonce generation and timestamp formatting for WSSE
UsernameToken headers.
"""

import time
import base64
import secrets
from typing import Optional, Union


NONCE_BYTES = 16


def generate_nonce() -> str:
    """
    Generate a random hex nonce for replay protection.
    
    Returns:
        str: 32 character hex string
    """
    return secrets.token_hex(NONCE_BYTES)


def generate_timestamp() -> int:
    """
    Generate current Unix timestamp.
    
    Returns:
        int: Current Unix timestamp (seconds since epoch)
    """
    return int(time.time())


def format_created_timestamp(timestamp: Optional[int] = None) -> str:
    """
    Format timestamp as an ISO 8601 UTC string for the WSSE Created field.
    
    Args:
        timestamp: Unix timestamp (uses current time if None)
        
    Returns:
        str: ISO 8601 formatted timestamp string
    """
    if timestamp is None:
        timestamp = generate_timestamp()
    
    dt = time.gmtime(timestamp)
    return time.strftime('%Y-%m-%dT%H:%M:%SZ', dt)


def b64encode_text(value: Union[str, bytes]) -> str:
    if isinstance(value, str):
        value = value.encode('utf-8')
    return base64.b64encode(value).decode('ascii')
