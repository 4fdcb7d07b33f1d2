"""
HTTP layer for Penneo Python SDK

Request building, response normalization and the asynchronous connector.
"""

from .request_builder import (
    RequestDescriptor,
    build_request,
    build_file_request,
    parse_method,
)
from .response import (
    ResponseEnvelope,
    normalize_response,
    parse_body,
)
from .connector import (
    Connector,
    create_connector,
)

__all__ = [
    'RequestDescriptor',
    'build_request',
    'build_file_request',
    'parse_method',
    'ResponseEnvelope',
    'normalize_response',
    'parse_body',
    'Connector',
    'create_connector',
]
