"""
Response normalization

Every completed call is reduced to the same envelope: a parsed body, the raw
transport response and the numeric status code.
"""

import json
from typing import Any, Mapping
from dataclasses import dataclass, field

import httpx

from ..exceptions import MalformedResponseError

# Body excerpt kept in MalformedResponseError details
EXCERPT_LENGTH = 200


@dataclass(frozen=True)
class ResponseEnvelope:
    """
    Normalized response of a completed call
    
    Attributes:
        body: Parsed JSON body, ``{}`` when the response had none
        raw: The transport response, untouched
        status: HTTP status code
    """
    body: Any
    raw: Any = field(repr=False, compare=False)
    status: int
    
    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def parse_body(body: Any, status: int = 0) -> Any:
    """
    Parse a response body into a structured value.
    
    Args:
        body: Body as returned by the transport
        status: HTTP status, used for error reporting
        
    Returns:
        The parsed object or array; ``{}`` for an empty body or JSON ``null``
        
    Raises:
        MalformedResponseError: If a text body is not valid JSON, or the body
            is a JSON scalar instead of an object or array
    """
    if body is None or body == b"" or body == "":
        return {}
    
    if isinstance(body, bytes):
        try:
            body = body.decode('utf-8')
        except UnicodeDecodeError as e:
            raise MalformedResponseError(
                f"Response body is not valid UTF-8: {e}",
                http_status=status
            ) from e
    
    if isinstance(body, str):
        try:
            body = json.loads(body)
        except json.JSONDecodeError as e:
            raise MalformedResponseError(
                f"Invalid JSON response: {e}",
                http_status=status,
                details={'status_code': status, 'body': body[:EXCERPT_LENGTH]}
            ) from e
        if body is None:
            return {}
    
    if not isinstance(body, (Mapping, list)):
        raise MalformedResponseError(
            f"Response body must be a JSON object or array, got {type(body).__name__}",
            http_status=status,
            details={'status_code': status, 'body': repr(body)[:EXCERPT_LENGTH]}
        )
    
    return body


def normalize_response(raw: Any) -> ResponseEnvelope:
    """
    Normalize a transport response.
    
    Accepts an ``httpx.Response``, a mapping with ``status_code`` (or
    ``statusCode``) and ``body`` keys, or any object exposing ``status_code``
    and a ``body`` that may already be parsed.
    """
    if isinstance(raw, httpx.Response):
        status, body = raw.status_code, raw.content
    elif isinstance(raw, Mapping):
        status = raw.get('status_code', raw.get('statusCode'))
        body = raw.get('body')
    else:
        status, body = raw.status_code, getattr(raw, 'body', None)
    
    return ResponseEnvelope(body=parse_body(body, status), raw=raw, status=status)
