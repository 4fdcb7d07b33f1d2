"""
Request descriptor construction

Turns a verb, a resource path and a payload into everything needed to send one
request: method, URL, headers and the query, JSON body or multipart encoding.
"""

import os
import json
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Tuple, Union
from dataclasses import dataclass

from ..exceptions import UnsupportedMethodError, ValidationError
from ..signing.auth_headers import resolve_auth_headers
from ..signing.types import HttpMethod, HeaderDict

if TYPE_CHECKING:
    from ..config import ConnectorConfig

BODY_METHODS = (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)

FilePart = Tuple[Any, ...]


@dataclass
class RequestDescriptor:
    """
    A fully specified outbound request
    
    Attributes:
        method: HTTP method
        url: Absolute request URL
        headers: Request headers, authentication included
        query: Query string parameters (GET only)
        body: JSON encoded request body (POST, PUT, PATCH)
        files: Multipart parts as (filename, content[, content_type]) tuples
    """
    method: HttpMethod
    url: str
    headers: HeaderDict
    query: Optional[Any] = None
    body: Optional[str] = None
    files: Optional[Dict[str, FilePart]] = None
    
    @property
    def is_multipart(self) -> bool:
        return self.files is not None
    
    def to_httpx_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``httpx.AsyncClient.request``."""
        kwargs: Dict[str, Any] = {
            'method': self.method.value,
            'url': self.url,
            'headers': self.headers,
        }
        if self.query is not None:
            kwargs['params'] = self.query
        if self.body is not None:
            kwargs['content'] = self.body
        if self.files is not None:
            kwargs['files'] = self.files
        return kwargs


def parse_method(method: Union[str, HttpMethod]) -> HttpMethod:
    """
    Resolve a verb name to a supported HTTP method.
    
    Raises:
        UnsupportedMethodError: If the verb is outside GET, POST, PUT, PATCH, DELETE
    """
    if isinstance(method, HttpMethod):
        return method
    if not isinstance(method, str):
        raise UnsupportedMethodError(method)
    try:
        return HttpMethod(method.upper())
    except ValueError:
        raise UnsupportedMethodError(method) from None


def encode_json_body(payload: Any) -> str:
    try:
        return json.dumps(payload, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Request payload is not JSON serializable: {e}") from e


def build_url(config: 'ConnectorConfig', resource: str) -> str:
    # No path normalization beyond the trailing slash the config keeps on base_url
    return f"{config.base_url}{resource}"


def build_request(
    method: Union[str, HttpMethod],
    resource: str,
    payload: Optional[Any],
    config: 'ConnectorConfig'
) -> RequestDescriptor:
    """
    Build the descriptor for a JSON or query-string request.
    
    Args:
        method: HTTP verb
        resource: Resource path appended to the base URL, e.g. ``casefiles/1``
        payload: Query parameters for GET, JSON body for POST, PUT and PATCH;
            ignored for DELETE
        config: Connector configuration
        
    Returns:
        RequestDescriptor: The request to dispatch
        
    Raises:
        UnsupportedMethodError: For verbs outside the supported set
        SigningError: If the authentication header cannot be computed
        ValidationError: If a body payload cannot be JSON encoded
    """
    http_method = parse_method(method)
    headers = resolve_auth_headers(config)
    descriptor = RequestDescriptor(
        method=http_method,
        url=build_url(config, resource),
        headers=headers
    )
    
    if payload is None:
        return descriptor
    
    if http_method == HttpMethod.GET:
        descriptor.query = payload
    elif http_method in BODY_METHODS:
        descriptor.body = encode_json_body(payload)
        headers['Content-Type'] = 'application/json'
    
    return descriptor


def file_part(field_name: str, value: Any) -> FilePart:
    """
    Convert an upload value to a multipart part.
    
    Tuples are passed through as (filename, content[, content_type]). File
    objects keep the base name of their declared ``name``; anything without a
    name is uploaded under the field name.
    """
    if isinstance(value, tuple):
        if len(value) not in (2, 3):
            raise ValidationError(
                f"Upload for field '{field_name}' must be (filename, content[, content_type])",
                details={'field': field_name}
            )
        return value
    
    name = getattr(value, 'name', None)
    filename = os.path.basename(name) if isinstance(name, str) and name else field_name
    return (filename, value)


def build_file_request(
    method: Union[str, HttpMethod],
    resource: str,
    fields: Mapping[str, Any],
    config: 'ConnectorConfig'
) -> RequestDescriptor:
    """
    Build the descriptor for a multipart file upload.
    
    Args:
        method: HTTP verb, one of POST, PUT or PATCH
        resource: Resource path appended to the base URL
        fields: Mapping of form field name to file-like value
        config: Connector configuration
        
    Returns:
        RequestDescriptor: The request to dispatch, one part per field
        
    Raises:
        UnsupportedMethodError: For verbs that cannot carry an upload
        ValidationError: If no fields are given or a part is malformed
    """
    http_method = parse_method(method)
    if http_method not in BODY_METHODS:
        raise UnsupportedMethodError(method)
    
    if not fields:
        raise ValidationError("File upload requires at least one field")
    
    return RequestDescriptor(
        method=http_method,
        url=build_url(config, resource),
        headers=resolve_auth_headers(config),
        files={name: file_part(name, value) for name, value in fields.items()}
    )
