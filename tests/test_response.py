"""
Unit tests for response normalization
"""

from types import SimpleNamespace

import httpx
import pytest

from penneo_sdk.exceptions import MalformedResponseError
from penneo_sdk.http_clients import ResponseEnvelope, normalize_response, parse_body


class TestParseBody:
    """Test body parsing rules"""
    
    def test_empty_bodies(self):
        assert parse_body(None) == {}
        assert parse_body(b'') == {}
        assert parse_body('') == {}
    
    def test_json_text(self):
        assert parse_body('{"a":1}') == {'a': 1}
        assert parse_body(b'[1, 2]') == [1, 2]
    
    def test_structured_values_pass_through(self):
        body = {'a': 1}
        assert parse_body(body) is body
    
    def test_malformed_json(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            parse_body('<html>Bad gateway</html>', status=502)
        
        error = exc_info.value
        assert error.error_code == 'MALFORMED_RESPONSE'
        assert error.http_status == 502
        assert error.details['body'].startswith('<html>')
    
    def test_invalid_utf8(self):
        with pytest.raises(MalformedResponseError, match="not valid UTF-8"):
            parse_body(b'\xff\xfe\xfa')


class TestNormalizeResponse:
    """Test envelope construction"""
    
    def test_json_response(self):
        raw = httpx.Response(200, text='{"a":1}')
        envelope = normalize_response(raw)
        
        assert envelope.status == 200
        assert envelope.body == {'a': 1}
        assert envelope.raw is raw
        assert envelope.ok
    
    def test_no_content(self):
        raw = httpx.Response(204)
        envelope = normalize_response(raw)
        
        assert envelope.status == 204
        assert envelope.body == {}
        assert envelope.raw is raw
    
    def test_error_status_is_not_raised(self):
        envelope = normalize_response(httpx.Response(404, json={'error': 'Not found'}))
        assert envelope.status == 404
        assert envelope.body == {'error': 'Not found'}
        assert not envelope.ok
    
    def test_malformed_response(self):
        with pytest.raises(MalformedResponseError):
            normalize_response(httpx.Response(200, text='not json'))
    
    def test_pre_parsed_body(self):
        """Transports that already parsed the body are passed through"""
        raw = SimpleNamespace(status_code=201, body={'id': 7})
        envelope = normalize_response(raw)
        
        assert envelope == ResponseEnvelope(body={'id': 7}, raw=None, status=201)
        assert envelope.raw is raw
    
    def test_string_body_object(self):
        raw = SimpleNamespace(status_code=200, body='{"a":1}')
        assert normalize_response(raw).body == {'a': 1}


class TestBodyShape:
    """Bodies are always objects or arrays"""
    
    def test_json_null_is_empty(self):
        assert parse_body('null') == {}
        assert parse_body(b'null') == {}
    
    @pytest.mark.parametrize('text', ['"abc"', '42', 'true', '1.5'])
    def test_json_scalars_are_rejected(self, text):
        with pytest.raises(MalformedResponseError, match="object or array") as exc_info:
            parse_body(text, status=200)
        assert exc_info.value.http_status == 200
    
    def test_pre_parsed_scalar_is_rejected(self):
        with pytest.raises(MalformedResponseError):
            normalize_response(SimpleNamespace(status_code=200, body='"abc"'))


class TestMappingResponses:
    """Raw responses given as plain records"""
    
    def test_status_code_camel_case(self):
        raw = {'statusCode': 200, 'body': '{"a":1}'}
        envelope = normalize_response(raw)
        
        assert envelope.status == 200
        assert envelope.body == {'a': 1}
        assert envelope.raw is raw
    
    def test_no_body(self):
        raw = {'statusCode': 204}
        envelope = normalize_response(raw)
        
        assert envelope.status == 204
        assert envelope.body == {}
        assert envelope.raw is raw
    
    def test_snake_case_and_parsed_body(self):
        envelope = normalize_response({'status_code': 201, 'body': [1, 2]})
        assert envelope.status == 201
        assert envelope.body == [1, 2]
