"""
Exception classes for Penneo Python SDK
"""

from typing import Optional, Dict, Any


class PenneoSDKError(Exception):
    """Base exception for all Penneo SDK errors"""
    
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message='{self.message}', error_code='{self.error_code}')"


class ConfigurationError(PenneoSDKError):
    """Exception raised when a request is attempted before the SDK is initialized"""
    
    def __init__(self, message: str = "Please configure the Penneo SDK by calling init() before calling any methods.",
                 error_code: str = "NOT_CONFIGURED", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class ValidationError(PenneoSDKError):
    """Exception raised for invalid configuration values"""
    
    def __init__(self, message: str, error_code: str = "INVALID_CONFIG", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class UnsupportedMethodError(PenneoSDKError):
    """Exception raised for HTTP verbs outside the supported set"""
    
    def __init__(self, method: Any, message: str = "Method not supported.",
                 error_code: str = "UNSUPPORTED_METHOD", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details or {'method': method})
        self.method = method


class SigningError(PenneoSDKError):
    """Exception raised when an authentication header cannot be computed"""
    
    def __init__(self, message: str, error_code: str = "SIGNING_FAILED", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class TransportError(PenneoSDKError):
    """Exception raised for network-level failures reported by the transport"""
    
    def __init__(self, message: str, error_code: str = "TRANSPORT_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)


class MalformedResponseError(PenneoSDKError):
    """Exception raised when a response body cannot be parsed as JSON"""
    
    def __init__(self, message: str, error_code: str = "MALFORMED_RESPONSE",
                 http_status: int = 0, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code, details)
        self.http_status = http_status
