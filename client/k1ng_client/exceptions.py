"""
Exceptions raised by the K1NG client.

Everything the library raises on its own derives from K1ngError, so callers
can catch a single type. Validation errors are raised before any network
call is made.
"""

from typing import Optional


class K1ngError(Exception):
    """Base class for all K1NG client errors"""


class ConfigError(K1ngError):
    """Raised when a config file is missing a required field"""


class InvalidURLError(K1ngError, ValueError):
    """Raised when the API host URL cannot be used"""


class UnsupportedMethodError(K1ngError):
    """Raised when the transport is asked for a method other than GET or POST"""

    def __init__(self, method):
        self.method = method
        super().__init__(f"method not allowed: {method}")


class ValidationError(K1ngError, ValueError):
    """Raised when the SMS draft is incomplete"""


class EmptySenderIdError(ValidationError):
    def __init__(self):
        super().__init__("sender id must not be empty")


class EmptyContentError(ValidationError):
    def __init__(self):
        super().__init__("message content must not be empty")


class EmptyDestinationError(ValidationError):
    def __init__(self):
        super().__init__("destination must not be empty")


class TransportError(K1ngError):
    """Raised when the HTTP request itself fails"""


class HTTPStatusError(K1ngError):
    """Raised when the API answers with anything but 200"""

    def __init__(self, status_code: int, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(f"http status code {status_code}")


class DecodeError(K1ngError, ValueError):
    """Raised when the API response body is not the expected JSON"""
