"""
K1NG Client

A Python client library for the K1NG messaging API.
"""

from .core import Core, ConsumeMethod, Module
from .exceptions import (
    K1ngError,
    ConfigError,
    InvalidURLError,
    UnsupportedMethodError,
    ValidationError,
    EmptySenderIdError,
    EmptyContentError,
    EmptyDestinationError,
    TransportError,
    HTTPStatusError,
    DecodeError,
)
from .response import Response, Result
from .sms import Sms, Channel, default, long_number, otp, regular
from .config import K1ngConfig

__all__ = [
    'Core',
    'ConsumeMethod',
    'Module',
    'Sms',
    'Channel',
    'default',
    'long_number',
    'otp',
    'regular',
    'Response',
    'Result',
    'K1ngConfig',
    'K1ngError',
    'ConfigError',
    'InvalidURLError',
    'UnsupportedMethodError',
    'ValidationError',
    'EmptySenderIdError',
    'EmptyContentError',
    'EmptyDestinationError',
    'TransportError',
    'HTTPStatusError',
    'DecodeError',
]

__version__ = "0.1.0"
