"""
K1NG SMS Builder

This module provides the SMS message builder. A builder keeps a mutable
draft (sender ID, content, optional template and destinations) and sends it
through a Core transport.

Usage:
    from k1ng_client import sms

    client = sms.regular("https://api.example.com", "key", "pass")
    client.set_sender_id("ACME").set_content("Hello").add_destinations("0811")
    response = client.send()
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Dict, List

import requests

from .core import Core, ConsumeMethod, Module, format_mysql_datetime
from .exceptions import (
    EmptyContentError,
    EmptyDestinationError,
    EmptySenderIdError,
    HTTPStatusError,
    TransportError,
)
from .response import Response

logger = logging.getLogger(__name__)

ENDPOINT_SEND = "api/v1/send"


class Channel(str, Enum):
    """SMS routing channels"""

    # Non-OTP SMS for Indonesian customers
    REGULAR = "NON-2FA"
    # OTP SMS for Indonesian customers
    OTP = "2FA"
    # International customers sending to Indonesian numbers
    DEFAULT = "DEFAULT"
    # Long number used as the sender ID
    LONG_NUMBER = "LONGNUMBER"

    @classmethod
    def parse(cls, value: str) -> "Channel":
        """Look up a channel by wire value ("2FA") or name ("otp", "long-number")"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            pass
        name = str(value).strip().upper().replace("-", "_")
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Unknown SMS channel: {value}")


def _value(item) -> str:
    return item.value if isinstance(item, Enum) else str(item)


class Sms:
    """Fluent builder for a single SMS draft"""

    def __init__(self, core: Core, channel: Channel = Channel.DEFAULT):
        self.core = core
        self.module = Module.SMS
        self.channel = channel
        self.sender_id = ""
        self.content = ""
        self.template_name = ""
        self.destinations: List[str] = []

    def __repr__(self):
        return (f"Sms(channel={_value(self.channel)!r}, sender_id={self.sender_id!r}, "
                f"destinations={len(self.destinations)})")

    def set_sender_id(self, sender_id: str) -> "Sms":
        self.sender_id = sender_id
        return self

    def set_channel(self, channel: Channel) -> "Sms":
        # Channel stays mutable after construction
        self.channel = channel
        return self

    def set_content(self, content: str) -> "Sms":
        """Set the message body. With a template, a comma-separated string fills its placeholders."""
        self.content = content
        return self

    def set_template(self, template_name: str) -> "Sms":
        self.template_name = template_name
        return self

    def add_destinations(self, *phone_numbers: str) -> "Sms":
        self.destinations.extend(phone_numbers)
        return self

    def empty_destinations(self) -> "Sms":
        self.destinations = []
        return self

    def reset(self) -> "Sms":
        """Clear sender ID, content, template and destinations; channel is kept"""
        return self.set_sender_id("").set_content("").set_template("").empty_destinations()

    def build_params(self) -> Dict[str, str]:
        """
        Validate the draft and serialize it to form parameters.

        Raises:
            EmptySenderIdError: If no sender ID is set
            EmptyContentError: If no content is set
            EmptyDestinationError: If the destination list is empty
        """
        params = {
            "module": _value(self.module),
            "sub_module": _value(self.channel),
        }

        if not self.sender_id:
            raise EmptySenderIdError()
        params["sid"] = self.sender_id

        if not self.content:
            raise EmptyContentError()
        params["content"] = self.content

        if self.template_name and self.template_name.strip():
            params["template_name"] = self.template_name

        if not self.destinations:
            raise EmptyDestinationError()
        params["destination"] = ",".join(self.destinations)

        return params

    def send(self) -> Response:
        """Send the draft to every destination immediately."""
        return self._submit(self.build_params())

    def send_at(self, send_time: datetime) -> Response:
        """Schedule the draft for delivery at send_time."""
        params = self.build_params()
        params["schedule_time"] = format_mysql_datetime(send_time)
        return self._submit(params)

    def _submit(self, params: Dict[str, str]) -> Response:
        try:
            resp = self.core.consume(ConsumeMethod.POST, ENDPOINT_SEND, params)
        except requests.exceptions.RequestException as e:
            logger.debug(f"SMS request failed: {e}")
            raise TransportError(f"Failed to send SMS: {e}") from e

        if resp.status_code != 200:
            raise HTTPStatusError(resp.status_code, resp.text)

        return Response.from_json(resp.text)


def _create(host_url: str, api_key: str, api_pass: str, channel: Channel, **kwargs) -> Sms:
    return Sms(Core(host_url, api_key, api_pass, **kwargs), channel)


def default(host_url: str, api_key: str, api_pass: str, **kwargs) -> Sms:
    """Create an SMS builder on the DEFAULT channel"""
    return _create(host_url, api_key, api_pass, Channel.DEFAULT, **kwargs)


def long_number(host_url: str, api_key: str, api_pass: str, **kwargs) -> Sms:
    """Create an SMS builder on the LONG_NUMBER channel"""
    return _create(host_url, api_key, api_pass, Channel.LONG_NUMBER, **kwargs)


def otp(host_url: str, api_key: str, api_pass: str, **kwargs) -> Sms:
    """Create an SMS builder on the OTP channel"""
    return _create(host_url, api_key, api_pass, Channel.OTP, **kwargs)


def regular(host_url: str, api_key: str, api_pass: str, **kwargs) -> Sms:
    """Create an SMS builder on the REGULAR channel"""
    return _create(host_url, api_key, api_pass, Channel.REGULAR, **kwargs)
