"""
K1NG Client Configuration

Loads the API host, credentials and optional draft defaults from a JSON
config file, so scripts and the CLI don't have to carry them around.

Example config.json:
    {
      "host_url": "https://api.example.com",
      "api_key": "key",
      "api_pass": "pass",
      "sender_id": "ACME",
      "channel": "otp",
      "destinations": ["0811", "0822"]
    }
"""

import json
import os
from typing import List, Optional

from .core import Core
from .exceptions import ConfigError
from .sms import Channel, Sms


def get_default_config_dir() -> str:
    """Get the default configuration directory following XDG standards"""
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return os.path.join(xdg_config_home, "k1ng")

    home = os.environ.get("HOME")
    if home:
        return os.path.join(home, ".config", "k1ng")

    return os.path.join(os.getcwd(), ".config", "k1ng")


class K1ngConfig:
    """Configuration for the K1NG client"""

    REQUIRED_FIELDS = ("host_url", "api_key", "api_pass")

    def __init__(self, config_path: Optional[str] = None):
        if config_path is None:
            config_path = os.environ.get("K1NG_CONFIG")
            if config_path is None:
                config_path = os.path.join(get_default_config_dir(), "config.json")

        self.config_path = config_path
        self.host_url: str = ""
        self.api_key: str = ""
        self.api_pass: str = ""
        self.sender_id: Optional[str] = None
        self.channel: Channel = Channel.DEFAULT
        self.template_name: Optional[str] = None
        self.destinations: List[str] = []
        self.timeout: Optional[float] = None

        self._load_config()

    def _load_config(self):
        """Load configuration from file"""
        if not os.path.exists(self.config_path):
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r') as f:
            try:
                config_data = json.load(f)
            except ValueError as e:
                raise ConfigError(f"Invalid JSON in {self.config_path}: {e}") from e

        if not isinstance(config_data, dict):
            raise ConfigError(f"Config file must hold a JSON object: {self.config_path}")

        for field in self.REQUIRED_FIELDS:
            if not config_data.get(field):
                raise ConfigError(f"Missing required config field: {field}")
            setattr(self, field, config_data[field])

        # Optional fields
        self.sender_id = config_data.get("sender_id")
        self.template_name = config_data.get("template_name")
        self.timeout = config_data.get("timeout")

        if config_data.get("channel"):
            try:
                self.channel = Channel.parse(config_data["channel"])
            except ValueError as e:
                raise ConfigError(str(e)) from e

        destinations = config_data.get("destinations") or []
        if isinstance(destinations, str):
            destinations = [d.strip() for d in destinations.split(",") if d.strip()]
        self.destinations = list(destinations)

    def create_core(self) -> Core:
        return Core(self.host_url, self.api_key, self.api_pass, timeout=self.timeout)

    def create_sms(self) -> Sms:
        """Build an SMS builder pre-populated with the configured defaults"""
        sms = Sms(self.create_core(), self.channel)
        if self.sender_id:
            sms.set_sender_id(self.sender_id)
        if self.template_name:
            sms.set_template(self.template_name)
        if self.destinations:
            sms.add_destinations(*self.destinations)
        return sms
