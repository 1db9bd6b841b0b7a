import json
import os
from pathlib import Path

import pytest

from k1ng_client.config import K1ngConfig, get_default_config_dir
from k1ng_client.exceptions import ConfigError
from k1ng_client.sms import Channel


def write_config(path: Path, **fields) -> str:
    data = {"host_url": "https://api.example.com/?x=1", "api_key": "key", "api_pass": "pass"}
    data.update(fields)
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_loads_required_and_optional_fields(tmp_path: Path):
    path = write_config(tmp_path / "config.json", sender_id="ACME", channel="otp",
                        template_name="promo", destinations="0811, 0822", timeout=3)
    config = K1ngConfig(path)

    assert config.host_url == "https://api.example.com/?x=1"
    assert config.channel is Channel.OTP
    assert config.destinations == ["0811", "0822"]
    assert config.timeout == 3


def test_create_sms_applies_defaults(tmp_path: Path):
    config = K1ngConfig(write_config(tmp_path / "config.json", sender_id="ACME", destinations=["0811"]))
    sms = config.create_sms()

    assert sms.core.base_url == "https://api.example.com"
    assert sms.channel is Channel.DEFAULT
    assert sms.sender_id == "ACME"
    assert sms.destinations == ["0811"]


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        K1ngConfig(str(tmp_path / "nope.json"))


def test_missing_required_field(tmp_path: Path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"host_url": "https://api.example.com", "api_key": "key"}), encoding="utf-8")
    with pytest.raises(ConfigError, match="api_pass"):
        K1ngConfig(str(path))


def test_unknown_channel(tmp_path: Path):
    with pytest.raises(ConfigError):
        K1ngConfig(write_config(tmp_path / "config.json", channel="fax"))


def test_path_from_environment(tmp_path: Path, monkeypatch):
    path = write_config(tmp_path / "env.json")
    monkeypatch.setenv("K1NG_CONFIG", path)
    assert K1ngConfig().config_path == path


def test_default_config_dir(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_default_config_dir() == os.path.join(str(tmp_path), "k1ng")

    monkeypatch.delenv("XDG_CONFIG_HOME")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_default_config_dir() == os.path.join(str(tmp_path), ".config", "k1ng")
