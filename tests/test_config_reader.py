# -*- coding: utf-8 -*-
# tests/test_config_reader.py

import sys
from pathlib import Path

# Ensure project root (which contains the `configs/` directory) is on sys.path
_THIS_FILE = Path(__file__).resolve()
_PROJECT_ROOT = _THIS_FILE.parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

import pytest

from configs.config_reader import ConfigReader

CONFIG = """
cashila:
  url: https://cashila-staging.com
  client_id: abc
accounts:
  main:
    token: tok
    secret: c2VjcmV0
  sub1:
    token: tok2
"""


@pytest.fixture
def reader(tmp_path, monkeypatch):
    for name in ("CASHILA_URL", "CASHILA_CLIENT_ID", "SSL_CERT_DIR"):
        monkeypatch.delenv(name, raising=False)
    (tmp_path / "cashila.yaml").write_text(CONFIG, encoding="utf-8")
    return ConfigReader(str(tmp_path))


def test_api_config_defaults(reader):
    config = reader.get_api_config()
    assert config == {
        "url": "https://cashila-staging.com",
        "client_id": "abc",
        "ca_path": "",
        "timeout": 10.0,
    }


def test_env_overrides(reader, monkeypatch):
    monkeypatch.setenv("CASHILA_URL", "http://localhost:8000")
    monkeypatch.setenv("SSL_CERT_DIR", "/etc/ssl/certs")
    config = reader.get_api_config()
    assert config["url"] == "http://localhost:8000"
    assert config["ca_path"] == "/etc/ssl/certs"
    assert config["client_id"] == "abc"


def test_accounts(reader):
    assert reader.list_available_accounts() == ["main", "sub1"]
    assert reader.get_account_credentials("main") == {"token": "tok", "secret": "c2VjcmV0"}
    assert reader.get_account_credentials("missing") == {"token": "", "secret": ""}
    assert reader.validate_account_config("main") is True
    assert reader.validate_account_config("sub1") is False


def test_get_config_key_path(reader):
    assert reader.get_config("accounts.main.token") == "tok"
    assert reader.get_config("accounts.nope.token") is None


def test_reload(reader, tmp_path):
    assert reader.get_config("cashila.client_id") == "abc"
    (tmp_path / "cashila.yaml").write_text(CONFIG.replace("abc", "xyz"), encoding="utf-8")
    assert reader.get_config("cashila.client_id") == "abc"
    reader.reload_config("cashila.yaml")
    assert reader.get_config("cashila.client_id") == "xyz"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigReader(str(tmp_path)).get_api_config()


def test_shipped_config_is_staging(monkeypatch):
    monkeypatch.delenv("CASHILA_URL", raising=False)
    config = ConfigReader(str(_PROJECT_ROOT / "configs")).get_api_config()
    assert config["url"] == "https://cashila-staging.com"
