import pytest

from app.core import config
from app.core.encryption import decrypt_text, encrypt_text


def test_round_trip():
    token = encrypt_text("Dear diary, today was long.")
    assert token != "Dear diary, today was long."
    assert decrypt_text(token) == "Dear diary, today was long."


def test_empty_values():
    assert encrypt_text("") == ""
    assert decrypt_text("") == ""


def test_missing_key(monkeypatch):
    monkeypatch.setattr(config, "ENCRYPTION_KEY", None)
    with pytest.raises(RuntimeError, match="ENCRYPTION_KEY is not defined"):
        encrypt_text("secret")


def test_wrong_key(monkeypatch):
    token = encrypt_text("secret")
    monkeypatch.setattr(config, "ENCRYPTION_KEY", "another-passphrase")
    with pytest.raises(ValueError):
        decrypt_text(token)
