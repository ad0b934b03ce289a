import pytest
from pydantic import ValidationError as PydanticValidationError

from iou_minter.core.config import IssuerSettings, Settings, WalletSigningSettings
from iou_minter.infrastructure.ledger.currency import currency_matches, encode_currency_code

KFDTOKEN_HEX = "4B4644544F4B454E" + "0" * 24


def test_three_letter_codes_are_used_verbatim():
    assert encode_currency_code("KFD") == "KFD"


def test_long_names_are_hex_encoded_and_padded():
    assert encode_currency_code("KFDTOKEN") == KFDTOKEN_HEX
    assert len(encode_currency_code("KFDTOKEN")) == 40


def test_hex_codes_are_upper_cased():
    assert encode_currency_code(KFDTOKEN_HEX.lower()) == KFDTOKEN_HEX


def test_currency_matching():
    assert currency_matches("KFD", "KFD")
    assert not currency_matches("kfd", "KFD")
    assert currency_matches(KFDTOKEN_HEX.lower(), "KFDTOKEN")
    assert not currency_matches("USD", "KFD")


@pytest.mark.parametrize("code", ["", "XRP", "xrp", "AB", "A" * 21, "Z" * 40, "KFD€", "KF€"])
def test_issuer_currency_validation(code):
    with pytest.raises(PydanticValidationError):
        IssuerSettings(currency=code)


@pytest.mark.parametrize("code", ["Z" * 40, "KFD€", "TOKEN_NAME_OVER_TWENTY"])
def test_unencodable_currency_codes_raise_value_error(code):
    with pytest.raises(ValueError):
        encode_currency_code(code)


@pytest.mark.parametrize("code", ["KFD", "KFDTOKEN", KFDTOKEN_HEX])
def test_accepted_currency_codes_encode(code):
    assert len(encode_currency_code(IssuerSettings(currency=code).currency)) in (3, 40)


def test_bad_currency_in_environment_fails_settings(monkeypatch):
    monkeypatch.setenv("ISSUER__CURRENCY", "G" * 40)
    with pytest.raises(PydanticValidationError):
        Settings(_env_file=None)


def test_server_reload_defaults_off(monkeypatch):
    assert Settings(_env_file=None).server.reload is False
    monkeypatch.setenv("SERVER__RELOAD", "true")
    assert Settings(_env_file=None).server.reload is True


def test_settings_read_nested_environment(monkeypatch):
    monkeypatch.setenv("ISSUER__ADDRESS", "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh")
    monkeypatch.setenv("ISSUER__CURRENCY", "ABC")
    monkeypatch.setenv("LIMITS__MAX_BATCH_ITEMS", "10")
    monkeypatch.setenv("LEDGER__ENDPOINT", "wss://example.invalid:51233")

    settings = Settings(_env_file=None)

    assert settings.issuer.address == "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh"
    assert settings.currency == "ABC"
    assert settings.max_batch_items == 10
    assert settings.ledger.endpoint == "wss://example.invalid:51233"
    assert settings.issuer.secret is None


def test_wallet_signing_needs_both_credentials():
    assert not WalletSigningSettings().configured
    assert not WalletSigningSettings(api_key="key").configured
    assert not WalletSigningSettings(api_key="key", api_secret="").configured
    assert WalletSigningSettings(api_key="key", api_secret="secret").configured
