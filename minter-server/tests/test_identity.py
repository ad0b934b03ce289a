import pytest
from xrpl.wallet import Wallet

from iou_minter.core.config import IssuerSettings, Settings
from iou_minter.core.container import ApplicationContainer
from iou_minter.core.identity import load_issuing_identity
from iou_minter.domain.issuance import StartupConfigurationError


def test_matching_secret_and_address(issuer_wallet):
    check = load_issuing_identity(issuer_wallet.seed, issuer_wallet.classic_address)

    assert check.ok
    assert check.identity.address == issuer_wallet.classic_address
    assert check.identity.wallet.classic_address == issuer_wallet.classic_address


def test_address_mismatch_is_reported(issuer_wallet):
    other = Wallet.create().classic_address
    check = load_issuing_identity(issuer_wallet.seed, other)

    assert not check.ok
    assert check.identity is None
    assert other in check.error


@pytest.mark.parametrize("secret, address", [(None, "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh"), ("", None), (None, None)])
def test_missing_values_are_reported(secret, address):
    check = load_issuing_identity(secret, address)
    assert not check.ok
    assert check.error


def test_undecodable_secret_is_reported():
    check = load_issuing_identity("not-a-seed", "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh")
    assert not check.ok
    assert "ISSUER__SECRET" in check.error


def test_identity_repr_hides_key_material(issuer_wallet):
    identity = load_issuing_identity(issuer_wallet.seed, issuer_wallet.classic_address).identity
    assert issuer_wallet.seed not in repr(identity)


def test_container_refuses_mismatched_identity(issuer_wallet, tmp_path):
    settings = Settings(
        _env_file=None,
        issuer=IssuerSettings(secret=issuer_wallet.seed, address=Wallet.create().classic_address),
    )
    with pytest.raises(StartupConfigurationError):
        ApplicationContainer.from_settings(settings)


def test_entry_point_exits_on_bad_identity(monkeypatch):
    from iou_minter import __main__ as entry

    monkeypatch.setattr(entry, "get_settings", lambda: Settings(_env_file=None))
    monkeypatch.setattr(entry, "configure_logging", lambda level: None)
    with pytest.raises(SystemExit) as excinfo:
        entry.main()
    assert excinfo.value.code == 1
