"""Shared fixtures: a fake ledger node and a wired application container."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from xrpl.wallet import Wallet

from iou_minter.core.config import DatabaseSettings, IssuerSettings, LimitSettings, Settings
from iou_minter.core.container import ApplicationContainer
from iou_minter.core.identity import load_issuing_identity
from iou_minter.domain.issuance import submitter as submitter_module
from iou_minter.main import create_app
from tests.helpers import FakeLedger, FakeSubmission


@pytest.fixture(scope="session")
def issuer_wallet() -> Wallet:
    return Wallet.create()


@pytest.fixture
def identity(issuer_wallet):
    return load_issuing_identity(issuer_wallet.seed, issuer_wallet.classic_address).identity


@pytest.fixture
def recipient() -> str:
    return Wallet.create().classic_address


@pytest.fixture
def fake_ledger() -> FakeLedger:
    return FakeLedger()


@pytest.fixture
def submission(monkeypatch) -> FakeSubmission:
    fake = FakeSubmission()
    monkeypatch.setattr(submitter_module, "autofill", fake.autofill)
    monkeypatch.setattr(submitter_module, "sign", fake.sign)
    monkeypatch.setattr(submitter_module, "submit_and_wait", fake.submit_and_wait)
    return fake


@pytest.fixture
def settings(issuer_wallet, tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        issuer=IssuerSettings(secret=issuer_wallet.seed, address=issuer_wallet.classic_address, currency="KFD"),
        limits=LimitSettings(max_batch_items=5, max_amount="1000000"),
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'minter.db'}"),
    )


@pytest.fixture
def container(settings, fake_ledger) -> ApplicationContainer:
    return ApplicationContainer.from_settings(settings, client_factory=fake_ledger.client_factory)


@pytest.fixture
def client(container, submission):
    with TestClient(create_app(container)) as test_client:
        yield test_client
