import pytest
from solders.pubkey import Pubkey

from tests.helpers.factories import RecordingDerive, make_pubkey


@pytest.fixture
def derive() -> RecordingDerive:
    return RecordingDerive()


@pytest.fixture
def mint() -> Pubkey:
    return make_pubkey(1)


@pytest.fixture
def authority() -> Pubkey:
    return make_pubkey(2)


@pytest.fixture
def owner() -> Pubkey:
    return make_pubkey(3)


@pytest.fixture
def delegate_key() -> Pubkey:
    return make_pubkey(4)
