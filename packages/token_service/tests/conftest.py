"""
Shared fixtures for the token service tests.
"""
import pytest

from token_service.provider import set_provider
from token_service.reader import TokenReader
from token_service.tests.fakes import FakePriceFeed, FakeProvider, FakeSigner


@pytest.fixture(autouse=True)
def reset_global_provider():
    """Keep the process-wide provider handle isolated between tests."""
    set_provider(None)
    yield
    set_provider(None)


@pytest.fixture
def provider():
    """Provider without a signing account."""
    return FakeProvider()


@pytest.fixture
def signer():
    return FakeSigner()


@pytest.fixture
def signing_provider(signer):
    """Provider whose signer records sent transactions."""
    return FakeProvider(signer=signer)


@pytest.fixture
def price_feed():
    """Price feed with no prices."""
    return FakePriceFeed()


@pytest.fixture
def reader(provider, price_feed):
    return TokenReader(provider=provider, price_feed=price_feed)
