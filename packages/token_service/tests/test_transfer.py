"""
Tests for native and ERC20 transfers.
"""
import pytest

from token_service.erc20 import to_checksum
from token_service.exceptions import (
    InvalidAmountError,
    ProviderUnavailableError,
    SignerUnavailableError,
)
from token_service.networks import ZERO_ADDRESS
from token_service.provider import set_provider
from token_service.reader import TokenReader
from token_service.tests.fakes import (
    CONTRACT_TX_HASH,
    NATIVE_TX_HASH,
    RECIPIENT,
    FakePriceFeed,
    FakeProvider,
)
from token_service.transfer import transfer_token


CUSD = "0x" + "11" * 20


class TestNativeTransfer:
    """Transfers of the native coin, addressed by the zero address."""

    @pytest.mark.asyncio
    async def test_native_transfer(self, signing_provider, signer):
        """Test that a native transfer sends a value transaction in wei."""
        tx_hash = await transfer_token(ZERO_ADDRESS, RECIPIENT, "1.5", provider=signing_provider)

        assert tx_hash == NATIVE_TX_HASH
        assert signer.sent == [{"to": RECIPIENT, "value": 1_500_000_000_000_000_000}]

    @pytest.mark.asyncio
    async def test_native_transfer_makes_no_contract_call(self, signing_provider, signer):
        """Test that a native transfer never touches a contract."""
        await transfer_token(ZERO_ADDRESS, RECIPIENT, "0.01", provider=signing_provider)

        assert signing_provider.contract_requests == []
        assert signer.contract_calls == []

    @pytest.mark.asyncio
    async def test_malformed_amount_raises(self, signing_provider, signer):
        """Test that a malformed amount raises before anything is sent."""
        with pytest.raises(InvalidAmountError):
            await transfer_token(ZERO_ADDRESS, RECIPIENT, "1,5", provider=signing_provider)

        assert signer.sent == []


class TestERC20Transfer:
    """Transfers through the token contract's transfer function."""

    @pytest.mark.asyncio
    async def test_erc20_transfer_scales_by_decimals(self, signing_provider, signer):
        """Test that the amount is scaled by the token's own decimals."""
        token = signing_provider.add_token(CUSD, decimals=6)

        tx_hash = await transfer_token(CUSD, RECIPIENT, "2.5", provider=signing_provider)

        assert tx_hash == CONTRACT_TX_HASH
        assert signer.sent == []
        [call] = signer.contract_calls
        assert call.fn_name == "transfer"
        assert call.args == (to_checksum(RECIPIENT), 2_500_000)
        assert token.calls == ["decimals", "transfer"]

    @pytest.mark.asyncio
    async def test_too_many_decimals_raises(self, signing_provider, signer):
        """Test that more fractional digits than the token supports raises."""
        signing_provider.add_token(CUSD, decimals=2)

        with pytest.raises(InvalidAmountError, match="Too many decimals"):
            await transfer_token(CUSD, RECIPIENT, "1.001", provider=signing_provider)

        assert signer.contract_calls == []

    @pytest.mark.asyncio
    async def test_decimals_failure_propagates(self, signing_provider, signer):
        """Test that a failing decimals() call aborts the transfer."""
        signing_provider.add_token(CUSD, failing={"decimals"})

        with pytest.raises(Exception, match="decimals reverted"):
            await transfer_token(CUSD, RECIPIENT, "1", provider=signing_provider)

        assert signer.contract_calls == []


class TestTransferErrors:
    """Missing signer or provider, and delegation from the reader."""

    @pytest.mark.asyncio
    async def test_without_signer(self, provider):
        """Test that a provider without an account raises SignerUnavailableError."""
        with pytest.raises(SignerUnavailableError):
            await transfer_token(ZERO_ADDRESS, RECIPIENT, "1", provider=provider)

    @pytest.mark.asyncio
    async def test_without_provider(self):
        """Test that no provider at all raises ProviderUnavailableError."""
        with pytest.raises(ProviderUnavailableError):
            await transfer_token(ZERO_ADDRESS, RECIPIENT, "1")

    @pytest.mark.asyncio
    async def test_uses_global_provider(self, signer):
        """Test that the process-wide provider is used when none is passed."""
        set_provider(FakeProvider(signer=signer))

        assert await transfer_token(ZERO_ADDRESS, RECIPIENT, "1") == NATIVE_TX_HASH

    @pytest.mark.asyncio
    async def test_reader_delegates(self, signing_provider, signer):
        """Test that TokenReader.transfer_token sends through its provider."""
        reader = TokenReader(signing_provider, FakePriceFeed())

        tx_hash = await reader.transfer_token(ZERO_ADDRESS, RECIPIENT, "3")

        assert tx_hash == NATIVE_TX_HASH
        assert signer.sent[0]["value"] == 3 * 10 ** 18
