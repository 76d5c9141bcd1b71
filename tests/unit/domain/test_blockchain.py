"""
Unit tests for blockchain value object and address validation.

Usage:
    pytest tests/unit/domain/test_blockchain.py
"""

import pytest

from augure.domain.value_objects.blockchain import Blockchain, validate_wallet_address


class TestValidateWalletAddress:
    """Tests for wallet address format rules."""

    @pytest.mark.parametrize(
        "address",
        [
            "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa",
            "3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy",
            "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq",
        ],
    )
    def test_valid_bitcoin(self, address):
        assert validate_wallet_address(address, Blockchain.BITCOIN)

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "2A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa",
            "1short",
            "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNO",
            "0x742d35Cc6634C0532925a3b844Bc454e4438f44e",
            "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq\n",
            " 1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa",
        ],
    )
    def test_invalid_bitcoin(self, address):
        assert not validate_wallet_address(address, Blockchain.BITCOIN)

    @pytest.mark.parametrize(
        "address",
        [
            "0x742d35Cc6634C0532925a3b844Bc454e4438f44e",
            "0x" + "0" * 40,
            "0x" + "F" * 40,
        ],
    )
    def test_valid_ethereum(self, address):
        assert validate_wallet_address(address, "ethereum")

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "742d35Cc6634C0532925a3b844Bc454e4438f44e",
            "0x742d35Cc6634C0532925a3b844Bc454e4438f44",
            "0x742d35Cc6634C0532925a3b844Bc454e4438f44ez",
            "0xg42d35Cc6634C0532925a3b844Bc454e4438f44e",
            "0x" + "a" * 40 + "\n",
            "0x742d35Cc6634C0532925a3b844Bc454e4438f44e ",
        ],
    )
    def test_invalid_ethereum(self, address):
        assert not validate_wallet_address(address, Blockchain.ETHEREUM)

    def test_unknown_chain_raises(self):
        with pytest.raises(ValueError):
            validate_wallet_address("0x" + "0" * 40, "solana")


class TestBlockchain:
    """Tests for Blockchain enum helpers."""

    def test_display_name_and_ticker(self):
        assert Blockchain.BITCOIN.display_name == "Bitcoin"
        assert Blockchain.ETHEREUM.display_name == "Ethereum"
        assert Blockchain.BITCOIN.ticker == "BIT"
        assert Blockchain.ETHEREUM.ticker == "ETH"

    def test_string_value(self):
        assert Blockchain("bitcoin") is Blockchain.BITCOIN
        assert Blockchain.ETHEREUM == "ethereum"
