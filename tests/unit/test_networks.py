"""Unit tests for network configuration lookup."""

import pytest

from appointment_deployments.exceptions import NetworkNotFoundError
from appointment_deployments.networks import get_network_config


class TestGetNetworkConfig:
    """Test the get_network_config function."""

    def test_localhost_defaults(self, monkeypatch):
        monkeypatch.delenv("LOCALHOST_RPC_URL", raising=False)

        config = get_network_config("localhost")

        assert config.name == "localhost"
        assert config.chain_id == 31337
        assert config.rpc_url == "http://127.0.0.1:8545"
        assert config.auto_mine is True
        assert config.live is False
        assert config.address_url("0x5FbDB2315678afecb367f032d93F642f64180aa3") is None

    def test_explicit_rpc_url_wins(self, monkeypatch):
        monkeypatch.setenv("LOCALHOST_RPC_URL", "http://env.example.com")

        config = get_network_config("localhost", rpc_url="http://explicit.example.com")

        assert config.rpc_url == "http://explicit.example.com"

    def test_env_rpc_url_overrides_default(self, monkeypatch):
        monkeypatch.setenv("LOCALHOST_RPC_URL", "http://env.example.com")

        assert get_network_config("localhost").rpc_url == "http://env.example.com"

    def test_sepolia_requires_rpc_url(self, monkeypatch):
        monkeypatch.delenv("SEP_RPC_URL", raising=False)

        with pytest.raises(ValueError) as exc_info:
            get_network_config("sepolia")

        assert "SEP_RPC_URL" in str(exc_info.value)

    def test_sepolia_from_env(self, monkeypatch):
        monkeypatch.setenv("SEP_RPC_URL", "https://sepolia.example.com")

        config = get_network_config("sepolia")

        assert config.chain_id == 11155111
        assert config.live is True
        assert config.address_url("0xabc") == "https://sepolia.etherscan.io/address/0xabc"

    def test_unknown_network_raises_error(self):
        with pytest.raises(NetworkNotFoundError) as exc_info:
            get_network_config("invalid_network")

        assert "invalid_network" in str(exc_info.value)
