"""Unit tests for constructor argument encoding."""

from pathlib import Path

import pytest

from appointment_deployments.artifacts import load_artifact
from appointment_deployments.creator import build_constructor, connect
from appointment_deployments.exceptions import DeploymentError
from appointment_deployments.types import ContractArtifact

# Never contacted: binding constructor arguments is local
RPC_URL = "http://127.0.0.1:8545"


@pytest.fixture
def w3():
    return connect(RPC_URL)


class TestBuildConstructor:
    """Test the build_constructor function."""

    def test_uint256_fee(self, w3, artifacts_dir: Path):
        artifact = load_artifact("ProviderRegistry", artifacts_dir)

        constructor = build_constructor(w3, artifact, [100_000_000_000_000])

        assert constructor.data_in_transaction == artifact.bytecode + f"{100_000_000_000_000:064x}"

    def test_address(self, w3, artifacts_dir: Path):
        artifact = load_artifact("AppointmentScheduler", artifacts_dir)

        constructor = build_constructor(w3, artifact, ["0x5FbDB2315678afecb367f032d93F642f64180aa3"])

        encoded = constructor.data_in_transaction[len(artifact.bytecode):]
        assert encoded == "0" * 24 + "5fbdb2315678afecb367f032d93f642f64180aa3"

    def test_no_constructor_means_bare_bytecode(self, w3):
        artifact = ContractArtifact(name="Empty", abi=[], bytecode="0x6080")

        assert build_constructor(w3, artifact, []).data_in_transaction == "0x6080"

    def test_wrong_argument_count(self, w3, artifacts_dir: Path):
        artifact = load_artifact("ProviderRegistry", artifacts_dir)

        with pytest.raises(DeploymentError) as exc_info:
            build_constructor(w3, artifact, [])

        assert "ProviderRegistry" in str(exc_info.value)

    def test_malformed_address_is_deployment_error(self, w3, artifacts_dir: Path):
        """A truncated address, e.g. from a hand-edited record, fails before sending."""
        artifact = load_artifact("AppointmentScheduler", artifacts_dir)

        with pytest.raises(DeploymentError) as exc_info:
            build_constructor(w3, artifact, ["0x5FbDB2315678afecb367f032d93F642f6418"])

        assert "AppointmentScheduler constructor arguments" in str(exc_info.value)
        assert exc_info.value.__cause__ is not None

    def test_tuple_inputs(self, w3):
        artifact = ContractArtifact(
            name="WithStruct",
            abi=[
                {
                    "type": "constructor",
                    "stateMutability": "nonpayable",
                    "inputs": [
                        {
                            "name": "config",
                            "type": "tuple",
                            "components": [
                                {"name": "fee", "type": "uint256"},
                                {"name": "open", "type": "bool"},
                            ],
                        }
                    ],
                }
            ],
            bytecode="0x6080",
        )

        constructor = build_constructor(w3, artifact, [(5, True)])

        assert constructor.data_in_transaction == "0x6080" + f"{5:064x}" + f"{1:064x}"
