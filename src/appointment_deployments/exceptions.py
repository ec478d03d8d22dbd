"""Custom exception classes for appointment-deployments library."""


class DeploymentError(Exception):
    """Base exception; also raised when a contract creation transaction fails."""

    pass


class TransactionRevertedError(DeploymentError):
    """Raised when a creation transaction is mined with a failed status."""

    pass


class RPCError(DeploymentError, RuntimeError):
    """Raised when the JSON-RPC endpoint is unreachable or returns an error."""

    pass


class ReceiptTimeoutError(RPCError, TimeoutError):
    """Raised when a transaction receipt does not appear in time."""

    pass


class DeploymentNotFoundError(DeploymentError, LookupError):
    """Raised when a prerequisite deployment record does not exist."""

    pass


class AccountNotFoundError(DeploymentError, LookupError):
    """Raised when a named account cannot be resolved."""

    pass


class ArtifactNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when no deployable compiled artifact exists for a contract."""

    pass


class NetworkNotFoundError(DeploymentError, ValueError):
    """Raised when requested network is not configured."""

    pass


class DefectiveDeploymentError(DeploymentError, ValueError):
    """Raised when a stored deployment file is missing required fields."""

    pass
