from __future__ import annotations


class DomainError(Exception):
    """Base for swap domain errors."""


class InvalidSwapRequestError(DomainError):
    """Swap request does not satisfy the input contract."""


class AmountPrecisionError(InvalidSwapRequestError):
    """Amount has more fractional digits than the token supports."""


class UnsupportedNetworkError(DomainError):
    """Wallet network is not in the supported set."""


class MetadataUnavailableError(DomainError):
    """Token metadata could not be read on-chain."""


class NoRouteFoundError(DomainError):
    """Routing service found no viable path for the trade."""


class RoutingUnavailableError(DomainError):
    """Routing service could not be reached or answered with garbage."""


class ApprovalFailedError(DomainError):
    """Approval transaction reverted or could not be broadcast."""


class SwapSubmissionFailedError(DomainError):
    """Swap transaction could not be broadcast."""


class WalletProviderError(DomainError):
    """Base for failures raised by a wallet provider."""


class ContractReadError(WalletProviderError):
    """Read-only contract call failed."""


class TransactionSendError(WalletProviderError):
    """Transaction could not be built, signed or broadcast."""
