"""Global enums — must match DB CHECK constraints exactly."""

from enum import Enum


class TransferKind(str, Enum):
    """Why a transfer in a payout plan exists; also its position in the payout order."""
    CREATOR_ROYALTY = "CREATOR_ROYALTY"
    BUY_SIDE_FEE = "BUY_SIDE_FEE"
    FEE_COLLECTOR_FEE = "FEE_COLLECTOR_FEE"
    PAYMENT_TARGET = "PAYMENT_TARGET"


class RemainderPolicy(str, Enum):
    """How the creator royalty remainder counter is seeded.

    UNREDUCED_SUM: pool - floor(sum(pool * share) / 100), as the on-chain program does.
    FLOORED_SUM:   pool - sum(floor(pool * share / 100)), largest-remainder style.
    """
    UNREDUCED_SUM = "UNREDUCED_SUM"
    FLOORED_SUM = "FLOORED_SUM"


class LedgerEntryType(str, Enum):
    DEPOSIT = "DEPOSIT"
    TRANSFER_OUT = "TRANSFER_OUT"
    TRANSFER_IN = "TRANSFER_IN"
