"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Payment manager configuration
  2xxx: Checked arithmetic
  3xxx: Royalty metadata
  4xxx: Accounts
  5xxx: Transfers
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Payment manager configuration ---

class PaymentManagerExistsError(AppError):
    def __init__(self, name: str) -> None:
        super().__init__(1001, f"Payment manager already exists: {name}", 409)


class PaymentManagerNotFoundError(AppError):
    def __init__(self, name: str) -> None:
        super().__init__(1002, f"Payment manager not found: {name}", 404)


class InvalidAuthorityError(AppError):
    def __init__(self, name: str) -> None:
        super().__init__(1003, f"Caller is not the authority of payment manager {name}", 403)


class InvalidBasisPointsError(AppError):
    def __init__(self, field: str, value: int) -> None:
        super().__init__(1004, f"Invalid basis points for {field}: {value}", 422)


class InvalidFeeCollectorError(AppError):
    def __init__(self, expected: str, got: str) -> None:
        super().__init__(
            1005,
            f"Invalid fee collector: expected {expected}, got {got}",
            422,
        )


# --- 2xxx: Checked arithmetic ---

class ArithmeticOverflowError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(2001, f"Arithmetic overflow: {detail}", 422)


class ArithmeticUnderflowError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(2002, f"Arithmetic underflow: {detail}", 422)


# --- 3xxx: Royalty metadata ---

class InvalidMintMetadataOwnerError(AppError):
    def __init__(self, owner: str) -> None:
        super().__init__(3001, f"Mint metadata is owned by unexpected program {owner}", 422)


class InvalidMintMetadataError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(3002, f"Invalid mint metadata: {detail}", 422)


# --- 4xxx: Accounts ---

class MissingAccountError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(4001, f"Missing account: {detail}", 422)


class LedgerAccountNotFoundError(AppError):
    def __init__(self, identity: str) -> None:
        super().__init__(4002, f"Ledger account not found: {identity}", 404)


# --- 5xxx: Transfers ---

class TransferFailedError(AppError):
    def __init__(self, destination: str, amount: int, reason: str) -> None:
        super().__init__(
            5001,
            f"Transfer of {amount} to {destination} failed: {reason}",
            422,
        )


class InsufficientBalanceError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            5002,
            f"Insufficient balance: required {required} lamports, available {available} lamports",
            422,
        )


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
