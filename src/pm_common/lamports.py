"""Checked u64 arithmetic for lamport amounts.

All amounts, fees, and balances are int lamports bounded to the unsigned
64-bit range. No float, no Decimal. Every operation that can leave the range
raises instead of wrapping.
"""

from src.pm_common.errors import ArithmeticOverflowError, ArithmeticUnderflowError

U64_MAX = 2**64 - 1
LAMPORTS_PER_SOL = 1_000_000_000
BASIS_POINTS_DIVISOR = 10000


def ensure_u64(value: int, label: str = "value") -> int:
    """Return value unchanged if it fits in u64, else raise."""
    if value < 0:
        raise ArithmeticUnderflowError(f"{label}={value} is negative")
    if value > U64_MAX:
        raise ArithmeticOverflowError(f"{label}={value} exceeds u64")
    return value


def checked_add(a: int, b: int) -> int:
    result = a + b
    if result > U64_MAX:
        raise ArithmeticOverflowError(f"{a} + {b}")
    return result


def checked_sub(a: int, b: int) -> int:
    if b > a:
        raise ArithmeticUnderflowError(f"{a} - {b}")
    return a - b


def checked_mul(a: int, b: int) -> int:
    result = a * b
    if result > U64_MAX:
        raise ArithmeticOverflowError(f"{a} * {b}")
    return result


def apply_bps(amount: int, bps: int) -> int:
    """Fee with floor division (payer never overpays).

    fee = floor(amount * bps / 10000), the product checked against u64.
    """
    return checked_mul(amount, bps) // BASIS_POINTS_DIVISOR


def apply_percent(amount: int, share: int) -> int:
    """floor(amount * share / 100) for creator shares (0-100)."""
    return checked_mul(amount, share) // 100


def lamports_to_display(lamports: int) -> str:
    """Convert lamports to display string: 1_500_000_000 -> '1.500000000 SOL'."""
    if lamports < 0:
        abs_lamports = -lamports
        return f"-{abs_lamports // LAMPORTS_PER_SOL:,}.{abs_lamports % LAMPORTS_PER_SOL:09d} SOL"
    return f"{lamports // LAMPORTS_PER_SOL:,}.{lamports % LAMPORTS_PER_SOL:09d} SOL"
