"""
TradeTrackr - P&L Calculations
==============================
Derives the missing half of a trade's P&L (percentage or money) from the
other half and the account's reference balance, and checks stored pairs for
consistency.

Every function here is pure: no I/O, no shared state. The reference balance
is always passed in by the caller.

Usage:
    from pnl_calculations import reconcile, validate_consistency

    result = reconcile(money=500, balance=1000)
    # PnLResult(percentage=50.0, money=500)

    validate_consistency(money=100, percentage=10, balance=1000)  # True

Rounding:
    Derived values are rounded to 2 decimals, half away from zero
    (0.125 -> 0.13, -0.125 -> -0.13). Pass-through values are never rounded.

Author: TradeTrackr Team
"""
import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional

from config import DEFAULT_ACCOUNT_BALANCE, DEFAULT_TOLERANCE, MONEY_DECIMALS, PERCENTAGE_DECIMALS


@dataclass(frozen=True)
class PnLResult:
    """Complete P&L pair for a single trade"""
    percentage: float
    money: float

    def to_dict(self) -> dict:
        """Row shape as stored on the trades table"""
        return {
            'pnl_percentage': self.percentage,
            'pnl_money': self.money,
        }


def round_half_up(value: float, decimals: int = 2) -> float:
    """
    Round to a fixed number of decimals, ties away from zero.

    Goes through the float's shortest decimal repr so 1.005 rounds as
    written (1.01) instead of as stored in binary.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-decimals)
    exact = Decimal(str(value))
    with localcontext() as ctx:
        # Room for every integer digit plus the requested decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + decimals + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def derive_percentage_from_money(money: float, balance: float) -> float:
    """
    Percentage return of `money` against `balance`.

    A non-positive balance is treated as unknown and yields 0.
    """
    if balance <= 0:
        return 0
    return (money / balance) * 100


def derive_money_from_percentage(percentage: float, balance: float) -> float:
    """Money return for `percentage` of `balance`. No balance guard."""
    return (balance * percentage) / 100


def reconcile(
    money: Optional[float] = None,
    percentage: Optional[float] = None,
    balance: float = DEFAULT_ACCOUNT_BALANCE
) -> PnLResult:
    """
    Fill in whichever of money/percentage is missing.

    None means "not provided" and is distinct from 0.

    Args:
        money: P&L in account currency, or None
        percentage: P&L in percent of balance, or None
        balance: Reference account balance

    Returns:
        PnLResult with both fields set
    """
    if money is not None and percentage is None:
        derived = derive_percentage_from_money(money, balance)
        return PnLResult(percentage=round_half_up(derived, PERCENTAGE_DECIMALS), money=money)

    if percentage is not None and money is None:
        derived = derive_money_from_percentage(percentage, balance)
        return PnLResult(percentage=percentage, money=round_half_up(derived, MONEY_DECIMALS))

    if money is not None and percentage is not None:
        # Both known: trust the stored pair as-is
        return PnLResult(percentage=percentage, money=money)

    return PnLResult(percentage=0, money=0)


def validate_consistency(
    money: float,
    percentage: float,
    balance: float,
    tolerance: float = DEFAULT_TOLERANCE
) -> bool:
    """
    Check that a stored money/percentage pair agree for `balance`.

    Args:
        money: Stored P&L in account currency
        percentage: Stored P&L in percent
        balance: Reference account balance
        tolerance: Allowed gap in percentage points

    Returns:
        True if |expected% - percentage| <= tolerance
    """
    expected_percentage = derive_percentage_from_money(money, balance)
    return abs(expected_percentage - percentage) <= tolerance


def resolve_account_balance(stored_balance: Optional[float]) -> float:
    """
    Balance to use for a profile.

    Missing or zero balances fall back to the default starting balance,
    matching how profiles are created.
    """
    if not stored_balance:
        return DEFAULT_ACCOUNT_BALANCE
    return stored_balance
