"""
TradeTrackr - Pip & Position Size Calculations
==============================================
Pip values per instrument, pip P&L derived from money P&L, and position
sizing from a risk percentage and stop distance.

Author: TradeTrackr Team
"""
from dataclasses import dataclass
from typing import Optional

from config import (
    CONTRACT_SIZE_TIERS,
    INDICES,
    JPY_PAIRS,
    LOT_SIZE_DECIMALS,
    MAJOR_PAIRS,
    METALS,
    PIPS_DECIMALS,
    STANDARD_LOT_UNITS,
)
from pnl_calculations import derive_money_from_percentage, round_half_up


@dataclass(frozen=True)
class LotSizeResult:
    """Output of the position size calculator"""
    lot_size: float = 0.0
    risk_amount: float = 0.0
    pips_at_risk: float = 0.0
    pip_value: float = 0.0


def normalize_pair(pair: Optional[str]) -> str:
    """'eur/usd ' -> 'EURUSD'"""
    if not pair:
        return ''
    return pair.upper().replace('/', '').replace(' ', '').strip()


def get_contract_size(balance: float) -> int:
    """
    Contract size traded by an account of this balance.

    Args:
        balance: Account balance

    Returns:
        Units per position (100000 / 10000 / 1000)
    """
    for minimum, units in CONTRACT_SIZE_TIERS:
        if balance >= minimum:
            return units
    return CONTRACT_SIZE_TIERS[-1][1]


def get_pip_value(pair: Optional[str], balance: float) -> float:
    """
    Money value of one pip for the account's contract size.

    Unknown symbols are priced like a major pair. An empty pair has no
    pip value.
    """
    symbol = normalize_pair(pair)
    if not symbol:
        return 0

    size = get_contract_size(balance)

    if symbol in JPY_PAIRS:
        return (size * 0.01) / 100
    if symbol in MAJOR_PAIRS:
        return (size * 0.0001) / 10
    if symbol in METALS:
        if symbol == 'XAUUSD':
            return size * 0.01 / 100
        return size * 0.001 / 100
    if symbol in INDICES:
        return size * 0.1 / 100
    return (size * 0.0001) / 10


def derive_pips_from_money(money: float, pair: Optional[str], balance: float) -> Optional[float]:
    """Pips earned/lost for `money`, or None when the pip value is unknown."""
    pip_value = get_pip_value(pair, balance)
    if pip_value <= 0:
        return None
    return round_half_up(money / pip_value, PIPS_DECIMALS)


def get_pips_at_risk(pair: Optional[str], entry_price: float, stop_loss: float) -> float:
    """Stop distance in pips (JPY pairs quote to 2 decimals, others to 4)"""
    distance = abs(entry_price - stop_loss)
    if normalize_pair(pair) in JPY_PAIRS:
        return distance * 100
    return distance * 10000


def get_standard_lot_pip_value(pair: Optional[str], lots: float = 1) -> float:
    """Pip value for `lots` standard lots"""
    if normalize_pair(pair) in JPY_PAIRS:
        return lots * STANDARD_LOT_UNITS * 0.01
    return lots * STANDARD_LOT_UNITS * 0.0001


def calculate_lot_size(
    balance: float,
    risk_percentage: float,
    entry_price: Optional[float],
    stop_loss: Optional[float],
    pair: Optional[str]
) -> LotSizeResult:
    """
    Position size that risks `risk_percentage` of `balance` at the stop.

    Args:
        balance: Account balance
        risk_percentage: Percent of balance to risk (2 = 2%)
        entry_price: Planned entry
        stop_loss: Planned stop
        pair: Instrument symbol

    Returns:
        LotSizeResult; all zeros when entry/stop are missing or equal
    """
    if not entry_price or not stop_loss or entry_price == stop_loss:
        return LotSizeResult()

    risk_amount = derive_money_from_percentage(risk_percentage, balance)
    pips_at_risk = get_pips_at_risk(pair, entry_price, stop_loss)

    pip_value = get_standard_lot_pip_value(pair)
    lot_size = risk_amount / (pips_at_risk * pip_value)

    return LotSizeResult(
        lot_size=round_half_up(lot_size, LOT_SIZE_DECIMALS),
        risk_amount=risk_amount,
        pips_at_risk=pips_at_risk,
        pip_value=pip_value,
    )
