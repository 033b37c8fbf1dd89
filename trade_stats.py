"""
TradeTrackr - Trade Statistics & Recalculation
==============================================
Journal-level derivations built on the P&L reconciler:

- Recalculate money/pips for trades that only have a percentage
- Aggregate journal statistics (win rate, totals, current balance)
- Signed display formatting for P&L cards

Callers fetch rows and persist results; nothing here touches storage.

Usage:
    from trade_stats import recalculate_trades, compute_user_stats

    report = recalculate_trades(rows, balance=5000)
    for update in report.updates:
        save(update.id, update.pnl_money, update.pnl_pips)

    stats = compute_user_stats(rows, balance=5000, user_id=user_id)

Author: TradeTrackr Team
"""
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from pydantic import ValidationError

from config import (
    MONEY_DECIMALS,
    PERCENTAGE_DECIMALS,
    PIPS_DECIMALS,
    RESULT_BREAKEVEN,
    RESULT_LOSS,
    RESULT_WIN,
)
from pip_calculations import derive_pips_from_money
from pnl_calculations import derive_money_from_percentage, round_half_up
from schemas import TradeRecord, TradeUpdate, UserStats

logger = logging.getLogger("TRADE_STATS")

TradeRow = Union[TradeRecord, dict]


@dataclass
class RecalculationReport:
    """Outcome of a batch recalculation"""
    updates: List[TradeUpdate] = field(default_factory=list)
    unchanged: int = 0
    failed: List[Optional[Union[int, str]]] = field(default_factory=list)

    @property
    def trades_updated(self) -> int:
        return len(self.updates)


def _as_record(row: TradeRow) -> TradeRecord:
    if isinstance(row, TradeRecord):
        return row
    return TradeRecord.model_validate(row)


def _row_id(row: TradeRow):
    if isinstance(row, TradeRecord):
        return row.id
    if isinstance(row, dict):
        return row.get('id')
    return None


def _validated(trades: Iterable[TradeRow]):
    """Yield (raw_row, record) pairs; record is None for logged invalid rows"""
    for row in trades:
        try:
            yield row, _as_record(row)
        except (ValidationError, TypeError, ValueError) as e:
            logger.warning(f"⚠️ Skipping invalid trade row {_row_id(row)}: {e}")
            yield row, None


# ==================== RECALCULATION ====================

def recalculate_trade(trade: TradeRow, balance: float) -> TradeUpdate:
    """
    Money and pips for a trade from its stored percentage.

    Args:
        trade: Trade row with pnl_percentage set
        balance: Account balance the percentage refers to

    Returns:
        TradeUpdate with money rounded to cents and pips to 0.1

    Raises:
        ValueError: If the trade has no percentage
    """
    record = _as_record(trade)
    if record.pnl_percentage is None:
        raise ValueError(f"Trade {record.id} has no pnl_percentage")

    money = derive_money_from_percentage(record.pnl_percentage, balance)
    pips = derive_pips_from_money(money, record.pair, balance)

    return TradeUpdate(
        id=record.id,
        pnl_money=round_half_up(money, MONEY_DECIMALS),
        pnl_pips=pips,
    )


def recalculate_trades(trades: Iterable[TradeRow], balance: float) -> RecalculationReport:
    """
    Recalculate every trade that has a percentage but lacks money or pips.

    Invalid rows are logged and reported in `failed`; they never stop the
    batch.
    """
    report = RecalculationReport()

    for row, record in _validated(trades):
        if record is None:
            report.failed.append(_row_id(row))
            continue

        if not record.needs_recalculation:
            report.unchanged += 1
            continue

        update = recalculate_trade(record, balance)
        report.updates.append(update)

        pips_display = f"{update.pnl_pips:.1f}" if update.pnl_pips is not None else "N/A"
        logger.info(
            f"✅ Trade {record.id} recalculated: {record.pnl_percentage}% → "
            f"${update.pnl_money:.2f} → {pips_display} pips"
        )

    logger.info(
        f"🎉 Recalculation complete: {report.trades_updated} updated, "
        f"{report.unchanged} unchanged, {len(report.failed)} failed"
    )
    return report


# ==================== STATISTICS ====================

def compute_user_stats(
    trades: Iterable[TradeRow],
    balance: float,
    user_id: Optional[str] = None
) -> UserStats:
    """
    Aggregate statistics across all of a user's trades.

    Missing P&L fields count as 0. Win rate is a whole percentage of all
    valid trades, breakevens included in the denominator.

    Args:
        trades: Trade rows (dicts or TradeRecord)
        balance: Starting account balance
        user_id: Owner, copied onto the stats row

    Returns:
        UserStats ready to upsert
    """
    records = [record for _, record in _validated(trades) if record is not None]

    total_percentage = sum(t.pnl_percentage or 0 for t in records)
    total_pips = sum(t.pnl_pips or 0 for t in records)
    total_money = sum(t.pnl_money or 0 for t in records)

    total_trades = len(records)
    wins = sum(1 for t in records if t.result == RESULT_WIN)
    losses = sum(1 for t in records if t.result == RESULT_LOSS)
    breakevens = sum(1 for t in records if t.result == RESULT_BREAKEVEN)
    win_rate = int(round_half_up(wins / total_trades * 100, 0)) if total_trades > 0 else 0

    stats = UserStats(
        user_id=user_id,
        total_trades=total_trades,
        wins=wins,
        losses=losses,
        breakevens=breakevens,
        win_rate=win_rate,
        total_pnl_percentage=round_half_up(total_percentage, PERCENTAGE_DECIMALS),
        total_pnl_pips=round_half_up(total_pips, PIPS_DECIMALS),
        total_pnl_money=round_half_up(total_money, MONEY_DECIMALS),
        current_balance=balance + total_money,
    )

    logger.debug(
        f"📈 Stats: {win_rate}% ({wins}W/{losses}L/{breakevens}BE) | "
        f"{total_percentage:.2f}% | {total_pips:.1f} pips | ${total_money:.2f}"
    )
    return stats


# ==================== DISPLAY ====================

def pnl_direction(money: Optional[float], percentage: Optional[float]) -> str:
    """'gain', 'loss' or 'flat' for colouring a P&L card"""
    money = money or 0
    percentage = percentage or 0
    if money > 0 or percentage > 0:
        return 'gain'
    if money < 0 or percentage < 0:
        return 'loss'
    return 'flat'


def format_signed_money(money: float, decimals: int = 2) -> str:
    """+$12.50 / -$3.00"""
    sign = '+' if money >= 0 else '-'
    return f"{sign}${abs(money):.{decimals}f}"


def format_signed_percentage(percentage: float, decimals: int = 4) -> str:
    """+1.2500% / -0.5000%"""
    sign = '+' if percentage >= 0 else '-'
    return f"{sign}{abs(percentage):.{decimals}f}%"


def projected_balance(balance: float, money: Optional[float]) -> float:
    """Balance after booking `money`"""
    return balance + (money or 0)
