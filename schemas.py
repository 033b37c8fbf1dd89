"""
TradeTrackr - Payload Schemas
=============================
Explicit shapes for the rows and payloads the P&L tools consume and
produce. Database rows arrive as plain dicts and are validated here before
any derivation runs.

Author: TradeTrackr Team
"""
from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from config import normalize_result, utc_now


class TradeRecord(BaseModel):
    """Stored trade as read from the trades table"""
    id: Optional[Union[int, str]] = None
    pair: Optional[str] = None
    pnl_percentage: Optional[float] = None
    pnl_money: Optional[float] = None
    pnl_pips: Optional[float] = None
    result: Optional[str] = None  # win / loss / be

    @field_validator('result', mode='before')
    @classmethod
    def _canonical_result(cls, value):
        return normalize_result(value)

    @property
    def needs_recalculation(self) -> bool:
        """Has a percentage but is missing money or pips"""
        return self.pnl_percentage is not None and (
            self.pnl_money is None or self.pnl_pips is None
        )


class TradeUpdate(BaseModel):
    """Recalculated columns to write back for one trade"""
    id: Optional[Union[int, str]] = None
    pnl_money: float
    pnl_pips: Optional[float] = None


class UserStats(BaseModel):
    """Aggregate journal statistics (one row per user)"""
    user_id: Optional[str] = None
    total_trades: int = 0
    wins: int = 0
    losses: int = 0
    breakevens: int = 0
    win_rate: int = 0
    total_pnl_percentage: float = 0.0
    total_pnl_pips: float = 0.0
    total_pnl_money: float = 0.0
    current_balance: float = 0.0
    updated_at: datetime = Field(default_factory=utc_now)
