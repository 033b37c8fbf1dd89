"""
TradeTrackr Configuration
=========================

Centralized constants for P&L derivation, instrument tables and utility
functions. Single source of truth to avoid inconsistencies across modules.

Author: TradeTrackr Team
Version: 1.0
"""

import logging
import os
from datetime import datetime, timezone
from typing import Optional

# =============================================================================
# P&L DEFAULTS
# =============================================================================

# Reference balance used when the caller has none (new profiles start here)
DEFAULT_ACCOUNT_BALANCE = 1000.0

# Consistency tolerance in percentage points (0.01 = 0.01pp, not 1%)
DEFAULT_TOLERANCE = 0.01

MONEY_DECIMALS = 2
PERCENTAGE_DECIMALS = 2
PIPS_DECIMALS = 1
LOT_SIZE_DECIMALS = 2

# =============================================================================
# INSTRUMENTS
# =============================================================================

JPY_PAIRS = ['USDJPY', 'EURJPY', 'GBPJPY', 'AUDJPY', 'NZDJPY', 'CADJPY', 'CHFJPY']
MAJOR_PAIRS = ['EURUSD', 'GBPUSD', 'USDJPY', 'AUDUSD', 'USDCAD', 'USDCHF', 'NZDUSD']
METALS = ['XAUUSD', 'XAGUSD', 'XPTUSD', 'XPDUSD']
INDICES = ['US30', 'NAS100', 'SPX500', 'GER40', 'UK100', 'JPN225']

# Contract size by account balance: (minimum balance, units)
CONTRACT_SIZE_TIERS = [
    (10000, 100000),
    (1000, 10000),
    (0, 1000),
]

STANDARD_LOT_UNITS = 100000

# =============================================================================
# TRADE RESULTS
# =============================================================================

RESULT_WIN = 'win'
RESULT_LOSS = 'loss'
RESULT_BREAKEVEN = 'be'

RESULT_ALIASES = {
    'win': RESULT_WIN,
    'loss': RESULT_LOSS,
    'be': RESULT_BREAKEVEN,
    'breakeven': RESULT_BREAKEVEN,
}


def normalize_result(value: Optional[str]) -> Optional[str]:
    """
    Map a stored result label to its canonical code.

    Handles legacy capitalized labels ('Win', 'BE', 'Breakeven') and
    surrounding whitespace.

    Args:
        value: Raw result label or None

    Returns:
        'win', 'loss', 'be', or None if unrecognized
    """
    if not isinstance(value, str):
        return None
    return RESULT_ALIASES.get(value.strip().lower())


# =============================================================================
# DATETIME UTILITIES - Standardized UTC handling
# =============================================================================

def utc_now() -> datetime:
    """
    Get current UTC time (timezone-aware).

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(timezone.utc)


# =============================================================================
# ENVIRONMENT CONFIGURATION
# =============================================================================

def get_log_level() -> int:
    """Resolve LOG_LEVEL from environment, falling back to INFO."""
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.INFO


def setup_logging(level: Optional[int] = None):
    """Configure root logging once for scripts and services using the toolkit"""
    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
    )


# =============================================================================
# EXPORTS
# =============================================================================

__all__ = [
    # P&L defaults
    'DEFAULT_ACCOUNT_BALANCE',
    'DEFAULT_TOLERANCE',
    'MONEY_DECIMALS',
    'PERCENTAGE_DECIMALS',
    'PIPS_DECIMALS',
    'LOT_SIZE_DECIMALS',

    # Instruments
    'JPY_PAIRS',
    'MAJOR_PAIRS',
    'METALS',
    'INDICES',
    'CONTRACT_SIZE_TIERS',
    'STANDARD_LOT_UNITS',

    # Results
    'RESULT_WIN',
    'RESULT_LOSS',
    'RESULT_BREAKEVEN',
    'RESULT_ALIASES',
    'normalize_result',

    # Datetime utilities
    'utc_now',

    # Environment
    'get_log_level',
    'setup_logging',
]
