"""
fan_token - Fan Token Ledger

A single-asset token ledger with a staked sub-ledger, a supply cap and an
admin-controlled pause switch.

Usage:
    from fan_token import TokenLedger, Ok, Err, ErrorCode

    ledger = TokenLedger("admin")
    ledger.mint("admin", "alice", 1000)          # Ok(True)
    ledger.stake("alice", 600)                   # Ok(True)
    ledger.set_paused("admin", True)             # Ok(True)
    ledger.transfer("alice", "bob", 10)          # Err(104 PAUSED)
"""

# Core types
from .core import (
    TokenView,
    LedgerState,
    PendingUpdate,
    Ok,
    Err,
    Result,
    ErrorCode,
    AccountId,
    Amount,
    LedgerError,
    InvariantViolation,
    UnknownOperation,
    check_account,
    check_amount,
    MAX_SUPPLY,
    UINT128_MAX,
    ZERO_ADDRESS,
    DEFAULT_ADMIN,
)

# Pure transitions
from .operations import (
    is_authorized_admin,
    compute_set_paused,
    compute_mint,
    compute_transfer,
    compute_burn,
    compute_stake,
    compute_unstake,
)

# Ledger
from .ledger import TokenLedger

# Host
from .host import ContractHost, ENTRY_POINTS, READ_ONLY

__all__ = [
    # Core
    'TokenView', 'LedgerState', 'PendingUpdate',
    'Ok', 'Err', 'Result', 'ErrorCode', 'AccountId', 'Amount',
    'LedgerError', 'InvariantViolation', 'UnknownOperation',
    'check_account', 'check_amount',
    'MAX_SUPPLY', 'UINT128_MAX', 'ZERO_ADDRESS', 'DEFAULT_ADMIN',
    # Transitions
    'is_authorized_admin', 'compute_set_paused', 'compute_mint',
    'compute_transfer', 'compute_burn', 'compute_stake', 'compute_unstake',
    # Ledger
    'TokenLedger',
    # Host
    'ContractHost', 'ENTRY_POINTS', 'READ_ONLY',
]

__version__ = '1.0.0'
