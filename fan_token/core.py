"""
Core types and pure helpers for the fan token ledger.

This module provides the foundational data structures and protocols for the ledger:
1. Protocols: TokenView for read-only ledger access
2. Result types: Ok and Err, the tagged outcome of every entry point
3. State: LedgerState (the mutable ledger tuple) and PendingUpdate (an intent)
4. Exceptions: LedgerError and its subclasses
5. Constants: MAX_SUPPLY, ZERO_ADDRESS and the stable numeric error codes

Nothing in this module mutates a ledger. Business-rule failures are values
(Err), never exceptions; exceptions signal programming errors or logic defects.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
import copy
import hashlib
from typing import (
    Dict, Optional, Any, Protocol, Tuple, Union, runtime_checkable
)


# ============================================================================
# CONSTANTS
# ============================================================================

# Hard cap on total supply, in whole token units.
MAX_SUPPLY = 100_000_000

# Width of an on-chain unsigned amount. Larger values are malformed input.
UINT128_MAX = (1 << 128) - 1

# Reserved burn address. It can never receive tokens.
ZERO_ADDRESS = "SP000000000000000000002Q6VF78"

# Admin principal used by the demo and the test fixtures.
DEFAULT_ADMIN = "ST1ADMIN00000000000000000000000000000000"


# ============================================================================
# TYPE ALIASES
# ============================================================================

# Opaque principal identifier. Only equality is interpreted.
AccountId = str

# Non-negative integer token quantity.
Amount = int

# Mapping from account to quantity (balances or staked).
AmountMap = Dict[AccountId, Amount]


# ============================================================================
# ERROR CODES
# ============================================================================

class ErrorCode(IntEnum):
    """
    Stable numeric error codes returned in Err results.

    The numeric values are part of the contract's public interface and
    must never be renumbered.
    """
    NOT_AUTHORIZED = 100
    INSUFFICIENT_BALANCE = 101
    INSUFFICIENT_STAKE = 102
    MAX_SUPPLY_REACHED = 103
    PAUSED = 104
    ZERO_ADDRESS = 105


# ============================================================================
# EXCEPTIONS
# ============================================================================

class LedgerError(Exception):
    """Base exception for all ledger-related errors."""
    pass


class InvariantViolation(LedgerError):
    """Raised when applying an update would break a ledger invariant."""
    pass


class UnknownOperation(LedgerError):
    """Raised when a host is asked to dispatch an entry point that does not exist."""
    pass


# ============================================================================
# RESULT TYPES
# ============================================================================

@dataclass(frozen=True, slots=True)
class Ok:
    """Successful outcome carrying the entry point's return value."""
    value: Any

    def is_ok(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err:
    """
    Failed outcome carrying one of the stable error codes.

    Plain integers are accepted and coerced, so Err(104) == Err(ErrorCode.PAUSED).
    """
    code: ErrorCode

    def __post_init__(self):
        object.__setattr__(self, 'code', ErrorCode(self.code))

    def is_ok(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Err({int(self.code)} {self.code.name})"


Result = Union[Ok, Err]


# ============================================================================
# INPUT VALIDATION
# ============================================================================

def check_account(account: Any, label: str = "account") -> AccountId:
    """
    Validate an account identifier.

    Raises:
        ValueError: If the identifier is not a non-empty string.
    """
    if not isinstance(account, str):
        raise ValueError(f"{label} must be str, got {type(account).__name__}")
    if not account.strip():
        raise ValueError(f"{label} cannot be empty")
    return account


def check_amount(amount: Any, label: str = "amount") -> Amount:
    """
    Validate a token amount.

    Amounts are unsigned 128-bit integers. Zero is allowed.

    Raises:
        ValueError: If the amount is not an int, is a bool, is negative,
                    or does not fit in 128 bits.
    """
    # bool is a subclass of int; True is not a quantity
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"{label} must be int, got {type(amount).__name__}")
    if amount < 0:
        raise ValueError(f"{label} must be non-negative, got {amount}")
    if amount > UINT128_MAX:
        raise ValueError(f"{label} exceeds 128-bit range: {amount}")
    return amount


# ============================================================================
# PROTOCOLS
# ============================================================================

@runtime_checkable
class TokenView(Protocol):
    """
    Read-only interface to ledger state.

    Pure transition functions accept a TokenView to declare that they only
    read. TokenLedger implements this protocol but also provides mutation
    methods. For testing, FakeView provides a minimal implementation.
    """

    @property
    def admin(self) -> AccountId:
        """The single privileged principal."""
        ...

    @property
    def paused(self) -> bool:
        """Whether transfer, burn, stake and unstake are disabled."""
        ...

    @property
    def total_supply(self) -> Amount:
        """Tokens in circulation: all balances plus all staked amounts."""
        ...

    @property
    def max_supply(self) -> Amount:
        """Upper bound on total_supply."""
        ...

    @property
    def zero_address(self) -> AccountId:
        """Reserved identifier that can never receive tokens."""
        ...

    def get_balance(self, account: AccountId) -> Amount:
        """Spendable balance, 0 if the account has never held tokens."""
        ...

    def get_staked(self, account: AccountId) -> Amount:
        """Staked balance, 0 if the account has never staked."""
        ...


# ============================================================================
# LEDGER STATE
# ============================================================================

def _canonicalize(value: Any) -> str:
    """
    Produce a canonical string representation of a value for hashing.

    Dict ordering does not affect the output.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return f"N:{value}"
    if isinstance(value, str):
        return f"S:{value}"
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda kv: str(kv[0]))
        serialized = ",".join(f"{_canonicalize(k)}:{_canonicalize(v)}" for k, v in items)
        return f"{{{serialized}}}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_canonicalize(item) for item in value) + "]"
    return f"R:{repr(value)}"


@dataclass
class LedgerState:
    """
    The complete mutable state of one deployed token contract.

    Attributes:
        admin: Principal allowed to mint and pause. Fixed at construction.
        paused: Mode flag gating transfer, burn, stake and unstake.
        total_supply: Sum of all balances plus all staked amounts.
        balances: Spendable balance per account. Absent means 0.
        staked: Locked balance per account. Absent means 0.
    """
    admin: AccountId
    paused: bool = False
    total_supply: Amount = 0
    balances: AmountMap = field(default_factory=dict)
    staked: AmountMap = field(default_factory=dict)

    def balance_of(self, account: AccountId) -> Amount:
        """Spendable balance, defaulting to 0 on a lookup miss."""
        return self.balances.get(account, 0)

    def staked_of(self, account: AccountId) -> Amount:
        """Staked balance, defaulting to 0 on a lookup miss."""
        return self.staked.get(account, 0)

    def copy(self) -> LedgerState:
        """Return a fully independent copy."""
        return copy.deepcopy(self)

    def fingerprint(self) -> str:
        """
        Deterministic content hash of the state.

        Zero-valued entries are dropped first, so an account that was
        credited and fully debited hashes the same as one never touched.
        """
        content = {
            'admin': self.admin,
            'paused': self.paused,
            'total_supply': self.total_supply,
            'balances': {a: q for a, q in self.balances.items() if q},
            'staked': {a: q for a, q in self.staked.items() if q},
        }
        return hashlib.sha256(_canonicalize(content).encode()).hexdigest()[:16]


# ============================================================================
# PENDING UPDATE
# ============================================================================

@dataclass(frozen=True, slots=True)
class PendingUpdate:
    """
    The effect of an accepted transition, before it is applied - represents INTENT.

    Created by the pure compute_* functions and applied by TokenLedger.apply().
    Map entries hold absolute post-values and are written in order, so a
    later entry for the same account wins.

    Attributes:
        operation: Entry point name (e.g. "mint", "transfer")
        caller: Principal that invoked the entry point
        balances: Ordered (account, new_balance) writes
        staked: Ordered (account, new_staked) writes
        total_supply: New total supply, or None if unchanged
        paused: New paused flag, or None if unchanged
        value: Payload returned as Ok(value) once applied
    """
    operation: str
    caller: AccountId
    balances: Tuple[Tuple[AccountId, Amount], ...] = ()
    staked: Tuple[Tuple[AccountId, Amount], ...] = ()
    total_supply: Optional[Amount] = None
    paused: Optional[bool] = None
    value: Any = True

    def final_balances(self) -> AmountMap:
        """Collapse ordered balance writes into their final values."""
        return dict(self.balances)

    def final_staked(self) -> AmountMap:
        """Collapse ordered staked writes into their final values."""
        return dict(self.staked)

    def __repr__(self) -> str:
        parts = [f"{self.operation} by {self.caller}"]
        for account, qty in self.balances:
            parts.append(f"bal[{account}]={qty}")
        for account, qty in self.staked:
            parts.append(f"stk[{account}]={qty}")
        if self.total_supply is not None:
            parts.append(f"supply={self.total_supply}")
        if self.paused is not None:
            parts.append(f"paused={self.paused}")
        return f"PendingUpdate({', '.join(parts)})"
