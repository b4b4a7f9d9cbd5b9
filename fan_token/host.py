"""
host.py - Contract Host Adapter

Owns the single TokenLedger of one deployed contract and serializes every
call against it, so each entry point is applied all-or-nothing relative to
every other caller.

Entry points are dispatched by their public contract names:

    host = ContractHost("ST1ADMIN...")
    host.call("ST1ADMIN...", "mint", "alice", 1000)     # Ok(True)
    host.call("alice", "set-paused", True)              # Err(100 NOT_AUTHORIZED)
    host.read("get-balance", "alice")                   # 1000

The snake_case Python method names are accepted as aliases.
"""

from __future__ import annotations
import threading
from typing import Any, Callable, Dict, Optional

from .core import AccountId, Result, UnknownOperation
from .ledger import TokenLedger


# Public entry point name -> TokenLedger method name
ENTRY_POINTS: Dict[str, str] = {
    'set-paused': 'set_paused',
    'mint': 'mint',
    'transfer': 'transfer',
    'burn': 'burn',
    'stake': 'stake',
    'unstake': 'unstake',
}

# Public read-only query name -> TokenLedger method name
READ_ONLY: Dict[str, str] = {
    'get-balance': 'get_balance',
    'get-staked': 'get_staked',
    'get-total-supply': 'get_total_supply',
    'is-paused': 'is_paused',
    'get-admin': 'get_admin',
}


def _resolve(table: Dict[str, str], name: str, kind: str) -> str:
    if name in table:
        return table[name]
    if name in table.values():
        return name
    raise UnknownOperation(f"Unknown {kind}: {name}")


class ContractHost:
    """
    Host adapter owning one TokenLedger behind one lock.

    Features:
    - Name-based dispatch of the six entry points and five queries
    - One mutex per contract instance: calls never interleave
    - Business errors pass through unchanged as Err results
    """

    def __init__(
        self,
        admin: AccountId,
        ledger: Optional[TokenLedger] = None,
        verbose: bool = False,
    ):
        """
        Initialize the host.

        Args:
            admin: Admin principal for a freshly deployed ledger
            ledger: Existing ledger to host (its admin must match)
            verbose: Verbose flag for a freshly deployed ledger
        """
        if ledger is None:
            ledger = TokenLedger(admin, verbose=verbose)
        elif ledger.admin != admin:
            raise ValueError(f"ledger admin {ledger.admin} does not match {admin}")
        self._ledger = ledger
        self._lock = threading.Lock()

    @property
    def ledger(self) -> TokenLedger:
        return self._ledger

    def call(self, caller: AccountId, operation: str, *args: Any) -> Result:
        """
        Invoke a state-changing entry point as caller.

        Raises:
            UnknownOperation: If operation is not an entry point name
        """
        method: Callable[..., Result] = getattr(
            self._ledger, _resolve(ENTRY_POINTS, operation, "entry point")
        )
        with self._lock:
            return method(caller, *args)

    def read(self, query: str, *args: Any) -> Any:
        """
        Run a read-only query.

        Raises:
            UnknownOperation: If query is not a read-only query name
        """
        method = getattr(self._ledger, _resolve(READ_ONLY, query, "read-only query"))
        with self._lock:
            return method(*args)
