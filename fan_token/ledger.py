"""
ledger.py - Stateful Fan Token Ledger

The TokenLedger class is the state machine for one deployed token contract.
It is the only class that mutates LedgerState, ensuring controlled changes.

Key responsibilities:
    - Implements TokenView protocol for safe read-only access by pure functions
    - Exposes the six contract entry points, each returning Ok or Err
    - Applies PendingUpdates atomically (all writes land or none do)
    - Re-checks supply, non-negativity and zero-address invariants before every write
"""

from __future__ import annotations
from typing import Dict, List, Optional, Any

from .core import (
    # Types
    LedgerState, PendingUpdate,
    Ok, Err, Result,
    AccountId, Amount,
    # Constants
    MAX_SUPPLY, ZERO_ADDRESS,
    # Exceptions
    InvariantViolation,
    # Helpers
    check_account, check_amount,
)
from .operations import (
    Transition,
    is_authorized_admin,
    compute_set_paused,
    compute_mint,
    compute_transfer,
    compute_burn,
    compute_stake,
    compute_unstake,
)


class TokenLedger:
    """
    Single-asset token ledger with admin-gated minting and pausing.

    Implements the TokenView protocol, allowing the ledger to be passed to the
    pure compute_* functions that access only read-only members.

    Design Principles:
        - Business failures are values: every precondition violation returns
          Err(code) and leaves state untouched. Nothing is raised for them.
        - Always validates: apply() refuses any update that would break an
          invariant, raising InvariantViolation before the first write.

    Thread Safety:
        Not thread-safe. Use ContractHost to serialize concurrent callers.

    Example:
        ledger = TokenLedger("admin")
        ledger.mint("admin", "alice", 1000)      # Ok(True)
        ledger.transfer("alice", "bob", 200)     # Ok(True)
        ledger.get_balance("alice")              # 800
    """

    def __init__(
        self,
        admin: AccountId,
        max_supply: Amount = MAX_SUPPLY,
        zero_address: AccountId = ZERO_ADDRESS,
        verbose: bool = False,
        state: Optional[LedgerState] = None,
    ):
        """
        Create a ledger.

        Args:
            admin: Principal allowed to mint and pause (immutable)
            max_supply: Cap on total supply (default: 100,000,000)
            zero_address: Reserved recipient that is always rejected
            verbose: Print one line per entry point call (default: False)
            state: Existing state to adopt instead of a fresh one (copied)

        Raises:
            ValueError: If arguments are malformed or state.admin differs from admin
            InvariantViolation: If the adopted state is already inconsistent
        """
        check_account(admin, "admin")
        check_account(zero_address, "zero_address")
        check_amount(max_supply, "max_supply")
        if admin == zero_address:
            raise ValueError("admin cannot be the zero address")

        self._max_supply = max_supply
        self._zero_address = zero_address
        self.verbose = verbose

        if state is None:
            state = LedgerState(admin=admin)
        elif state.admin != admin:
            raise ValueError(f"state admin {state.admin} does not match {admin}")
        self._state = state.copy()

        report = self.verify_invariants()
        if not report['valid']:
            raise InvariantViolation(f"Initial state is inconsistent: {report['violations']}")

    # ========================================================================
    # TokenView PROTOCOL IMPLEMENTATION (read-only members)
    # ========================================================================

    @property
    def admin(self) -> AccountId:
        return self._state.admin

    @property
    def paused(self) -> bool:
        return self._state.paused

    @property
    def total_supply(self) -> Amount:
        return self._state.total_supply

    @property
    def max_supply(self) -> Amount:
        return self._max_supply

    @property
    def zero_address(self) -> AccountId:
        return self._zero_address

    def get_balance(self, account: AccountId) -> Amount:
        """Spendable balance of an account (0 if it never held tokens)."""
        return self._state.balance_of(account)

    def get_staked(self, account: AccountId) -> Amount:
        """Staked balance of an account (0 if it never staked)."""
        return self._state.staked_of(account)

    # ========================================================================
    # READ-ONLY QUERIES
    # ========================================================================

    def get_total_supply(self) -> Amount:
        return self._state.total_supply

    def is_paused(self) -> bool:
        return self._state.paused

    def get_admin(self) -> AccountId:
        return self._state.admin

    def list_accounts(self) -> List[AccountId]:
        """List accounts holding a non-zero balance or stake, sorted."""
        held = {a for a, q in self._state.balances.items() if q}
        held |= {a for a, q in self._state.staked.items() if q}
        return sorted(held)

    def is_authorized_admin(self, caller: AccountId) -> bool:
        """Return True if caller is the admin. No side effects."""
        return is_authorized_admin(self, caller)

    def verify_invariants(self) -> Dict[str, Any]:
        """
        Verify that the ledger invariants hold.

        Checks:
        - total_supply equals the sum of all balances plus all staked amounts
          (staking relocates tokens, it never takes them out of circulation)
        - total_supply does not exceed max_supply
        - no balance or staked entry is negative
        - the zero address holds nothing

        Returns:
            Dict with keys:
            - 'valid': bool - True if every invariant holds
            - 'total_supply': int - The recorded supply counter
            - 'sum_balances': int - Sum over the balances map
            - 'sum_staked': int - Sum over the staked map
            - 'violations': List[Dict] - One entry per broken invariant

        Example:
            report = ledger.verify_invariants()
            assert report['valid'], report['violations']
        """
        state = self._state
        violations = []

        sum_balances = sum(state.balances[a] for a in sorted(state.balances))
        sum_staked = sum(state.staked[a] for a in sorted(state.staked))

        if state.total_supply != sum_balances + sum_staked:
            violations.append({
                'invariant': 'supply_matches_holdings',
                'expected': state.total_supply,
                'actual': sum_balances + sum_staked,
            })
        if state.total_supply > self._max_supply:
            violations.append({
                'invariant': 'supply_within_cap',
                'expected': self._max_supply,
                'actual': state.total_supply,
            })
        for name, amounts in (('balances', state.balances), ('staked', state.staked)):
            for account in sorted(amounts):
                if amounts[account] < 0:
                    violations.append({
                        'invariant': f'{name}_non_negative',
                        'account': account,
                        'actual': amounts[account],
                    })
        zero_held = state.balance_of(self._zero_address) + state.staked_of(self._zero_address)
        if zero_held:
            violations.append({
                'invariant': 'zero_address_empty',
                'account': self._zero_address,
                'actual': zero_held,
            })

        return {
            'valid': len(violations) == 0,
            'total_supply': state.total_supply,
            'sum_balances': sum_balances,
            'sum_staked': sum_staked,
            'violations': violations,
        }

    # ========================================================================
    # ENTRY POINTS (Mutating)
    # ========================================================================

    def set_paused(self, caller: AccountId, pause: bool) -> Result:
        """
        Admin-only: set the pause flag.

        Returns:
            Ok(pause) on success, Err(NOT_AUTHORIZED) otherwise.
        """
        return self._run("set-paused", caller, compute_set_paused(self, caller, pause))

    def mint(self, caller: AccountId, recipient: AccountId, amount: Amount) -> Result:
        """
        Admin-only: issue amount new tokens to recipient.

        Works while paused.

        Returns:
            Ok(True), or Err(NOT_AUTHORIZED | ZERO_ADDRESS | MAX_SUPPLY_REACHED).
        """
        return self._run("mint", caller, compute_mint(self, caller, recipient, amount))

    def transfer(self, caller: AccountId, recipient: AccountId, amount: Amount) -> Result:
        """
        Move amount spendable tokens from caller to recipient.

        Returns:
            Ok(True), or Err(PAUSED | ZERO_ADDRESS | INSUFFICIENT_BALANCE).
        """
        return self._run("transfer", caller, compute_transfer(self, caller, recipient, amount))

    def burn(self, caller: AccountId, amount: Amount) -> Result:
        """
        Destroy amount of caller's spendable tokens, shrinking total supply.

        Returns:
            Ok(True), or Err(PAUSED | INSUFFICIENT_BALANCE).
        """
        return self._run("burn", caller, compute_burn(self, caller, amount))

    def stake(self, caller: AccountId, amount: Amount) -> Result:
        """
        Lock amount of caller's spendable tokens.

        Returns:
            Ok(True), or Err(PAUSED | INSUFFICIENT_BALANCE).
        """
        return self._run("stake", caller, compute_stake(self, caller, amount))

    def unstake(self, caller: AccountId, amount: Amount) -> Result:
        """
        Release amount of caller's staked tokens.

        Returns:
            Ok(True), or Err(PAUSED | INSUFFICIENT_STAKE).
        """
        return self._run("unstake", caller, compute_unstake(self, caller, amount))

    def _run(self, operation: str, caller: AccountId, outcome: Transition) -> Result:
        """Apply an accepted transition, or report the rejection."""
        if isinstance(outcome, Err):
            if self.verbose:
                print(f"✗ REJECTED {operation} by {caller}: "
                      f"{int(outcome.code)} {outcome.code.name}")
            return outcome

        self.apply(outcome)
        if self.verbose:
            print(f"✓ APPLIED  {outcome!r}")
        return Ok(outcome.value)

    # ========================================================================
    # UPDATE APPLICATION (Mutating)
    # ========================================================================

    def apply(self, update: PendingUpdate) -> None:
        """
        Apply a PendingUpdate atomically.

        The update is validated in full before the first write:
        - every written balance and staked value is a non-negative int
        - nothing is credited to the zero address
        - a pause write, if present, is a bool
        - the change in summed holdings (balances plus staked) equals the
          change in total supply
        - the resulting total supply does not exceed max_supply

        Authorization is not re-checked here: update.caller is informational.
        Entry points authorize before producing an update.

        Args:
            update: PendingUpdate produced by a compute_* function

        Raises:
            InvariantViolation: If the update would break an invariant.
                                The ledger is left unchanged.
        """
        state = self._state
        new_balances = update.final_balances()
        new_staked = update.final_staked()
        new_supply = state.total_supply if update.total_supply is None else update.total_supply

        for name, writes in (('balance', new_balances), ('staked', new_staked)):
            for account, qty in writes.items():
                if isinstance(qty, bool) or not isinstance(qty, int) or qty < 0:
                    raise InvariantViolation(
                        f"{update.operation}: {name} of {account} would be {qty!r}"
                    )
            if writes.get(self._zero_address):
                raise InvariantViolation(
                    f"{update.operation}: zero address cannot hold a {name}"
                )
        if update.paused is not None and not isinstance(update.paused, bool):
            raise InvariantViolation(
                f"{update.operation}: pause flag would be {update.paused!r}"
            )

        holdings_delta = sum(
            qty - state.balance_of(account) for account, qty in new_balances.items()
        ) + sum(
            qty - state.staked_of(account) for account, qty in new_staked.items()
        )
        supply_delta = new_supply - state.total_supply
        if holdings_delta != supply_delta:
            raise InvariantViolation(
                f"{update.operation}: holdings change by {holdings_delta} "
                f"but supply changes by {supply_delta}"
            )
        if new_supply > self._max_supply:
            raise InvariantViolation(
                f"{update.operation}: supply {new_supply} > max {self._max_supply}"
            )

        state.balances.update(new_balances)
        state.staked.update(new_staked)
        state.total_supply = new_supply
        if update.paused is not None:
            state.paused = update.paused

    # ========================================================================
    # LEDGER OPERATIONS
    # ========================================================================

    def snapshot(self) -> LedgerState:
        """Return an independent copy of the current state."""
        return self._state.copy()

    def clone(self) -> TokenLedger:
        """
        Create a deep copy of this ledger.

        Modifications to the clone never affect the original, and vice versa.
        Configuration (max_supply, zero_address, verbose) is carried over.
        """
        cloned = TokenLedger.__new__(TokenLedger)
        cloned._max_supply = self._max_supply
        cloned._zero_address = self._zero_address
        cloned.verbose = self.verbose
        cloned._state = self._state.copy()
        return cloned

    def __repr__(self) -> str:
        return (f"TokenLedger(admin={self.admin}, supply={self.total_supply}/"
                f"{self._max_supply}, paused={self.paused}, "
                f"accounts={len(self.list_accounts())})")
