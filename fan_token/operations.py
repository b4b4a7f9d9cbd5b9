"""
operations.py - Pure Transition Functions for the Fan Token Ledger

This module provides one compute function per contract entry point:
1. compute_set_paused() - admin toggles the pause flag
2. compute_mint() - admin issues new tokens (not pause-gated)
3. compute_transfer() - move spendable tokens between accounts
4. compute_burn() - destroy spendable tokens
5. compute_stake() / compute_unstake() - move tokens between the two sub-ledgers

Pattern:
    result = compute_transfer(view, "alice", "bob", 200)
    if isinstance(result, Err):
        ...                      # nothing to apply, state untouched
    else:
        ledger.apply(result)     # PendingUpdate with absolute post-values

Preconditions are checked in a fixed order, and the first failure decides
the error code. Every precondition that could lead to an underflow or an
overflow is checked here, before any value is computed.

All functions take TokenView (read-only) and return immutable results.
"""

from __future__ import annotations
from typing import Union

from .core import (
    TokenView, PendingUpdate, Err, ErrorCode,
    AccountId, Amount,
    check_account, check_amount,
)


Transition = Union[PendingUpdate, Err]


def is_authorized_admin(view: TokenView, caller: AccountId) -> bool:
    """Return True if caller is the contract admin."""
    return caller == view.admin


def compute_set_paused(view: TokenView, caller: AccountId, pause: bool) -> Transition:
    """
    Set the pause flag.

    Args:
        view: Read-only ledger access
        caller: Invoking principal
        pause: New value of the flag

    Returns:
        PendingUpdate returning the new flag, or Err(NOT_AUTHORIZED).
    """
    check_account(caller, "caller")
    if not isinstance(pause, bool):
        raise ValueError(f"pause must be bool, got {type(pause).__name__}")

    if not is_authorized_admin(view, caller):
        return Err(ErrorCode.NOT_AUTHORIZED)

    return PendingUpdate(
        operation="set-paused",
        caller=caller,
        paused=pause,
        value=pause,
    )


def compute_mint(
    view: TokenView,
    caller: AccountId,
    recipient: AccountId,
    amount: Amount,
) -> Transition:
    """
    Issue new tokens to recipient.

    Minting is deliberately not gated by the pause flag: the admin can
    still issue while transfers are frozen.

    Preconditions, in order:
        1. caller is admin                   -> NOT_AUTHORIZED
        2. recipient is not the zero address -> ZERO_ADDRESS
        3. total_supply + amount <= max      -> MAX_SUPPLY_REACHED

    Returns:
        PendingUpdate crediting recipient and growing supply, or Err.
    """
    check_account(caller, "caller")
    check_account(recipient, "recipient")
    check_amount(amount)

    if not is_authorized_admin(view, caller):
        return Err(ErrorCode.NOT_AUTHORIZED)
    if recipient == view.zero_address:
        return Err(ErrorCode.ZERO_ADDRESS)

    new_supply = view.total_supply + amount
    if new_supply > view.max_supply:
        return Err(ErrorCode.MAX_SUPPLY_REACHED)

    return PendingUpdate(
        operation="mint",
        caller=caller,
        balances=((recipient, view.get_balance(recipient) + amount),),
        total_supply=new_supply,
    )


def compute_transfer(
    view: TokenView,
    caller: AccountId,
    recipient: AccountId,
    amount: Amount,
) -> Transition:
    """
    Move spendable tokens from caller to recipient.

    A self-transfer is not special-cased: the debit is computed first and
    the credit reads the debited value, so the net effect is no change.

    Preconditions, in order:
        1. not paused                        -> PAUSED
        2. recipient is not the zero address -> ZERO_ADDRESS
        3. caller balance >= amount          -> INSUFFICIENT_BALANCE
    """
    check_account(caller, "caller")
    check_account(recipient, "recipient")
    check_amount(amount)

    if view.paused:
        return Err(ErrorCode.PAUSED)
    if recipient == view.zero_address:
        return Err(ErrorCode.ZERO_ADDRESS)

    sender_balance = view.get_balance(caller)
    if sender_balance < amount:
        return Err(ErrorCode.INSUFFICIENT_BALANCE)

    writes = {caller: sender_balance - amount}
    recipient_balance = writes.get(recipient, view.get_balance(recipient))

    return PendingUpdate(
        operation="transfer",
        caller=caller,
        balances=(
            (caller, sender_balance - amount),
            (recipient, recipient_balance + amount),
        ),
    )


def compute_burn(view: TokenView, caller: AccountId, amount: Amount) -> Transition:
    """
    Destroy spendable tokens held by caller.

    Preconditions, in order:
        1. not paused               -> PAUSED
        2. caller balance >= amount -> INSUFFICIENT_BALANCE
    """
    check_account(caller, "caller")
    check_amount(amount)

    if view.paused:
        return Err(ErrorCode.PAUSED)

    balance = view.get_balance(caller)
    if balance < amount:
        return Err(ErrorCode.INSUFFICIENT_BALANCE)

    return PendingUpdate(
        operation="burn",
        caller=caller,
        balances=((caller, balance - amount),),
        total_supply=view.total_supply - amount,
    )


def compute_stake(view: TokenView, caller: AccountId, amount: Amount) -> Transition:
    """
    Lock spendable tokens into the staked sub-ledger.

    Total supply is unchanged: the tokens stay in circulation.

    Preconditions, in order:
        1. not paused               -> PAUSED
        2. caller balance >= amount -> INSUFFICIENT_BALANCE
    """
    check_account(caller, "caller")
    check_amount(amount)

    if view.paused:
        return Err(ErrorCode.PAUSED)

    balance = view.get_balance(caller)
    if balance < amount:
        return Err(ErrorCode.INSUFFICIENT_BALANCE)

    return PendingUpdate(
        operation="stake",
        caller=caller,
        balances=((caller, balance - amount),),
        staked=((caller, view.get_staked(caller) + amount),),
    )


def compute_unstake(view: TokenView, caller: AccountId, amount: Amount) -> Transition:
    """
    Release staked tokens back to the spendable balance.

    Preconditions, in order:
        1. not paused              -> PAUSED
        2. caller staked >= amount -> INSUFFICIENT_STAKE
    """
    check_account(caller, "caller")
    check_amount(amount)

    if view.paused:
        return Err(ErrorCode.PAUSED)

    staked = view.get_staked(caller)
    if staked < amount:
        return Err(ErrorCode.INSUFFICIENT_STAKE)

    return PendingUpdate(
        operation="unstake",
        caller=caller,
        balances=((caller, view.get_balance(caller) + amount),),
        staked=((caller, staked - amount),),
    )
