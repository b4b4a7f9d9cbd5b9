#!/usr/bin/env python3
"""
demo.py - Interactive Tutorial: Learn the Fan Token Ledger Step by Step

Each step builds on the previous one. Press Enter to advance.

WHAT YOU'LL LEARN:
  1-3:  Issuance     - The empty ledger, admin mint, the supply cap
  4-6:  Holders      - Transfers, rejections, staking
  7-8:  Control      - The pause switch, the host adapter

Run:
    python demo.py           # Interactive mode (press Enter for each step)
    python demo.py --quick   # Run all steps without pausing
"""

import sys

from fan_token import (
    TokenLedger, ContractHost,
    ErrorCode, DEFAULT_ADMIN, ZERO_ADDRESS, MAX_SUPPLY,
)


ADMIN = DEFAULT_ADMIN
ALICE = "ST2USER00000000000000000000000000000000"
BOB = "ST3USER00000000000000000000000000000000"

QUICK_MODE = "--quick" in sys.argv


def wait_for_enter():
    """Pause for user input unless in quick mode."""
    if not QUICK_MODE:
        input("\n[Press Enter to continue...]")


def step_header(number: int, title: str, objective: str):
    print(f"\n{'='*70}")
    print(f"STEP {number}: {title}")
    print(f"{'='*70}")
    print(f"\nObjective: {objective}\n")


def section_header(text: str):
    print(f"\n--- {text} ---\n")


def show(ledger: TokenLedger):
    print(f"total supply : {ledger.get_total_supply():,} / {ledger.max_supply:,}")
    print(f"paused       : {ledger.is_paused()}")
    for account in ledger.list_accounts():
        print(f"  {account}: balance={ledger.get_balance(account):,} "
              f"staked={ledger.get_staked(account):,}")


# ============================================================================
# STEPS
# ============================================================================

def step_01_empty_ledger() -> TokenLedger:
    step_header(1, "The Empty Ledger",
        "A freshly deployed contract has an admin and nothing else.")
    print(">>> ledger = TokenLedger(ADMIN, verbose=True)")
    ledger = TokenLedger(ADMIN, verbose=True)
    show(ledger)
    return ledger


def step_02_mint(ledger: TokenLedger) -> TokenLedger:
    step_header(2, "Admin Mint",
        "Only the admin can create tokens, and never for the zero address.")
    ledger.mint(ADMIN, ALICE, 1_000)
    ledger.mint(ALICE, ALICE, 1_000)
    ledger.mint(ADMIN, ZERO_ADDRESS, 1_000)
    show(ledger)
    return ledger


def step_03_supply_cap(ledger: TokenLedger) -> TokenLedger:
    step_header(3, "The Supply Cap",
        f"Total supply can never exceed {MAX_SUPPLY:,}.")
    result = ledger.mint(ADMIN, ALICE, 200_000_000)
    print(f"\nmint 200,000,000 -> {result}")
    assert result.code is ErrorCode.MAX_SUPPLY_REACHED
    return ledger


def step_04_transfer(ledger: TokenLedger) -> TokenLedger:
    step_header(4, "Transfers",
        "Holders move spendable tokens; supply does not change.")
    ledger.transfer(ALICE, BOB, 200)
    show(ledger)
    return ledger


def step_05_rejections(ledger: TokenLedger) -> TokenLedger:
    step_header(5, "Rejected Calls",
        "A failed precondition returns an error code and changes nothing.")
    before = ledger.snapshot()
    ledger.burn(BOB, 500)
    ledger.transfer(BOB, ZERO_ADDRESS, 1)
    assert ledger.snapshot() == before
    print("\nState unchanged after both rejections.")
    return ledger


def step_06_staking(ledger: TokenLedger) -> TokenLedger:
    step_header(6, "Staking",
        "Staked tokens leave the spendable balance but stay in circulation.")
    ledger.stake(ALICE, 600)
    show(ledger)
    ledger.unstake(ALICE, 200)
    show(ledger)
    section_header("Invariant check")
    report = ledger.verify_invariants()
    print(f"supply={report['total_supply']:,} balances={report['sum_balances']:,} "
          f"staked={report['sum_staked']:,} valid={report['valid']}")
    return ledger


def step_07_pause(ledger: TokenLedger) -> TokenLedger:
    step_header(7, "The Pause Switch",
        "Pausing freezes holders; the admin can still mint.")
    ledger.set_paused(ALICE, True)
    ledger.set_paused(ADMIN, True)
    ledger.transfer(ALICE, BOB, 1)
    ledger.stake(ALICE, 1)
    ledger.mint(ADMIN, BOB, 50)
    ledger.set_paused(ADMIN, False)
    show(ledger)
    return ledger


def step_08_host(ledger: TokenLedger):
    step_header(8, "The Host Adapter",
        "A host owns one ledger and serializes calls by entry point name.")
    host = ContractHost(ADMIN, ledger=ledger)
    print(f">>> host.call(BOB, 'burn', 50)        -> {host.call(BOB, 'burn', 50)}")
    print(f">>> host.read('get-total-supply')     -> {host.read('get-total-supply'):,}")
    print(f">>> host.read('get-balance', BOB)     -> {host.read('get-balance', BOB):,}")


def main():
    print("=" * 70)
    print("       FAN TOKEN LEDGER - INTERACTIVE TUTORIAL")
    print("=" * 70)
    if QUICK_MODE:
        print("Running in QUICK mode (no pauses)")
    wait_for_enter()

    ledger = step_01_empty_ledger()
    for step in (step_02_mint, step_03_supply_cap, step_04_transfer,
                 step_05_rejections, step_06_staking, step_07_pause):
        wait_for_enter()
        ledger = step(ledger)
    wait_for_enter()
    step_08_host(ledger)

    print("\n" + "=" * 70)
    print("       TUTORIAL COMPLETE!")
    print("=" * 70)
    print("""
    Next steps:
      - See fan_token/operations.py for the precondition order of each call
      - Run tests: pytest tests/
    """)


if __name__ == "__main__":
    main()
