"""
test_scenarios.py - End-to-end contract scenarios

Each scenario starts from a freshly deployed ledger and drives it through a
short sequence of calls, checking results, balances and invariants.
"""

import pytest

from fan_token import TokenLedger, Ok, Err, ErrorCode, DEFAULT_ADMIN
from tests.conftest import USER_A, USER_B, assert_invariants, assert_unchanged


@pytest.fixture
def fresh():
    return TokenLedger(DEFAULT_ADMIN)


def test_scenario_a_admin_mint(fresh):
    """Mint 1000 to user A."""
    assert fresh.mint(DEFAULT_ADMIN, USER_A, 1000) == Ok(True)
    assert fresh.get_balance(USER_A) == 1000
    assert fresh.get_total_supply() == 1000
    assert_invariants(fresh)


def test_scenario_b_transfer(fresh):
    """Mint 500 to A, transfer 200 A -> B."""
    fresh.mint(DEFAULT_ADMIN, USER_A, 500)
    assert fresh.transfer(USER_A, USER_B, 200) == Ok(True)
    assert fresh.get_balance(USER_A) == 300
    assert fresh.get_balance(USER_B) == 200
    assert_invariants(fresh)


def test_scenario_c_stake_then_unstake(fresh):
    """Mint 1000 to A, stake 600, unstake 200."""
    fresh.mint(DEFAULT_ADMIN, USER_A, 1000)
    assert fresh.stake(USER_A, 600) == Ok(True)
    assert fresh.get_balance(USER_A) == 400
    assert fresh.get_staked(USER_A) == 600

    assert fresh.unstake(USER_A, 200) == Ok(True)
    assert fresh.get_staked(USER_A) == 400
    assert fresh.get_balance(USER_A) == 600
    assert fresh.get_total_supply() == 1000
    assert_invariants(fresh)


def test_scenario_c_with_500_staked(fresh):
    """Stake 500 of 1000, unstake 200: 300 staked, 700 spendable."""
    fresh.mint(DEFAULT_ADMIN, USER_A, 1000)
    fresh.stake(USER_A, 500)
    assert fresh.unstake(USER_A, 200) == Ok(True)
    assert fresh.get_staked(USER_A) == 300
    assert fresh.get_balance(USER_A) == 700


def test_scenario_d_burn_too_much(fresh):
    """Mint 300 to A, burn 500 -> Err(101), state unchanged."""
    fresh.mint(DEFAULT_ADMIN, USER_A, 300)
    before = fresh.snapshot()
    assert fresh.burn(USER_A, 500) == Err(101)
    assert fresh.get_balance(USER_A) == 300
    assert_unchanged(fresh, before)


def test_scenario_e_mint_past_cap(fresh):
    """Mint 200,000,000 to A -> Err(103), state unchanged."""
    before = fresh.snapshot()
    assert fresh.mint(DEFAULT_ADMIN, USER_A, 200_000_000) == Err(103)
    assert fresh.get_balance(USER_A) == 0
    assert_unchanged(fresh, before)


def test_pause_freezes_holders_but_not_issuance(fresh):
    """While paused only the admin's mint and set-paused go through."""
    fresh.mint(DEFAULT_ADMIN, USER_A, 1000)
    fresh.stake(USER_A, 100)
    assert fresh.set_paused(DEFAULT_ADMIN, True) == Ok(True)

    assert fresh.transfer(USER_A, USER_B, 1) == Err(ErrorCode.PAUSED)
    assert fresh.burn(USER_A, 1) == Err(ErrorCode.PAUSED)
    assert fresh.stake(USER_A, 1) == Err(ErrorCode.PAUSED)
    assert fresh.unstake(USER_A, 1) == Err(ErrorCode.PAUSED)
    assert fresh.mint(DEFAULT_ADMIN, USER_B, 50) == Ok(True)

    assert fresh.set_paused(DEFAULT_ADMIN, False) == Ok(False)
    assert fresh.transfer(USER_B, USER_A, 50) == Ok(True)
    assert fresh.get_balance(USER_A) == 950
    assert fresh.get_staked(USER_A) == 100
    assert fresh.get_total_supply() == 1050
    assert_invariants(fresh)


def test_full_lifecycle(fresh):
    """Issue, circulate, stake, burn and reissue up to the cap."""
    fresh.mint(DEFAULT_ADMIN, USER_A, 60_000_000)
    fresh.mint(DEFAULT_ADMIN, USER_B, 40_000_000)
    assert fresh.mint(DEFAULT_ADMIN, USER_A, 1) == Err(ErrorCode.MAX_SUPPLY_REACHED)

    fresh.stake(USER_A, 10_000_000)
    fresh.transfer(USER_B, USER_A, 15_000_000)
    fresh.burn(USER_A, 5_000_000)

    assert fresh.get_balance(USER_A) == 60_000_000
    assert fresh.get_staked(USER_A) == 10_000_000
    assert fresh.get_balance(USER_B) == 25_000_000
    # Staked tokens remain in circulation
    assert fresh.get_total_supply() == 95_000_000

    assert fresh.mint(DEFAULT_ADMIN, USER_B, 5_000_001) == Err(ErrorCode.MAX_SUPPLY_REACHED)
    assert fresh.mint(DEFAULT_ADMIN, USER_B, 5_000_000) == Ok(True)
    assert fresh.get_total_supply() == 100_000_000
    assert_invariants(fresh)
