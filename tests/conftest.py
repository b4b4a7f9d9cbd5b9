"""
conftest.py - Shared pytest fixtures for fan token tests

Provides common fixtures used across unit, functional and conformance tests:
- Principals (admin, two users)
- Ledgers (empty, funded, paused)
- State comparison utilities
"""

import pytest

from fan_token import TokenLedger, ContractHost, DEFAULT_ADMIN


USER_A = "ST2USER00000000000000000000000000000000"
USER_B = "ST3USER00000000000000000000000000000000"


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def assert_invariants(ledger: TokenLedger) -> None:
    """Fail the test if any ledger invariant is broken."""
    report = ledger.verify_invariants()
    assert report['valid'], f"Invariants violated: {report['violations']}"


def assert_unchanged(ledger: TokenLedger, before) -> None:
    """Fail the test if the ledger state differs from a snapshot."""
    after = ledger.snapshot()
    assert after.fingerprint() == before.fingerprint(), f"{before} -> {after}"


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def admin():
    return DEFAULT_ADMIN


@pytest.fixture
def user_a():
    return USER_A


@pytest.fixture
def user_b():
    return USER_B


@pytest.fixture
def ledger(admin):
    """Freshly deployed ledger: no supply, not paused."""
    return TokenLedger(admin)


@pytest.fixture
def funded_ledger(admin, user_a, user_b):
    """Ledger with 1000 minted to user_a and 500 to user_b."""
    ledger = TokenLedger(admin)
    ledger.mint(admin, user_a, 1000)
    ledger.mint(admin, user_b, 500)
    return ledger


@pytest.fixture
def paused_ledger(funded_ledger, admin, user_a):
    """Funded ledger where user_a has staked 100, then paused."""
    funded_ledger.stake(user_a, 100)
    funded_ledger.set_paused(admin, True)
    return funded_ledger


@pytest.fixture
def host(admin):
    return ContractHost(admin)
