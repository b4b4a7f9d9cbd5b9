"""
fake_view.py - Test Helper for TokenView

Provides a minimal TokenView implementation for testing the pure compute
functions without requiring a full TokenLedger instance.
"""

from __future__ import annotations
from typing import Dict, Optional

from fan_token.core import MAX_SUPPLY, ZERO_ADDRESS, DEFAULT_ADMIN


class FakeView:
    """
    Minimal TokenView implementation for testing transition functions.

    Example:
        view = FakeView(balances={'alice': 1000}, staked={'alice': 50})
        view.get_balance('alice')   # 1000
        view.total_supply           # 1050 (derived from balances and staked)
    """

    def __init__(
        self,
        balances: Optional[Dict[str, int]] = None,
        staked: Optional[Dict[str, int]] = None,
        admin: str = DEFAULT_ADMIN,
        paused: bool = False,
        total_supply: Optional[int] = None,
        max_supply: int = MAX_SUPPLY,
        zero_address: str = ZERO_ADDRESS,
    ):
        self._balances = balances or {}
        self._staked = staked or {}
        self._admin = admin
        self._paused = paused
        self._total_supply = (
            sum(self._balances.values()) + sum(self._staked.values())
            if total_supply is None else total_supply
        )
        self._max_supply = max_supply
        self._zero_address = zero_address

    @property
    def admin(self) -> str:
        return self._admin

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def total_supply(self) -> int:
        return self._total_supply

    @property
    def max_supply(self) -> int:
        return self._max_supply

    @property
    def zero_address(self) -> str:
        return self._zero_address

    def get_balance(self, account: str) -> int:
        return self._balances.get(account, 0)

    def get_staked(self, account: str) -> int:
        return self._staked.get(account, 0)
