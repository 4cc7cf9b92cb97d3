"""
Financial data providers — where the engine gets the current savings aggregate.

The engine never reads storage itself. It calls
fetch_current_retirement_savings(user_id) on whatever provider it is given
and treats any failure there as an upstream failure.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, Mapping

import pandas as pd

from core.utils import require_columns


class FinancialDataProvider:
    """Interface for supplying a user's retirement-savings aggregate."""

    def fetch_current_retirement_savings(self, user_id: Hashable) -> float:
        raise NotImplementedError


class InMemoryFinancialDataProvider(FinancialDataProvider):
    """Balances held in a mapping of user id → account balances."""

    def __init__(self, balances: Mapping[Hashable, Iterable[float]]):
        self._balances: Dict[Hashable, tuple] = {
            uid: tuple(float(b) for b in accounts) for uid, accounts in balances.items()
        }

    def fetch_current_retirement_savings(self, user_id: Hashable) -> float:
        if user_id not in self._balances:
            raise KeyError(f"No retirement accounts on record for user {user_id!r}.")
        return float(sum(self._balances[user_id]))


class RecordsFinancialDataProvider(FinancialDataProvider):
    """
    Balances taken from a table of retirement-account records
    (one row per account, columns user_id and balance).
    Null balances count as zero.
    """

    def __init__(
        self,
        records: pd.DataFrame,
        *,
        user_col: str = "user_id",
        balance_col: str = "balance",
    ):
        require_columns(records, [user_col, balance_col])
        self.user_col = user_col
        self.balance_col = balance_col
        self._records = records[[user_col, balance_col]].copy()
        self._records[balance_col] = pd.to_numeric(
            self._records[balance_col], errors="coerce"
        ).fillna(0.0)

    def fetch_current_retirement_savings(self, user_id: Hashable) -> float:
        rows = self._records[self._records[self.user_col] == user_id]
        if rows.empty:
            raise KeyError(f"No retirement accounts on record for user {user_id!r}.")
        return float(rows[self.balance_col].sum())
