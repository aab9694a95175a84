"""Expense repository interface and in-memory implementation.

Durable storage is owned by the host application; the ingestion service only
needs to look up an expense by its SMS deduplication key and insert new ones.
"""

import asyncio
from typing import Protocol

from expense_tracker.schemas.internal import ExpenseDraft


class ExpenseRepository(Protocol):
    """Minimal repository surface consumed by SMS ingestion."""

    async def get_by_sms_id(self, sms_id: str) -> ExpenseDraft | None: ...

    async def insert(self, expense: ExpenseDraft) -> ExpenseDraft:
        """Store ``expense``; return the already-stored record on an ``sms_id`` conflict."""
        ...


class InMemoryExpenseRepository:
    """Dict-backed repository keyed by ``sms_id``, insertion-ordered."""

    def __init__(self):
        self._lock = asyncio.Lock()
        self._expenses: dict[str, ExpenseDraft] = {}

    async def get_by_sms_id(self, sms_id: str) -> ExpenseDraft | None:
        """Get a single expense by its deduplication key."""
        async with self._lock:
            return self._expenses.get(sms_id)

    async def insert(self, expense: ExpenseDraft) -> ExpenseDraft:
        """Store an expense; an existing ``sms_id`` is left untouched."""
        async with self._lock:
            return self._expenses.setdefault(expense.sms_id, expense)

    async def get_all(self, skip: int = 0, limit: int = 100) -> list[ExpenseDraft]:
        """Get stored expenses with pagination."""
        async with self._lock:
            return list(self._expenses.values())[skip : skip + limit]

    async def count(self) -> int:
        async with self._lock:
            return len(self._expenses)
