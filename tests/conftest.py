"""
Shared fixtures and record models for the fixseed test suite.
"""

import asyncio
from datetime import datetime
from pathlib import Path
from typing import Generic, Optional, TypeVar

import pytest
from pydantic import BaseModel

from fixseed.config import reset_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"

R = TypeVar("R")


class Item(BaseModel):
    name: str
    price: float


class Customer(BaseModel):
    name: str
    emails: list[str]
    plan: str
    shared_membership: Optional[int] = None
    country_code: Optional[int] = None


class Order(BaseModel):
    id: int
    customer_id: int
    item_id: int
    quantity: int
    purchased_at: datetime


class MockTable(Generic[R]):
    """In-memory table handing out auto-increment ids, or the record's own ``id``."""

    def __init__(self, use_record_id: bool = False) -> None:
        self.use_record_id = use_record_id
        self.rows: dict[int, R] = {}
        self._next_id = 1

    def insert(self, record: R) -> int:
        if self.use_record_id:
            row_id = record.id
        else:
            row_id = self._next_id
            self._next_id += 1
        self.rows[row_id] = record
        return row_id

    async def insert_async(self, record: R) -> int:
        await asyncio.sleep(0)
        return self.insert(record)

    def records_by_ids(self, ids: list[int]) -> list[R]:
        return [self.rows[row_id] for row_id in ids]


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Keep settings isolated from the developer's environment."""
    for name in (
        "FIXSEED_LOG_LEVEL",
        "FIXSEED_FIXTURES_DIR",
        "FIXSEED_ENCODING",
        "FIXSEED_LOG_FILE_PATH",
        "FIXSEED_DEV_MODE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR
