"""
Tests for DatabaseSeeder with asynchronous insertion callbacks.
"""

import asyncio

import pytest

from fixseed.seeding.seeder import DatabaseSeeder
from fixseed.utils.errors import RecordInsertionError, UnresolvedReferenceError
from tests.conftest import Customer, Item, MockTable, Order


class TestDatabaseSeederAsync:
    """Test populate_async."""

    @pytest.mark.asyncio
    async def test_populate_async_items(self, fixtures_dir):
        seeder = DatabaseSeeder(fixtures_dir, env={})
        table = MockTable[Item]()

        ids = await seeder.populate_async("items.yml", table.insert_async, record_type=Item)

        assert [r.name for r in table.records_by_ids(ids)] == ["melon", "orange", "apple", "carrot"]
        assert seeder.filenames == ["items.yml"]

    @pytest.mark.asyncio
    async def test_populate_async_orders(self, fixtures_dir):
        seeder = DatabaseSeeder(fixtures_dir, env={})

        orders = MockTable[Order](use_record_id=True)
        with pytest.raises(UnresolvedReferenceError):
            await seeder.populate_async("orders.yml", orders.insert_async, record_type=Order)

        await seeder.populate_async("items.yml", MockTable[Item]().insert_async, record_type=Item)
        await seeder.populate_async("customers.yml", MockTable[Customer]().insert_async, record_type=Customer)
        ids = await seeder.populate_async("orders.yml", orders.insert_async, record_type=Order)

        records = orders.records_by_ids(ids)
        assert [(r.id, r.customer_id, r.item_id) for r in records] == [
            (1200, 1, 3),
            (1201, 2, 1),
            (1202, 1, 4),
            (1203, 3, 1),
        ]

    @pytest.mark.asyncio
    async def test_callbacks_run_one_at_a_time(self, fixtures_dir):
        seeder = DatabaseSeeder(fixtures_dir, env={})
        in_flight = 0
        peak = 0
        order = []

        async def insert(item):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.001)
            order.append(item.name)
            in_flight -= 1
            return item.name

        await seeder.populate_async("items.yml", insert, record_type=Item)

        assert peak == 1
        assert order == ["melon", "orange", "apple", "carrot"]

    @pytest.mark.asyncio
    async def test_sync_callback_is_accepted(self, fixtures_dir):
        seeder = DatabaseSeeder(fixtures_dir, env={})
        table = MockTable[Item]()

        ids = await seeder.populate_async("items.yml", table.insert, record_type=Item)

        assert ids == [1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_async_callback_failure(self, fixtures_dir):
        seeder = DatabaseSeeder(fixtures_dir, env={})

        async def insert(item):
            if item.name == "orange":
                raise ConnectionError("database went away")
            return 1

        with pytest.raises(RecordInsertionError) as exc_info:
            await seeder.populate_async("items.yml", insert, record_type=Item)

        assert exc_info.value.label == "orange"
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert seeder.registry.snapshot() == {"melon": "1"}
