"""Tests for the bucket index over a flat store."""
import pytest

from dlc_store.buckets import BucketIndex
from dlc_store.persistence import InMemoryFlatStore


@pytest.fixture
def store():
    return InMemoryFlatStore()


@pytest.fixture
def index(store):
    return BucketIndex(store)


# ---------------------------------------------------------------------------
# Membership
# ---------------------------------------------------------------------------

class TestMembership:
    @pytest.mark.asyncio
    async def test_missing_bucket_is_empty(self, index):
        assert await index.list_members("nope") == []

    @pytest.mark.asyncio
    async def test_members_listed_once_in_insertion_order(self, index, store):
        await index.add_member("b", "k2")
        await index.add_member("b", "k1")
        assert await index.list_members("b") == ["k2", "k1"]
        assert store.snapshot()["b"] == "k2,k1"

    @pytest.mark.asyncio
    async def test_add_member_is_idempotent(self, index, store):
        await index.add_member("b", "k1")
        await index.add_member("b", "k1")
        assert await index.list_members("b") == ["k1"]
        assert store.snapshot()["b"] == "k1"

    @pytest.mark.asyncio
    async def test_remove_member(self, index):
        await index.add_member("b", "k1")
        await index.add_member("b", "k2")
        assert await index.remove_member("b", "k1") is True
        assert await index.list_members("b") == ["k2"]

    @pytest.mark.asyncio
    async def test_remove_absent_member_is_noop(self, index, store):
        await index.add_member("b", "k1")
        assert await index.remove_member("b", "other") is False
        assert store.snapshot() == {"b": "k1"}

    @pytest.mark.asyncio
    async def test_removing_last_member_deletes_tag(self, index, store):
        await index.add_member("b", "k1")
        await index.remove_member("b", "k1")
        assert "b" not in store.snapshot()
        assert await index.list_members("b") == []

    @pytest.mark.asyncio
    async def test_buckets_are_independent(self, index):
        await index.add_member("a", "k1")
        await index.add_member("b", "k2")
        assert await index.list_members("a") == ["k1"]
        assert await index.list_members("b") == ["k2"]


# ---------------------------------------------------------------------------
# Paired membership + value
# ---------------------------------------------------------------------------

class TestPairedWrites:
    @pytest.mark.asyncio
    async def test_upsert_writes_member_and_value(self, index, store):
        await index.upsert("b", "k1", "v1")
        assert store.snapshot() == {"b": "k1", "k1": "v1"}

    @pytest.mark.asyncio
    async def test_upsert_twice_overwrites_value_only(self, index, store):
        await index.upsert("b", "k1", "v1")
        await index.upsert("b", "k1", "v2")
        assert store.snapshot() == {"b": "k1", "k1": "v2"}

    @pytest.mark.asyncio
    async def test_delete_removes_member_and_value(self, index, store):
        await index.upsert("b", "k1", "v1")
        await index.upsert("b", "k2", "v2")
        assert await index.delete("b", "k1") is True
        assert store.snapshot() == {"b": "k2", "k2": "v2"}

    @pytest.mark.asyncio
    async def test_delete_last_leaves_nothing(self, index, store):
        await index.upsert("b", "k1", "v1")
        await index.delete("b", "k1")
        assert store.snapshot() == {}

    @pytest.mark.asyncio
    async def test_delete_non_member_leaves_value_alone(self, index, store):
        await store.set("loose", "x")
        assert await index.delete("b", "loose") is False
        assert store.snapshot() == {"loose": "x"}

    @pytest.mark.asyncio
    async def test_items_and_values_in_order(self, index):
        await index.upsert("b", "k1", "v1")
        await index.upsert("b", "k2", "v2")
        assert await index.items("b") == [("k1", "v1"), ("k2", "v2")]
        assert await index.values("b") == ["v1", "v2"]

    @pytest.mark.asyncio
    async def test_items_skip_member_without_value(self, index, store):
        await index.upsert("b", "k1", "v1")
        await store.set("b", "k1,ghost")
        assert await index.items("b") == [("k1", "v1")]
