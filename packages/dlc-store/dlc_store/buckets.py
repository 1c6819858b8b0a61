"""
Bucket Index - logical collections over a flat store.

The flat store cannot enumerate its keys, so each bucket keeps its own
membership list: the bucket tag is itself a key whose value is the
comma-joined member keys in insertion order.

    addressBucket -> "addr1,addr2"
    addr1         -> "<privkey 1>"
    addr2         -> "<privkey 2>"

Membership and value are always written together, and an empty bucket is
represented by the absence of its tag entry, never by an empty string.
Member keys must not contain the delimiter; keys are hex or identifier
strings so this is not checked.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .persistence import FlatStore

logger = logging.getLogger(__name__)

DELIMITER = ","


class BucketIndex:
    """Membership tracking and paired value writes for named buckets."""

    def __init__(self, store: FlatStore):
        self.store = store

    # ── membership ────────────────────────────────────────────────────────

    async def list_members(self, bucket_tag: str) -> List[str]:
        """Return the member keys of a bucket in insertion order."""
        raw = await self.store.get(bucket_tag)
        if raw is None:
            return []
        return raw.split(DELIMITER)

    async def add_member(self, bucket_tag: str, key: str) -> None:
        """Append ``key`` to the bucket unless it is already a member."""
        members = await self.list_members(bucket_tag)
        if key in members:
            return
        members.append(key)
        await self.store.set(bucket_tag, DELIMITER.join(members))
        logger.debug(f"Added {key} to {bucket_tag} ({len(members)} members)")

    async def remove_member(self, bucket_tag: str, key: str) -> bool:
        """
        Remove ``key`` from the bucket.

        Returns:
            True if the key was a member
        """
        members = await self.list_members(bucket_tag)
        if key not in members:
            return False
        members.remove(key)
        if members:
            await self.store.set(bucket_tag, DELIMITER.join(members))
        else:
            await self.store.remove(bucket_tag)
        logger.debug(f"Removed {key} from {bucket_tag} ({len(members)} members)")
        return True

    # ── paired membership + value ─────────────────────────────────────────

    async def upsert(self, bucket_tag: str, key: str, value: str) -> None:
        """Insert or overwrite ``key`` in the bucket."""
        await self.add_member(bucket_tag, key)
        await self.store.set(key, value)

    async def delete(self, bucket_tag: str, key: str) -> bool:
        """
        Delete ``key`` and its value from the bucket.

        Keys that are not members are left alone.

        Returns:
            True if something was deleted
        """
        if not await self.remove_member(bucket_tag, key):
            return False
        await self.store.remove(key)
        return True

    async def items(self, bucket_tag: str) -> List[Tuple[str, str]]:
        """Return (key, value) pairs for every member, in membership order."""
        pairs = []
        for key in await self.list_members(bucket_tag):
            value: Optional[str] = await self.store.get(key)
            if value is None:
                logger.warning(f"Bucket {bucket_tag} lists {key} but it has no value")
                continue
            pairs.append((key, value))
        return pairs

    async def values(self, bucket_tag: str) -> List[str]:
        """Return the stored values of every member, in membership order."""
        return [value for _, value in await self.items(bucket_tag)]
