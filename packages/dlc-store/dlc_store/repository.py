"""
Local Repository - typed wallet and contract storage over a flat store.

Each collection lives in its own bucket (see ``buckets``):

    addressBucket   address     -> private key
    keyPairBucket   public key  -> private key
    utxoBucket      txid+vout   -> UTXO JSON
    contractBucket  contract id -> contract JSON

The location value is a single scalar under ``locationKey`` and is not
part of any bucket.

Contracts change key when they are accepted: until then they are stored
under their temporary id, afterwards under the final contract id. The
move is two separate store calls (delete old, write new), so a crash in
between can leave zero or two copies of the record.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from .buckets import BucketIndex
from .codec import decode_contract, decode_utxo, encode_contract, encode_utxo
from .errors import NotFoundError
from .models import ContractBase, ContractState, Utxo, get_id
from .persistence import FlatStore, InMemoryFlatStore
from .query import ContractQuery, filter_contracts

logger = logging.getLogger(__name__)

ADDRESS_BUCKET = "addressBucket"
UTXO_BUCKET = "utxoBucket"
CONTRACT_BUCKET = "contractBucket"
KEY_PAIR_BUCKET = "keyPairBucket"
LOCATION_KEY = "locationKey"


def utxo_key(txid: str, vout: int) -> str:
    """Storage key for an output: txid followed by vout in hex, at least 2 chars."""
    return f"{txid}{vout:02x}"


class LocalRepository:
    """
    Wallet and contract repository over a ``FlatStore``.

    The repository is the only writer of the store it is given.
    """

    def __init__(self, store: Optional[FlatStore] = None):
        self.store = store if store is not None else InMemoryFlatStore()
        self.buckets = BucketIndex(self.store)

    # ── location ──────────────────────────────────────────────────────────

    async def save_location(self, location: str) -> None:
        """Save the location value."""
        await self.store.set(LOCATION_KEY, location)

    async def get_location(self) -> Optional[str]:
        """Get the location value, or None if never saved."""
        return await self.store.get(LOCATION_KEY)

    # ── addresses ─────────────────────────────────────────────────────────

    async def upsert_address(self, address: str, privkey: str) -> None:
        """Store an address with its private key."""
        await self.buckets.upsert(ADDRESS_BUCKET, address, privkey)

    async def delete_address(self, address: str) -> bool:
        """Forget an address. Returns False if it was not stored."""
        return await self.buckets.delete(ADDRESS_BUCKET, address)

    async def get_addresses(self) -> List[str]:
        """List stored addresses in insertion order."""
        return await self.buckets.list_members(ADDRESS_BUCKET)

    async def get_privkey_for_address(self, address: str) -> str:
        """Raises NotFoundError if the address is unknown."""
        return await self._get_value(address)

    # ── key pairs ─────────────────────────────────────────────────────────

    async def upsert_key_pair(self, pubkey: str, privkey: str) -> None:
        """Store a public key with its private key."""
        await self.buckets.upsert(KEY_PAIR_BUCKET, pubkey, privkey)

    async def get_privkey_for_pubkey(self, pubkey: str) -> str:
        """Raises NotFoundError if the public key is unknown."""
        return await self._get_value(pubkey)

    # ── UTXOs ─────────────────────────────────────────────────────────────

    async def upsert_utxo(self, utxo: Utxo) -> None:
        """Insert or overwrite an output."""
        await self.buckets.upsert(UTXO_BUCKET, utxo_key(utxo.txid, utxo.vout), encode_utxo(utxo))

    async def delete_utxo(self, utxo: Utxo) -> bool:
        """Delete an output. Returns False if it was not stored."""
        return await self.buckets.delete(UTXO_BUCKET, utxo_key(utxo.txid, utxo.vout))

    async def get_utxos(self) -> List[Utxo]:
        """List stored outputs."""
        return [decode_utxo(raw) for raw in await self.buckets.values(UTXO_BUCKET)]

    async def get_utxo(self, txid: str, vout: int) -> Utxo:
        """Raises NotFoundError if the output is unknown."""
        return decode_utxo(await self._get_value(utxo_key(txid, vout)))

    async def unreserve_utxo(self, txid: str, vout: int) -> None:
        """
        Clear the reserved flag of a stored output.

        Read-modify-write with no isolation; fine for a single writer.

        Raises:
            NotFoundError: if the output is unknown
        """
        utxo = await self.get_utxo(txid, vout)
        await self.upsert_utxo(utxo.model_copy(update={"reserved": False}))

    # ── contracts ─────────────────────────────────────────────────────────

    async def create_contract(self, contract: ContractBase) -> None:
        """Store a contract under its current id."""
        await self.buckets.upsert(CONTRACT_BUCKET, get_id(contract), encode_contract(contract))

    async def update_contract(self, contract: ContractBase) -> None:
        """
        Store a new version of a contract.

        An Accepted contract is moved from its temporary id to its final
        id: the record under ``temporary_contract_id`` is dropped (if there
        is one) before the new version is written.
        """
        if contract.state == ContractState.ACCEPTED:
            removed = await self.buckets.delete(CONTRACT_BUCKET, contract.temporary_contract_id)
            if removed:
                logger.debug(
                    f"Moved contract {contract.temporary_contract_id} -> {get_id(contract)}"
                )
        await self.buckets.upsert(CONTRACT_BUCKET, get_id(contract), encode_contract(contract))

    async def get_contract(self, contract_id: str) -> ContractBase:
        """Raises NotFoundError if no contract has this id."""
        return decode_contract(await self._get_value(contract_id))

    async def get_contracts(self, query: Optional[ContractQuery] = None) -> List[ContractBase]:
        """List stored contracts, filtered by ``query`` when given."""
        contracts = [decode_contract(raw) for raw in await self.buckets.values(CONTRACT_BUCKET)]
        return filter_contracts(contracts, query)

    async def delete_contract(self, contract_id: str) -> bool:
        """Delete a contract. Returns False if no contract has this id."""
        return await self.buckets.delete(CONTRACT_BUCKET, contract_id)

    async def has_contract(self, contract_id: str) -> bool:
        """Check whether a value is stored under ``contract_id``."""
        return await self.store.get(contract_id) is not None

    # ── helpers ───────────────────────────────────────────────────────────

    async def _get_value(self, key: str) -> str:
        value = await self.store.get(key)
        if value is None:
            raise NotFoundError(key)
        return value
