"""
Wallet Service - balance, receiving addresses and coin reservation.

These are the operations the wallet UI triggers ("Get receiving address",
the status bar's balance refresh) plus the reservation step used when
funding a contract. Key derivation is supplied by the caller.
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Tuple

from .errors import InsufficientFundsError
from .models import Utxo
from .repository import LocalRepository

logger = logging.getLogger(__name__)

# Returns a fresh (address, private key) pair
KeyGenerator = Callable[[], Tuple[str, str]]


class WalletService:
    """Wallet-level operations built on a ``LocalRepository``."""

    def __init__(self, repository: LocalRepository):
        self.repository = repository

    async def get_balance(self) -> int:
        """Sum of unreserved UTXO amounts, in satoshis."""
        utxos = await self.repository.get_utxos()
        return sum(u.amount for u in utxos if not u.reserved)

    async def get_new_address(self, generator: KeyGenerator) -> str:
        """Generate a receiving address, store it with its key and return it."""
        address, privkey = generator()
        await self.repository.upsert_address(address, privkey)
        logger.debug(f"Stored new address {address}")
        return address

    async def reserve_utxos(self, amount: int) -> List[Utxo]:
        """
        Reserve unreserved outputs, in stored order, until they cover ``amount``.

        Nothing is written unless the amount can be covered.

        Returns:
            The reserved outputs (with ``reserved=True``)

        Raises:
            InsufficientFundsError: if unreserved outputs do not cover ``amount``
        """
        selected: List[Utxo] = []
        total = 0
        for utxo in await self.repository.get_utxos():
            if total >= amount:
                break
            if utxo.reserved:
                continue
            selected.append(utxo)
            total += utxo.amount

        if total < amount:
            raise InsufficientFundsError(amount, total)

        reserved = [u.model_copy(update={"reserved": True}) for u in selected]
        for utxo in reserved:
            await self.repository.upsert_utxo(utxo)
        logger.debug(f"Reserved {len(reserved)} utxo(s) totalling {total} for {amount}")
        return reserved

    async def unreserve_utxos(self, utxos: Iterable[Utxo]) -> None:
        """Release previously reserved outputs."""
        for utxo in utxos:
            await self.repository.unreserve_utxo(utxo.txid, utxo.vout)
