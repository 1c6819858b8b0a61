"""
dlc-store Library.

Wallet and DLC contract persistence over a flat key-value store:
- Bucket index emulating enumerable collections without key listing
- Pydantic record models for UTXOs and contract states
- Repository façade with per-collection CRUD
- Wallet helpers (balance, receiving addresses, coin reservation)
"""

__version__ = "0.1.0"

from .errors import (
    CodecError,
    ErrorCode,
    InsufficientFundsError,
    NotFoundError,
    RepositoryError,
)
from .models import (
    AcceptedContract,
    AnyContract,
    ClosedContract,
    ConfirmedContract,
    ContractState,
    OfferedContract,
    SignedContract,
    Utxo,
    get_id,
    transition,
)
from .persistence import FileFlatStore, FlatStore, InMemoryFlatStore
from .query import ContractQuery
from .repository import LocalRepository
from .wallet import WalletService

__all__ = [
    "__version__",
    # Storage
    "FlatStore",
    "InMemoryFlatStore",
    "FileFlatStore",
    "LocalRepository",
    "WalletService",
    "ContractQuery",
    # Records
    "Utxo",
    "ContractState",
    "AnyContract",
    "OfferedContract",
    "AcceptedContract",
    "SignedContract",
    "ConfirmedContract",
    "ClosedContract",
    "get_id",
    "transition",
    # Errors
    "RepositoryError",
    "ErrorCode",
    "NotFoundError",
    "CodecError",
    "InsufficientFundsError",
]
