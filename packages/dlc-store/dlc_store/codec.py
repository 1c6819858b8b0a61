"""
Value Codec - string serialization of stored records.

Structured records are stored as JSON using their camelCase field names.
Scalar values (private keys) are stored raw and never pass through here.
"""
from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from .errors import CodecError
from .models import AnyContract, ContractBase, Utxo

_CONTRACT_ADAPTER: TypeAdapter = TypeAdapter(AnyContract)


def encode_utxo(utxo: Utxo) -> str:
    """Serialize a UTXO record."""
    return utxo.model_dump_json(by_alias=True)


def decode_utxo(raw: str) -> Utxo:
    """
    Deserialize a UTXO record.

    Raises:
        CodecError: if ``raw`` is not a valid UTXO record
    """
    try:
        return Utxo.model_validate_json(raw)
    except ValidationError as e:
        raise CodecError(f"Invalid UTXO record: {e}") from e


def encode_contract(contract: ContractBase) -> str:
    """Serialize a contract record, tagged with its state."""
    return contract.model_dump_json(by_alias=True)


def decode_contract(raw: str) -> ContractBase:
    """
    Deserialize a contract record into the model for its state.

    Raises:
        CodecError: if ``raw`` is not a valid contract record
    """
    try:
        return _CONTRACT_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise CodecError(f"Invalid contract record: {e}") from e
