"""
Record Models - Pydantic models for stored wallet and contract records.

UTXOs and contracts are serialized as JSON with camelCase field names.
Contracts are a tagged union discriminated by ``state``: each lifecycle
state has its own model with the fields that exist at that point in the
contract's life, so a stored record of unexpected shape fails validation
instead of decoding into something half-filled.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# =============================================================================
# ENUMS
# =============================================================================

class ContractState(str, Enum):
    """Lifecycle state of a DLC contract."""
    OFFERED = "Offered"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    SIGNED = "Signed"
    CONFIRMED = "Confirmed"
    PRECLOSED = "PreClosed"
    CLOSED = "Closed"
    FAILED_ACCEPT = "FailedAccept"
    FAILED_SIGN = "FailedSign"
    REFUNDED = "Refunded"


# States in which a contract is still identified by its temporary id
TEMPORARY_ID_STATES = frozenset({
    ContractState.OFFERED,
    ContractState.REJECTED,
    ContractState.FAILED_ACCEPT,
})


class _Record(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


# =============================================================================
# UTXO
# =============================================================================

class Utxo(_Record):
    """An unspent transaction output owned by the wallet."""
    txid: str
    vout: int = Field(ge=0)
    amount: int = Field(ge=0)  # satoshis
    address: str
    reserved: bool = False
    redeem_script: Optional[str] = None
    script_pub_key: Optional[str] = None


# =============================================================================
# CONTRACTS
# =============================================================================

class ContractBase(_Record):
    """Fields shared by every contract state."""
    temporary_contract_id: str
    is_local_party: bool
    offer_collateral: int = Field(ge=0)
    counter_party_collateral: int = Field(ge=0)
    fee_rate_per_vb: int = Field(ge=0)
    contract_maturity_bound: int
    contract_timeout: int
    contract_info: Dict[str, Any] = Field(default_factory=dict)

    @property
    def total_collateral(self) -> int:
        return self.offer_collateral + self.counter_party_collateral


class OfferedContract(ContractBase):
    state: Literal[ContractState.OFFERED] = ContractState.OFFERED


class RejectedContract(OfferedContract):
    state: Literal[ContractState.REJECTED] = ContractState.REJECTED
    reason: Optional[str] = None


class FailedAcceptContract(OfferedContract):
    state: Literal[ContractState.FAILED_ACCEPT] = ContractState.FAILED_ACCEPT
    error: str


class AcceptedContract(ContractBase):
    """A contract both parties agreed on; now has its final id."""
    state: Literal[ContractState.ACCEPTED] = ContractState.ACCEPTED
    contract_id: str
    accept_params: Dict[str, Any] = Field(default_factory=dict)


class FailedSignContract(AcceptedContract):
    state: Literal[ContractState.FAILED_SIGN] = ContractState.FAILED_SIGN
    error: str


class SignedContract(AcceptedContract):
    state: Literal[ContractState.SIGNED] = ContractState.SIGNED
    fund_tx_id: str


class ConfirmedContract(SignedContract):
    state: Literal[ContractState.CONFIRMED] = ContractState.CONFIRMED


class RefundedContract(SignedContract):
    state: Literal[ContractState.REFUNDED] = ContractState.REFUNDED
    refund_tx_id: str


class PreClosedContract(SignedContract):
    state: Literal[ContractState.PRECLOSED] = ContractState.PRECLOSED
    closing_tx_id: str


class ClosedContract(SignedContract):
    state: Literal[ContractState.CLOSED] = ContractState.CLOSED
    closing_tx_id: str
    pnl: int = 0


AnyContract = Annotated[
    Union[
        OfferedContract,
        RejectedContract,
        FailedAcceptContract,
        AcceptedContract,
        FailedSignContract,
        SignedContract,
        ConfirmedContract,
        RefundedContract,
        PreClosedContract,
        ClosedContract,
    ],
    Field(discriminator="state"),
]

CONTRACT_MODELS: Dict[ContractState, type] = {
    ContractState.OFFERED: OfferedContract,
    ContractState.REJECTED: RejectedContract,
    ContractState.FAILED_ACCEPT: FailedAcceptContract,
    ContractState.ACCEPTED: AcceptedContract,
    ContractState.FAILED_SIGN: FailedSignContract,
    ContractState.SIGNED: SignedContract,
    ContractState.CONFIRMED: ConfirmedContract,
    ContractState.REFUNDED: RefundedContract,
    ContractState.PRECLOSED: PreClosedContract,
    ContractState.CLOSED: ClosedContract,
}


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def get_id(contract: ContractBase) -> str:
    """
    Return the key a contract is stored under.

    Contracts that were never accepted only have their temporary id;
    from acceptance onwards they are identified by the final contract id.
    """
    if contract.state in TEMPORARY_ID_STATES:
        return contract.temporary_contract_id
    return contract.contract_id


def transition(contract: ContractBase, state: ContractState, **fields: Any) -> ContractBase:
    """
    Build the record for ``contract`` moved into ``state``.

    Existing fields are carried over; ``fields`` supplies whatever the
    target state adds (e.g. ``contract_id`` when accepting). Fields the
    target model does not know are dropped.

    Raises:
        pydantic.ValidationError: if a field required by the target state is missing
    """
    model = CONTRACT_MODELS[ContractState(state)]
    data = contract.model_dump()
    data.update(fields)
    data["state"] = ContractState(state)
    known = {k: v for k, v in data.items() if k in model.model_fields}
    return model.model_validate(known)
