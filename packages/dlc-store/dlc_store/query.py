"""Contract queries evaluated in memory over decoded records."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .models import ContractBase, ContractState


@dataclass
class ContractQuery:
    """
    Filter for ``LocalRepository.get_contracts``.

    A contract matches when its state is any of ``states``;
    ``states=None`` matches everything.
    """
    states: Optional[List[ContractState]] = None

    def matches(self, contract: ContractBase) -> bool:
        if self.states is None:
            return True
        return contract.state in self.states


def filter_contracts(
    contracts: Iterable[ContractBase],
    query: Optional[ContractQuery] = None,
) -> List[ContractBase]:
    """Return the contracts that match ``query`` (all of them when no query)."""
    if query is None:
        return list(contracts)
    return [c for c in contracts if query.matches(c)]
