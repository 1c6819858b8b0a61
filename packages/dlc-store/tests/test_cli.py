"""Tests for the dlc-store CLI."""
import asyncio
import json

import pytest
from click.testing import CliRunner

from dlc_store import __version__
from dlc_store.cli import cli
from dlc_store.models import ContractState, OfferedContract, Utxo, transition
from dlc_store.persistence import FileFlatStore
from dlc_store.repository import LocalRepository

TXID = "ef" * 32


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "store.json"


@pytest.fixture
def seeded(store_path):
    """Store file with two UTXOs (one reserved) and two contracts."""
    async def seed():
        repo = LocalRepository(FileFlatStore(store_path))
        await repo.upsert_utxo(Utxo(txid=TXID, vout=0, amount=30_000, address="bcrt1qa"))
        await repo.upsert_utxo(Utxo(txid=TXID, vout=1, amount=20_000, address="bcrt1qb", reserved=True))
        offer = OfferedContract(
            temporary_contract_id="tmp-1",
            is_local_party=False,
            offer_collateral=10_000,
            counter_party_collateral=5_000,
            fee_rate_per_vb=1,
            contract_maturity_bound=1_700_000_000,
            contract_timeout=1_700_600_000,
        )
        await repo.create_contract(offer)
        await repo.create_contract(
            transition(offer.model_copy(update={"temporary_contract_id": "tmp-2"}),
                       ContractState.ACCEPTED, contract_id="final-2")
        )

    asyncio.run(seed())
    return store_path


def invoke(store_path, *args):
    return CliRunner().invoke(cli, ["--store", str(store_path), *args])


class TestCli:
    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_address_add_list_remove(self, store_path):
        assert invoke(store_path, "address", "add", "bcrt1qx", "privx").exit_code == 0
        result = invoke(store_path, "address", "list")
        assert result.output.strip() == "bcrt1qx"

        invoke(store_path, "address", "remove", "bcrt1qx")
        result = invoke(store_path, "address", "list")
        assert "No addresses stored." in result.output

    def test_balance_excludes_reserved(self, seeded):
        result = invoke(seeded, "balance")
        assert result.exit_code == 0
        assert result.output.startswith("30000 sats")

    def test_utxo_list_json(self, seeded):
        result = invoke(seeded, "utxo", "list", "--json-out")
        data = json.loads(result.output)
        assert [u["vout"] for u in data] == [0, 1]
        assert data[1]["reserved"] is True

    def test_utxo_unreserve(self, seeded):
        assert invoke(seeded, "utxo", "unreserve", TXID, "1").exit_code == 0
        assert invoke(seeded, "balance").output.startswith("50000 sats")

    def test_utxo_unreserve_unknown_fails(self, seeded):
        result = invoke(seeded, "utxo", "unreserve", TXID, "9")
        assert result.exit_code == 1
        assert "Error: Key not found" in result.output

    def test_contract_list_by_state(self, seeded):
        result = invoke(seeded, "contract", "list", "--state", "Offered", "--json-out")
        data = json.loads(result.output)
        assert [c["temporaryContractId"] for c in data] == ["tmp-1"]

        result = invoke(seeded, "contract", "list")
        assert "final-2" in result.output
        assert "2 contract(s)" in result.output

    def test_contract_show_and_remove(self, seeded):
        result = invoke(seeded, "contract", "show", "final-2")
        assert json.loads(result.output)["state"] == "Accepted"

        assert invoke(seeded, "contract", "remove", "final-2").exit_code == 0
        result = invoke(seeded, "contract", "show", "final-2")
        assert result.exit_code == 1

    def test_contract_remove_unknown_fails(self, seeded):
        result = invoke(seeded, "contract", "remove", "nope")
        assert result.exit_code == 1

    def test_contract_remove_rejects_non_contract_keys(self, seeded):
        invoke(seeded, "address", "add", "addr1", "priv1")

        result = invoke(seeded, "contract", "remove", "addr1")
        assert result.exit_code == 1
        assert "Removed" not in result.output

        result = invoke(seeded, "contract", "remove", "addressBucket")
        assert result.exit_code == 1

        assert invoke(seeded, "address", "list").output.strip() == "addr1"
        assert "2 contract(s)" in invoke(seeded, "contract", "list").output

    def test_location_get_does_not_create_store(self, store_path):
        assert "No location saved." in invoke(store_path, "location", "get").output
        assert not store_path.exists()

    def test_location(self, store_path):
        assert "No location saved." in invoke(store_path, "location", "get").output
        invoke(store_path, "location", "set", "Lisbon")
        assert invoke(store_path, "location", "get").output.strip() == "Lisbon"
