"""Shared fixtures: an in-memory stand-in for the on-chain vault contracts."""

import pytest

from config.networks import COLLATERAL_VAULTS
from mai.errors import ContractCallError

WETH_VAULT = COLLATERAL_VAULTS["linea"][0]["address"]
BTC_VAULT = COLLATERAL_VAULTS["linea"][1]["address"]
MPETH_VAULT = COLLATERAL_VAULTS["linea"][2]["address"]

OWNER_A = "0xAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
OWNER_B = "0xBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBB"
OWNER_C = "0xCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCC"


class FakeContractReader:
    """
    Answers the four vault methods from a dict instead of a node.

    `vaults` maps contract address -> {"totalSupply": n, "vaults": {id: (debt, owner)}}.
    Ids below totalSupply missing from "vaults" report exists() == False.
    """

    def __init__(self, vaults, failing=None):
        self.vaults = {address.lower(): state for address, state in vaults.items()}
        self.failing = {(address.lower(), method) for address, method in (failing or [])}
        self.calls = []

    def read(self, contract_address, block_number, method_name, params=()):
        self.calls.append((contract_address, block_number, method_name, tuple(params)))
        if (contract_address.lower(), method_name) in self.failing:
            raise ContractCallError(contract_address, method_name, block_number)

        state = self.vaults.get(contract_address.lower(), {"totalSupply": 0, "vaults": {}})
        if method_name == "totalSupply":
            return state["totalSupply"]

        vault_id = params[0]
        if method_name == "exists":
            return vault_id in state["vaults"]
        if method_name == "accumulatedVaultDebt":
            return state["vaults"][vault_id][0]
        if method_name == "ownerOf":
            return state["vaults"][vault_id][1]
        raise ContractCallError(contract_address, method_name, block_number)


@pytest.fixture
def populated_reader():
    """Two WETH vaults, one burned BTC vault between two live ones, no MPETH vaults."""
    return FakeContractReader({
        WETH_VAULT: {
            "totalSupply": 2,
            "vaults": {
                1: (2000000000000000000, OWNER_A),
                2: (1500000000000000000, OWNER_B),
            },
        },
        BTC_VAULT: {
            "totalSupply": 3,
            "vaults": {
                1: (10 ** 24, OWNER_C),
                3: (1005000000000000000, OWNER_A),
            },
        },
        MPETH_VAULT: {"totalSupply": 0, "vaults": {}},
    })
