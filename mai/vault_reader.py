from dataclasses import dataclass
from typing import Dict

from mai.client import ContractReader
from utils.logger import get_logger

"""
QiDao vault reader.
Walks every vault NFT id of a collateral contract and collects debt and owner
for the ones that still exist.
"""

logger = get_logger(__name__)


@dataclass
class Vault:
    """Snapshot of one existing vault"""
    vault_id: int
    debt: int  # accumulated MAI debt, raw 18-decimal amount
    owner: str


class VaultEnumerator:
    """
    Brute-force scan of vault ids 1..totalSupply.
    Calls are issued one at a time; the first failure aborts the scan.
    """

    def __init__(self, reader: ContractReader):
        self.reader = reader

    def get_total_supply(self, contract_address: str, block_number: int) -> int:
        """Number of vault ids minted on the collateral contract"""
        try:
            total_supply = self.reader.read(contract_address, block_number, "totalSupply")
        except Exception:
            logger.error(f"Failed to get total supply for {contract_address} at block {block_number}")
            raise
        logger.info(f"Total Supply: {total_supply} ({contract_address})")
        return int(total_supply)

    def enumerate(self, contract_address: str, block_number: int) -> Dict[int, Vault]:
        """
        Read every existing vault of a collateral contract.

        Args:
            contract_address: collateral vault contract
            block_number: block the whole scan is evaluated at

        Returns:
            Vaults keyed by id, in ascending id order
        """
        total_supply = self.get_total_supply(contract_address, block_number)
        vaults = {}

        for vault_id in range(1, total_supply + 1):
            exists = self.reader.read(contract_address, block_number, "exists", [vault_id])
            if not exists:
                continue

            debt = self.reader.read(contract_address, block_number, "accumulatedVaultDebt", [vault_id])
            owner = self.reader.read(contract_address, block_number, "ownerOf", [vault_id])
            vaults[vault_id] = Vault(vault_id=vault_id, debt=int(debt), owner=owner)
            logger.debug(f"Vault {vault_id}: owner {owner}, debt {debt}")

        logger.info(f"Found {len(vaults)} existing vaults out of {total_supply} ({contract_address})")
        return vaults
