from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Union

from config.networks import COLLATERAL_VAULTS, MAI_TOKEN
from mai.client import BlockData
from mai.vault_reader import VaultEnumerator
from utils.logger import get_logger

logger = get_logger(__name__)

TWO_PLACES = Decimal('0.01')


@dataclass
class OutputRow:
    """
    One CSV line: the MAI debt a user owes against one collateral vault.
    Field order is the report column order.
    """
    block_number: int
    timestamp: int
    user_address: str
    token_address: str
    token_balance: str  # raw debt, kept as a string to avoid precision loss
    token_symbol: str
    usd_price: Decimal


def compute_usd_price(debt: Union[int, str], decimals: int = 18, peg_price: Decimal = Decimal('1')) -> Decimal:
    """USD value of a raw debt amount, rounded half-up to cents"""
    value = Decimal(debt) / (Decimal(10) ** decimals) * Decimal(peg_price)
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


class ReportBuilder:
    """
    Builds the debt report across every configured collateral contract.
    Contracts are processed in the configured order and any failure aborts
    the whole report.
    """

    def __init__(
        self,
        enumerator: VaultEnumerator,
        collateral_vaults: List[Dict[str, str]] = None,
        token_symbol: str = None,
        debt_decimals: int = None,
        peg_price: Decimal = Decimal('1')
    ):
        self.enumerator = enumerator
        self.collateral_vaults = collateral_vaults if collateral_vaults is not None else COLLATERAL_VAULTS['linea']
        self.token_symbol = token_symbol or MAI_TOKEN['linea']['symbol']
        self.debt_decimals = debt_decimals if debt_decimals is not None else MAI_TOKEN['linea']['decimals']
        self.peg_price = Decimal(peg_price)

    def build_report(self, block_number: int, block_timestamp: int) -> List[OutputRow]:
        """
        Collect one row per existing vault for every collateral contract.

        Args:
            block_number: block every contract call is evaluated at
            block_timestamp: unix timestamp copied into each row

        Returns:
            Rows ordered by collateral contract, then by vault id
        """
        rows = []

        for collateral in self.collateral_vaults:
            token_address = collateral['address']
            logger.info(f"\nProcessing {collateral.get('symbol', token_address)} vaults: {token_address}")

            vaults = self.enumerator.enumerate(token_address, block_number)
            for vault in vaults.values():
                rows.append(OutputRow(
                    block_number=block_number,
                    timestamp=block_timestamp,
                    user_address=vault.owner,
                    token_address=token_address,
                    token_balance=str(vault.debt),
                    token_symbol=self.token_symbol,
                    usd_price=compute_usd_price(vault.debt, self.debt_decimals, self.peg_price)
                ))

        logger.info(f"Built {len(rows)} rows at block {block_number}")
        return rows

    def build_report_for_block(self, block: BlockData) -> List[OutputRow]:
        return self.build_report(block.block_number, block.block_timestamp)
