from dataclasses import dataclass
from typing import Any, Dict, Sequence, Union
import requests
from web3 import Web3

from config.networks import RPC_URLS, RPC_TIMEOUT
from mai.abis.abis import VAULT_ABI
from mai.errors import RpcError, ContractCallError
from utils.logger import get_logger

"""
Linea chain access for the QiDao vault snapshot.
Two thin wrappers: a raw JSON-RPC block lookup and a read-only contract caller
evaluated against historical state.
"""

logger = get_logger(__name__)


@dataclass
class BlockData:
    """Block height and its unix timestamp (seconds)"""
    block_number: int
    block_timestamp: int


class BlockResolver:
    """
    Resolves a block tag or height to its number and timestamp
    through a plain eth_getBlockByNumber request.
    """

    def __init__(self, rpc_url: str = None, timeout: float = None):
        self.rpc_url = rpc_url or RPC_URLS['linea']
        self.timeout = timeout or RPC_TIMEOUT
        self.headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = requests.post(self.rpc_url, json=payload, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"RPC request {payload['method']} to {self.rpc_url} failed: {e}")
            raise RpcError(f"{payload['method']} request to {self.rpc_url} failed: {e}") from e

        if not isinstance(data, dict):
            logger.error(f"Unexpected RPC payload from {self.rpc_url}: {data!r}")
            raise RpcError(f"Unexpected RPC payload: {data!r}")
        if data.get("error"):
            logger.error(f"RPC error from {self.rpc_url}: {data['error']}")
            raise RpcError(f"RPC error: {data['error']}")
        return data

    def get_block(self, block_identifier: Union[str, int] = "latest") -> BlockData:
        """
        Fetch a block header and return its number and timestamp.

        Args:
            block_identifier: a tag ("latest", "finalized", ...) or a block height

        Returns:
            BlockData with both fields decoded from their hex quantities
        """
        if isinstance(block_identifier, int):
            block_param = hex(block_identifier)
        else:
            block_param = block_identifier

        data = self._post({
            "jsonrpc": "2.0",
            "method": "eth_getBlockByNumber",
            "params": [block_param, False],
            "id": 1,
        })

        result = data.get("result")
        if result is None:
            logger.error(f"Block {block_identifier} not found on {self.rpc_url}")
            raise RpcError(f"Block {block_identifier} not found")

        try:
            block = BlockData(
                block_number=int(result["number"], 16),
                block_timestamp=int(result["timestamp"], 16),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed block payload for {block_identifier}: {result!r}")
            raise RpcError(f"Malformed block payload for {block_identifier}") from e

        logger.info(f"Block {block.block_number} (timestamp {block.block_timestamp})")
        return block

    def get_latest_block(self) -> BlockData:
        return self.get_block("latest")


class ContractReader:
    """
    Read-only contract caller. Every call is pinned to an explicit block so
    the whole snapshot reflects a single chain state.
    """

    def __init__(self, w3: Web3 = None, rpc_url: str = None, abi: list = None):
        if w3 is None:
            rpc_url = rpc_url or RPC_URLS['linea']
            w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={'timeout': RPC_TIMEOUT}))
            if not w3.is_connected():
                logger.error(f"Failed to connect to RPC endpoint: {rpc_url}")
                raise RpcError(f"Failed to connect to RPC endpoint: {rpc_url}")
        self.w3 = w3
        self.abi = abi or VAULT_ABI
        self._contracts = {}

    def get_contract(self, contract_address: str):
        """Contract handle for an address, built once and reused"""
        checksum_address = Web3.to_checksum_address(contract_address)
        if checksum_address not in self._contracts:
            self._contracts[checksum_address] = self.w3.eth.contract(
                address=checksum_address,
                abi=self.abi
            )
        return self._contracts[checksum_address]

    def read(self, contract_address: str, block_number: int, method_name: str, params: Sequence = ()) -> Any:
        """Call `method_name(*params)` on the contract as of `block_number`"""
        try:
            contract = self.get_contract(contract_address)
            contract_function = getattr(contract.functions, method_name)
            return contract_function(*params).call(block_identifier=block_number)
        except Exception as e:
            logger.error(
                f"Error reading data from contract at {contract_address} "
                f"using method {method_name} at block {block_number}: {e}"
            )
            raise ContractCallError(contract_address, method_name, block_number) from e
