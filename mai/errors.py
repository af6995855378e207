"""
Errors raised while reading QiDao vault state.
"""


class MaiSnapshotError(Exception):
    """Base class for every failure that aborts a snapshot"""


class RpcError(MaiSnapshotError):
    """JSON-RPC endpoint unreachable or returned an unusable payload"""


class ContractCallError(MaiSnapshotError):
    """A read-only contract call failed (revert, ABI mismatch, pruned state...)"""

    def __init__(self, contract_address: str, method_name: str, block_number, message: str = None):
        self.contract_address = contract_address
        self.method_name = method_name
        self.block_number = block_number
        super().__init__(
            message or f"{method_name} failed on {contract_address} at block {block_number}"
        )
