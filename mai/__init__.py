from .client import BlockData, BlockResolver, ContractReader
from .errors import MaiSnapshotError, RpcError, ContractCallError
from .vault_reader import Vault, VaultEnumerator

__all__ = [
    'BlockData', 'BlockResolver', 'ContractReader',
    'MaiSnapshotError', 'RpcError', 'ContractCallError',
    'Vault', 'VaultEnumerator',
]
