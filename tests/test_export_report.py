"""CLI wrapper tests with the chain access layer patched out."""

from unittest.mock import Mock, patch

import export_report
from mai.client import BlockData
from mai.errors import RpcError
from tests.conftest import OWNER_A, WETH_VAULT, FakeContractReader


def single_vault_reader() -> FakeContractReader:
    return FakeContractReader({
        WETH_VAULT: {"totalSupply": 2, "vaults": {1: (2000000000000000000, OWNER_A)}},
    })


def test_resolve_block_uses_given_descriptor():
    resolver = Mock()

    block = export_report.resolve_block(resolver, 3041467, 1711023841)

    assert block == BlockData(3041467, 1711023841)
    resolver.get_block.assert_not_called()
    resolver.get_latest_block.assert_not_called()


def test_resolve_block_latest():
    resolver = Mock()
    resolver.get_latest_block.return_value = BlockData(10, 20)

    assert export_report.resolve_block(resolver) == BlockData(10, 20)


def test_resolve_block_fetches_missing_timestamp():
    resolver = Mock()
    resolver.get_block.return_value = BlockData(3041467, 1711023841)

    assert export_report.resolve_block(resolver, 3041467) == BlockData(3041467, 1711023841)
    resolver.get_block.assert_called_once_with(3041467)


def test_main_writes_report(tmp_path):
    output = tmp_path / "outputData.csv"

    with patch("export_report.ContractReader", return_value=single_vault_reader()):
        status = export_report.main([
            "--block-number", "3041467",
            "--timestamp", "1711023841",
            "--output", str(output),
        ])

    assert status == 0
    lines = output.read_text().splitlines()
    assert len(lines) == 2
    assert lines[1] == f"3041467,1711023841,{OWNER_A},{WETH_VAULT},2000000000000000000,MAI,2.00"


def test_main_contract_failure_writes_nothing(tmp_path):
    output = tmp_path / "outputData.csv"
    reader = single_vault_reader()
    reader.failing.add((WETH_VAULT.lower(), "exists"))

    with patch("export_report.ContractReader", return_value=reader):
        status = export_report.main([
            "--block-number", "3041467",
            "--timestamp", "1711023841",
            "--output", str(output),
        ])

    assert status == 1
    assert not output.exists()


def test_main_rpc_failure_writes_nothing(tmp_path):
    output = tmp_path / "outputData.csv"
    resolver = Mock()
    resolver.get_latest_block.side_effect = RpcError("refused")

    with patch("export_report.BlockResolver", return_value=resolver), \
            patch("export_report.ContractReader") as reader_cls:
        status = export_report.main(["--output", str(output)])

    assert status == 1
    assert not output.exists()
    reader_cls.assert_not_called()
