import sys
import argparse
import logging
from pathlib import Path
from dotenv import load_dotenv

# Add parent directory to PYTHONPATH and load environment variables
root_path = str(Path(__file__).parent)
sys.path.append(root_path)
load_dotenv(Path(root_path) / '.env')

from config.networks import RPC_URLS, OUTPUT_FILE
from mai.client import BlockData, BlockResolver, ContractReader
from mai.vault_reader import VaultEnumerator
from builder.report_builder import ReportBuilder
from builder.csv_writer import write_rows
from utils.logger import get_logger, set_level

logger = get_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Export MAI debt of every QiDao vault on Linea to CSV')
    parser.add_argument('--block-number', type=int, default=None,
                        help='Block to snapshot (default: latest)')
    parser.add_argument('--timestamp', type=int, default=None,
                        help='Unix timestamp of the block (default: read from the chain)')
    parser.add_argument('--output', type=str, default=OUTPUT_FILE,
                        help='CSV file to write (default: ' + OUTPUT_FILE + ')')
    parser.add_argument('--rpc-url', type=str, default=RPC_URLS['linea'],
                        help='Linea JSON-RPC endpoint')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    return parser.parse_args(argv)


def resolve_block(resolver: BlockResolver, block_number: int = None, timestamp: int = None) -> BlockData:
    """Use the given block descriptor, asking the chain only for what is missing"""
    if block_number is None:
        return resolver.get_latest_block()
    if timestamp is None:
        return resolver.get_block(block_number)
    return BlockData(block_number=block_number, block_timestamp=timestamp)


def export_report(block: BlockData, output: str, reader: ContractReader) -> int:
    """Build the full report then write it; nothing is written if any read fails"""
    builder = ReportBuilder(VaultEnumerator(reader))
    rows = builder.build_report_for_block(block)
    return write_rows(rows, output)


def main(argv=None) -> int:
    """CLI entry point: snapshot vault debt and write it to CSV."""
    args = parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)

    try:
        resolver = BlockResolver(rpc_url=args.rpc_url)
        block = resolve_block(resolver, args.block_number, args.timestamp)
        logger.info(f"Snapshot at block {block.block_number} (timestamp {block.block_timestamp})")

        reader = ContractReader(rpc_url=args.rpc_url)
        row_count = export_report(block, args.output, reader)

        logger.info(f"✓ Wrote {row_count} rows to {args.output}")
        return 0

    except Exception as e:
        logger.error(f"❌ Error fetching vault debt: {str(e)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
