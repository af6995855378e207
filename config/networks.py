import os
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

# RPC endpoints for supported networks
RPC_URLS = {
    "linea": os.getenv('LINEA_RPC', 'https://rpc.linea.build'),
}

# Chain IDs for network identification
CHAIN_IDS = {
    "linea": "59144"
}

# Seconds to wait on a single JSON-RPC round trip
RPC_TIMEOUT = float(os.getenv('RPC_TIMEOUT', '30'))

# Default CSV destination for the debt report
OUTPUT_FILE = os.getenv('OUTPUT_FILE', 'outputData.csv')

# MAI stablecoin: every vault debt is denominated in it
MAI_TOKEN = {
    "linea": {
        "address": "0xf3B001D64C656e30a62fbaacA003B1336b4ce12A",
        "decimals": 18,
        "name": "Mai Stablecoin",
        "symbol": "MAI"
    }
}

# QiDao collateral vault contracts. Order is the report row order.
COLLATERAL_VAULTS = {
    "linea": [
        {
            "address": "0x7f9dd991e8fd0cbb52cb8eb35dd35c474a9a7a70",
            "name": "WETH Vault",
            "symbol": "WETH"
        },
        {
            "address": "0x8ab01c5ee3422099156ab151eecb83c095626599",
            "name": "BTC Vault",
            "symbol": "BTC"
        },
        {
            "address": "0x60d133c666919B54a3254E0d3F14332cB783B733",
            "name": "mpETH Vault",
            "symbol": "MPETH"
        },
    ]
}
