import json
from pathlib import Path

# Load ABIs from JSON files
def load_abi(filename):
    with open(Path(__file__).parent / filename, 'r') as f:
        return json.load(f)

VAULT_ABI = load_abi('vault.json')
