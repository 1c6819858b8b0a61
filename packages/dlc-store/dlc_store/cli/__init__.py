"""
dlc-store CLI - Command-line interface for inspecting a wallet store.

Wallet Commands:
- dlc-store balance - Spendable balance
- dlc-store address list|add|remove - Receiving addresses
- dlc-store utxo list|unreserve - Unspent outputs

Contract Commands:
- dlc-store contract list [--state S] - List contracts
- dlc-store contract show <id> - Show one contract
- dlc-store contract remove <id> - Delete a contract

Other Commands:
- dlc-store location get|set - Saved location
"""

from .main import cli
