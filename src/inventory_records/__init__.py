"""
Inventory Records - A plain-text inventory record keeper

Features:
- Append inventory records (description, quantity, wholesale and retail cost)
- Look up any record by its position in the file
- Interactive console menu with input validation
"""

__version__ = "0.1.0"

from .records import InventoryRecord
from .store import InventoryStore, StoreOpenError

__all__ = [
    "InventoryRecord",
    "InventoryStore",
    "StoreOpenError",
]
