"""Entry points of the inventory operation service.

Callers (the message consumer, the HTTP API, the management CLI) go through
these functions rather than dispatching commands themselves. Every call runs
its command in a unit of work of its own; a write against a stock record
that changed since it was read is rejected on commit and the handler is run
again on fresh data.
"""

from protean.utils.globals import current_domain

from inventory.stock.item_inventory import ItemInventory
from inventory.stock.management import RemoveItemInventory, SetItemInStock
from inventory.stock.operation import InventoryOperationResult, ProcessInventoryOperation
from inventory.stock.queries import get_in_stock_by_item_id, item_inventory_exist_by_id

__all__ = [
    "get_in_stock_by_item_id",
    "item_inventory_exist_by_id",
    "process_request",
    "remove_item_inventory_by_item_id",
    "save_item_in_stock",
]


def process_request(command: ProcessInventoryOperation) -> InventoryOperationResult | None:
    """Run an operation request; None when the request lists no items."""
    return current_domain.process(command, asynchronous=False)


def save_item_in_stock(item_id: int, in_stock: int) -> ItemInventory:
    return current_domain.process(SetItemInStock(item_id=item_id, in_stock=in_stock), asynchronous=False)


def remove_item_inventory_by_item_id(item_id: int) -> None:
    current_domain.process(RemoveItemInventory(item_id=item_id), asynchronous=False)
