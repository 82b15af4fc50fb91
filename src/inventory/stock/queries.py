"""Read helpers over the stock store."""

from protean.utils.globals import current_domain

from inventory.stock.item_inventory import ItemInventory


def get_in_stock_by_item_id(item_id) -> int | None:
    """Current in-stock count of ``item_id``, or None when it has no record."""
    return current_domain.repository_for(ItemInventory).find_stock_by_item_id(item_id)


def item_inventory_exist_by_id(item_id) -> bool:
    return current_domain.repository_for(ItemInventory).exists_by_id(item_id)
