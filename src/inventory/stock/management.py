"""Stock record management: administrative commands and handler."""

import structlog
from protean import handle
from protean.fields import Integer
from protean.utils.globals import current_domain

from inventory.domain import inventory
from inventory.stock import queries
from inventory.stock.item_inventory import ItemInventory

logger = structlog.get_logger(__name__)


@inventory.command(part_of="ItemInventory")
class SetItemInStock:
    """Create or overwrite the stock record of an item."""

    item_id = Integer(required=True)
    in_stock = Integer(required=True, min_value=0)


@inventory.command(part_of="ItemInventory")
class RemoveItemInventory:
    """Delete the stock record of an item, if it has one."""

    item_id = Integer(required=True)


@inventory.command_handler(part_of=ItemInventory)
class ItemInventoryManagementHandler:
    @handle(SetItemInStock)
    def set_item_in_stock(self, command):
        repo = current_domain.repository_for(ItemInventory)
        record = repo.find_by_item_id(command.item_id)
        if record is None:
            record = ItemInventory.create(item_id=command.item_id, in_stock=command.in_stock)
        else:
            record.set_in_stock(command.in_stock)
        return repo.save(record)

    @handle(RemoveItemInventory)
    def remove_item_inventory(self, command):
        if not queries.item_inventory_exist_by_id(command.item_id):
            logger.info("No stock record to remove", item_id=command.item_id)
            return

        current_domain.repository_for(ItemInventory).delete_by_id(command.item_id)
        logger.info("Removed stock record", item_id=command.item_id)
