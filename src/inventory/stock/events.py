"""Domain events for the ItemInventory aggregate.

Events are immutable facts about stock movements. They are written to the
event store on commit and give an audit trail of every change to an item's
in-stock count.
"""

from protean.fields import DateTime, Integer, String

from inventory.domain import inventory


@inventory.event(part_of="ItemInventory")
class ItemInventoryCreated:
    """A stock record was provisioned for a catalogue item."""

    __version__ = 1

    item_id = Integer(required=True)
    in_stock = Integer(required=True)
    created_at = DateTime(required=True)


@inventory.event(part_of="ItemInventory")
class InventoryIncreased:
    """Stock was added to an item by an inventory operation."""

    __version__ = 1

    item_id = Integer(required=True)
    quantity = Integer(required=True)
    previous_in_stock = Integer(required=True)
    new_in_stock = Integer(required=True)
    order_number = String()
    increased_at = DateTime(required=True)


@inventory.event(part_of="ItemInventory")
class InventoryDecreased:
    """Stock was taken from an item by an inventory operation."""

    __version__ = 1

    item_id = Integer(required=True)
    quantity = Integer(required=True)
    previous_in_stock = Integer(required=True)
    new_in_stock = Integer(required=True)
    order_number = String()
    decreased_at = DateTime(required=True)


@inventory.event(part_of="ItemInventory")
class InStockCorrected:
    """The in-stock count was overwritten by an administrative correction."""

    __version__ = 1

    item_id = Integer(required=True)
    previous_in_stock = Integer(required=True)
    new_in_stock = Integer(required=True)
    corrected_at = DateTime(required=True)
