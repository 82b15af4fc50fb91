"""Stock store: keyed access to ItemInventory records.

The repository is the only component that reads or writes stock records.
It does no business validation; callers decide what a missing record or a
low count means.
"""

from protean.exceptions import ObjectNotFoundError

from inventory.domain import inventory
from inventory.stock.item_inventory import ItemInventory


@inventory.repository(part_of=ItemInventory)
class ItemInventoryRepository:
    def find_by_item_id(self, item_id) -> ItemInventory | None:
        """Return the stock record for ``item_id``, or None when there is none."""
        try:
            return self.get(item_id)
        except ObjectNotFoundError:
            return None

    def find_stock_by_item_id(self, item_id) -> int | None:
        record = self.find_by_item_id(item_id)
        return record.in_stock if record is not None else None

    def save(self, record: ItemInventory) -> ItemInventory:
        """Insert or update ``record`` and return it."""
        self.add(record)
        return record

    def exists_by_id(self, item_id) -> bool:
        return self.find_by_item_id(item_id) is not None

    def delete_by_id(self, item_id) -> None:
        """Delete the record for ``item_id``. The caller checks existence first."""
        self._dao.delete(self.get(item_id))
