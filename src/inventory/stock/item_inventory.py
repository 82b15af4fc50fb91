"""ItemInventory aggregate (CQRS) — the stock record of one catalogue item.

Each record is keyed by the catalogue's integer item id and holds a single
non-negative ``in_stock`` count. Counts change only through ``increase``,
``decrease`` and ``set_in_stock``; every change raises a domain event.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer

from inventory.domain import inventory
from inventory.stock.events import (
    InStockCorrected,
    InventoryDecreased,
    InventoryIncreased,
    ItemInventoryCreated,
)


@inventory.aggregate
class ItemInventory:
    """Stock count for one catalogue item."""

    item_id = Integer(identifier=True, required=True)
    in_stock = Integer(default=0, min_value=0)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def in_stock_cannot_be_negative(self):
        if self.in_stock is not None and self.in_stock < 0:
            raise ValidationError({"in_stock": ["In-stock count cannot be negative"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, item_id, in_stock=0):
        """Provision a stock record for a catalogue item."""
        if in_stock is None or in_stock < 0:
            raise ValidationError({"in_stock": ["In-stock count cannot be negative"]})

        now = datetime.now(UTC)
        item = cls(item_id=item_id, in_stock=in_stock, created_at=now, updated_at=now)
        item.raise_(
            ItemInventoryCreated(
                item_id=item_id,
                in_stock=in_stock,
                created_at=now,
            )
        )
        return item

    # -------------------------------------------------------------------
    # Stock movements
    # -------------------------------------------------------------------
    def increase(self, quantity, order_number=None):
        """Add ``quantity`` units to the in-stock count."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        previous = self.in_stock or 0
        self.in_stock = previous + quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            InventoryIncreased(
                item_id=self.item_id,
                quantity=quantity,
                previous_in_stock=previous,
                new_in_stock=self.in_stock,
                order_number=order_number,
                increased_at=self.updated_at,
            )
        )

    def decrease(self, quantity, order_number=None):
        """Take ``quantity`` units from the in-stock count."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        previous = self.in_stock or 0
        if previous < quantity:
            raise ValidationError({"quantity": [f"Insufficient stock: {previous} in stock, {quantity} requested"]})

        self.in_stock = previous - quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            InventoryDecreased(
                item_id=self.item_id,
                quantity=quantity,
                previous_in_stock=previous,
                new_in_stock=self.in_stock,
                order_number=order_number,
                decreased_at=self.updated_at,
            )
        )

    def set_in_stock(self, in_stock):
        """Overwrite the in-stock count (administrative correction)."""
        if in_stock is None or in_stock < 0:
            raise ValidationError({"in_stock": ["In-stock count cannot be negative"]})

        previous = self.in_stock or 0
        self.in_stock = in_stock
        self.updated_at = datetime.now(UTC)

        self.raise_(
            InStockCorrected(
                item_id=self.item_id,
                previous_in_stock=previous,
                new_in_stock=in_stock,
                corrected_at=self.updated_at,
            )
        )
