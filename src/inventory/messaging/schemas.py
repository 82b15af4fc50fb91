"""Pydantic message contracts for the inventory request/result queues.

These are the external wire format (camelCase keys) exchanged with the
ordering service, kept separate from the internal Protean command and
value object.
"""

import json

from pydantic import BaseModel, ConfigDict, Field

from inventory.stock.operation import (
    InventoryOperation,
    InventoryOperationResult,
    InventoryOperationStatus,
    ProcessInventoryOperation,
)


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class InventoryInfo(_WireModel):
    item_id: int = Field(alias="itemId")
    quantity: int


class InventoryOperationRequestMessage(_WireModel):
    operation: InventoryOperation
    order_number: str = Field(alias="orderNumber")
    items: list[InventoryInfo] = Field(default_factory=list)
    reply_to: str | None = Field(default=None, alias="replyTo")

    def to_command(self) -> ProcessInventoryOperation:
        return ProcessInventoryOperation(
            operation=self.operation.value,
            order_number=self.order_number,
            items=json.dumps([{"item_id": i.item_id, "quantity": i.quantity} for i in self.items]),
            reply_to=self.reply_to,
        )


class InventoryOperationResultMessage(_WireModel):
    operation: InventoryOperation
    order_number: str = Field(alias="orderNumber")
    status: InventoryOperationStatus
    message: str | None = None

    @classmethod
    def from_result(cls, result: InventoryOperationResult) -> "InventoryOperationResultMessage":
        return cls(
            operation=InventoryOperation(result.operation),
            order_number=result.order_number,
            status=InventoryOperationStatus(result.status),
            message=result.message,
        )
