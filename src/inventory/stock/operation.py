"""Inventory operations — batched INCREASE/DECREASE requests and their results.

An operation request carries an order number, an operation kind and an
ordered list of (item id, quantity) lines. The handler validates the lines
in order, stops at the first failing one, and only writes stock changes when
every line passed. The outcome is always reported as an
``InventoryOperationResult``; business failures are never raised. Each
outcome is recorded per (operation, order number), so a redelivered request
gets the same answer without touching stock again.
"""

import json
from datetime import UTC, datetime
from enum import Enum

import structlog
from protean import handle, invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Integer, String, Text
from protean.utils.globals import current_domain

from inventory.domain import inventory
from inventory.stock.item_inventory import ItemInventory

logger = structlog.get_logger(__name__)


class InventoryOperation(Enum):
    INCREASE = "INCREASE"
    DECREASE = "DECREASE"


class InventoryOperationStatus(Enum):
    SUCCESS = "SUCCESS"
    FAIL = "FAIL"


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@inventory.value_object
class InventoryLine:
    """One (item id, quantity) pair of an operation request."""

    item_id = Integer(required=True)
    quantity = Integer(required=True)


@inventory.value_object
class InventoryOperationResult:
    """Outcome of one operation request, correlated by order number.

    A FAIL result always carries a human-readable message; a SUCCESS
    result never does.
    """

    operation = String(required=True, choices=InventoryOperation)
    order_number = String(required=True)
    status = String(required=True, choices=InventoryOperationStatus)
    message = String(max_length=1000)

    @invariant.post
    def message_present_only_on_failure(self):
        if self.status == InventoryOperationStatus.FAIL.value and not (self.message or "").strip():
            raise ValidationError({"message": ["A failed operation must explain why"]})
        if self.status == InventoryOperationStatus.SUCCESS.value and self.message:
            raise ValidationError({"message": ["A successful operation carries no message"]})

    @classmethod
    def success(cls, operation, order_number):
        return cls(
            operation=InventoryOperation(operation).value,
            order_number=order_number,
            status=InventoryOperationStatus.SUCCESS.value,
        )

    @classmethod
    def fail(cls, operation, order_number, message):
        return cls(
            operation=InventoryOperation(operation).value,
            order_number=order_number,
            status=InventoryOperationStatus.FAIL.value,
            message=message,
        )

    @property
    def succeeded(self):
        return self.status == InventoryOperationStatus.SUCCESS.value


# ---------------------------------------------------------------------------
# Aggregate
# ---------------------------------------------------------------------------
@inventory.aggregate
class ProcessedOperation:
    """Recorded outcome of one (operation, order number) pair.

    Requests arrive at least once. A redelivered request is answered from
    this record and never applied a second time.
    """

    operation_key = String(identifier=True, max_length=300)
    operation = String(required=True, choices=InventoryOperation)
    order_number = String(required=True)
    status = String(required=True, choices=InventoryOperationStatus)
    message = String(max_length=1000)
    processed_at = DateTime()

    @staticmethod
    def key_for(operation, order_number):
        return f"{InventoryOperation(operation).value}:{order_number}"

    @classmethod
    def record(cls, result):
        return cls(
            operation_key=cls.key_for(result.operation, result.order_number),
            operation=result.operation,
            order_number=result.order_number,
            status=result.status,
            message=result.message,
            processed_at=datetime.now(UTC),
        )

    def to_result(self):
        return InventoryOperationResult(
            operation=self.operation,
            order_number=self.order_number,
            status=self.status,
            message=self.message,
        )


def parse_lines(items) -> list[InventoryLine]:
    """Decode the JSON line list of a request into ``InventoryLine`` objects."""
    data = json.loads(items) if isinstance(items, str) else items
    return [InventoryLine(item_id=line.get("item_id"), quantity=line.get("quantity")) for line in data or []]


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------
@inventory.command(part_of="ItemInventory")
class ProcessInventoryOperation:
    """Apply an INCREASE or DECREASE to every listed item, or to none of them."""

    operation = String(required=True, choices=InventoryOperation)
    order_number = String(required=True)
    items = Text(required=True)  # JSON: list of {"item_id": int, "quantity": int}
    reply_to = String()  # Opaque reply address, forwarded by the messaging layer


# ---------------------------------------------------------------------------
# Handler
# ---------------------------------------------------------------------------
@inventory.command_handler(part_of=ItemInventory)
class InventoryOperationHandler:
    @handle(ProcessInventoryOperation)
    def process_request(self, command):
        lines = parse_lines(command.items)
        if not lines:
            logger.info("Ignoring inventory operation without items", order_number=command.order_number)
            return None

        operation = InventoryOperation(command.operation)
        processed = self._processed(operation, command.order_number)
        if processed is not None:
            logger.info(
                "Replaying recorded inventory operation result",
                order_number=command.order_number,
                operation=operation.value,
                status=processed.status,
            )
            return processed.to_result()

        repo = current_domain.repository_for(ItemInventory)

        # Stage: validate every line against the counts it would leave behind
        records: dict[int, ItemInventory] = {}
        staged: dict[int, int] = {}
        for line in lines:
            if line.quantity <= 0:
                return self._fail(
                    command,
                    f"Invalid quantity {line.quantity} for inventory item with id {line.item_id}.",
                )

            if line.item_id not in records:
                record = repo.find_by_item_id(line.item_id)
                if record is None:
                    return self._fail(command, f"Inventory item with id {line.item_id} doesn't exist.")
                records[line.item_id] = record
                staged[line.item_id] = record.in_stock or 0

            if operation == InventoryOperation.DECREASE:
                if staged[line.item_id] < line.quantity:
                    return self._fail(command, f"Inventory item with id {line.item_id} is out of stock.")
                staged[line.item_id] -= line.quantity
            else:
                staged[line.item_id] += line.quantity

        # Commit: every line passed, apply all of them
        for line in lines:
            record = records[line.item_id]
            if operation == InventoryOperation.DECREASE:
                record.decrease(line.quantity, order_number=command.order_number)
            else:
                record.increase(line.quantity, order_number=command.order_number)

        for record in records.values():
            repo.save(record)

        logger.info(
            "Inventory operation applied",
            order_number=command.order_number,
            operation=operation.value,
            item_count=len(records),
        )
        return self._record(InventoryOperationResult.success(operation, command.order_number))

    def _fail(self, command, message):
        logger.warning(
            "Inventory operation rejected",
            order_number=command.order_number,
            operation=command.operation,
            reason=message,
        )
        return self._record(InventoryOperationResult.fail(command.operation, command.order_number, message))

    def _processed(self, operation, order_number):
        try:
            return current_domain.repository_for(ProcessedOperation).get(
                ProcessedOperation.key_for(operation, order_number)
            )
        except ObjectNotFoundError:
            return None

    def _record(self, result):
        current_domain.repository_for(ProcessedOperation).add(ProcessedOperation.record(result))
        return result
