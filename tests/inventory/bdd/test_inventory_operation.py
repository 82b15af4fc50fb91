"""BDD tests for batched inventory operations."""

import json

from inventory.stock.operation import ProcessInventoryOperation
from inventory.stock.service import process_request
from pytest_bdd import parsers, scenarios, when

scenarios("features/inventory_operation.feature")


def _run(result, operation, order_number, item_ids, quantity):
    items = [{"item_id": int(item_id), "quantity": quantity} for item_id in item_ids.split(",")]
    command = ProcessInventoryOperation(operation=operation, order_number=order_number, items=json.dumps(items))
    result["value"] = process_request(command)


@when(parsers.cfparse('order "{order_number}" decreases items {item_ids} by {quantity:d}'))
def _(result, order_number, item_ids, quantity):
    _run(result, "DECREASE", order_number, item_ids, quantity)


@when(parsers.cfparse('order "{order_number}" increases items {item_ids} by {quantity:d}'))
def _(result, order_number, item_ids, quantity):
    _run(result, "INCREASE", order_number, item_ids, quantity)
