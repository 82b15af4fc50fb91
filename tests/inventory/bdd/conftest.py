"""Shared BDD fixtures and step definitions for inventory operations."""

import pytest
from inventory.stock.service import get_in_stock_by_item_id, save_item_in_stock
from pytest_bdd import given, parsers, then


@pytest.fixture()
def result():
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("item {item_id:d} has {in_stock:d} in stock"))
def _(item_id, in_stock):
    save_item_in_stock(item_id, in_stock)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("item {item_id:d} has {in_stock:d} in stock"))
def _(item_id, in_stock):
    assert get_in_stock_by_item_id(item_id) == in_stock


@then(parsers.cfparse('the operation status is "{status}"'))
def _(result, status):
    assert result["value"].status == status


@then("the operation carries no message")
def _(result):
    assert result["value"].message is None


@then(parsers.cfparse('the operation message is "{message}"'))
def _(result, message):
    assert result["value"].message == message


@then(parsers.cfparse('the result belongs to order "{order_number}"'))
def _(result, order_number):
    assert result["value"].order_number == order_number


@then(parsers.cfparse('the result operation is "{operation}"'))
def _(result, operation):
    assert result["value"].operation == operation
