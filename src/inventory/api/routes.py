"""FastAPI routes for the Inventory domain: stock records and operations."""

from fastapi import APIRouter, HTTPException, Response
from fastapi.responses import JSONResponse

from inventory.api.schemas import ItemInventoryResponse, StatusResponse, UpdateInStockRequest
from inventory.messaging.schemas import InventoryOperationRequestMessage, InventoryOperationResultMessage
from inventory.stock.service import (
    get_in_stock_by_item_id,
    process_request,
    remove_item_inventory_by_item_id,
    save_item_in_stock,
)

inventory_router = APIRouter(prefix="/inventory", tags=["inventory"])


@inventory_router.post("/operations", response_model=InventoryOperationResultMessage, response_model_by_alias=True)
async def submit_operation(body: InventoryOperationRequestMessage):
    """Run an inventory operation synchronously and return its result.

    Requests without items are accepted and ignored (202, no result).
    """
    result = process_request(body.to_command())
    if result is None:
        return JSONResponse(status_code=202, content=StatusResponse(status="ignored").model_dump())
    return InventoryOperationResultMessage.from_result(result)


@inventory_router.get("/{item_id}", response_model=ItemInventoryResponse)
async def get_item_inventory(item_id: int) -> ItemInventoryResponse:
    in_stock = get_in_stock_by_item_id(item_id)
    if in_stock is None:
        raise HTTPException(status_code=404, detail=f"Inventory item with id {item_id} doesn't exist.")
    return ItemInventoryResponse(item_id=item_id, in_stock=in_stock)


@inventory_router.put("/{item_id}/in-stock", response_model=ItemInventoryResponse)
async def update_item_in_stock(item_id: int, body: UpdateInStockRequest) -> ItemInventoryResponse:
    record = save_item_in_stock(item_id, body.in_stock)
    return ItemInventoryResponse(item_id=record.item_id, in_stock=record.in_stock)


@inventory_router.delete("/{item_id}", status_code=204)
async def remove_item_inventory(item_id: int) -> Response:
    remove_item_inventory_by_item_id(item_id)
    return Response(status_code=204)
