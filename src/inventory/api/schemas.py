"""Pydantic request/response schemas for the Inventory admin API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands. Operation submission reuses the queue message
schemas so HTTP and queue callers share one wire format.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class UpdateInStockRequest(BaseModel):
    in_stock: int = Field(ge=0)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ItemInventoryResponse(BaseModel):
    item_id: int
    in_stock: int


class StatusResponse(BaseModel):
    status: str = "ok"
