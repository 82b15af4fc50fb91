"""Inventory service FastAPI application.

Processes admin requests and inventory operations synchronously via HTTP,
each request wrapped in the inventory domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from inventory/domain.toml.
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from inventory.domain import inventory
from inventory.utils.logging import configure_logging
from protean.integrations.fastapi import register_exception_handlers

configure_logging()
inventory.init()

app = FastAPI(
    title="Inventory Service API",
    description="Item stock records and batched inventory operations",
)
register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the inventory domain context for inventory routes."""
    if request.url.path.startswith("/inventory"):
        with inventory.domain_context():
            return await call_next(request)
    # Health check, docs, etc.
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from inventory.api import inventory_router  # noqa: E402

app.include_router(inventory_router)


@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": inventory.name})
