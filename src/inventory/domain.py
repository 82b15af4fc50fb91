"""Inventory bounded context — item stock and inventory operations.

Tracks the in-stock count of every catalogue item and processes batched
INCREASE/DECREASE operation requests arriving from the ordering side,
answering each with a correlated result message.
"""

import structlog
from protean.domain import Domain

inventory = Domain(name="inventory")

logger = structlog.get_logger(__name__)
