"""Inventory request consumer — the bridge between the request queue and the handler.

Transport adapters hand every raw message from the inventory request queue
to ``InventoryRequestConsumer.on_message``. The consumer decodes it, runs the
operation, and publishes exactly one result to the reply address carried on
the request (falling back to the configured response queue). Requests
without items produce no result.

Malformed messages and transport failures are raised back to the caller so
the messaging layer can apply its own retry or dead-letter policy.
"""

import json

import structlog

from inventory.config import request_queue, response_queue
from inventory.messaging.publisher import get_publisher
from inventory.messaging.schemas import InventoryOperationRequestMessage, InventoryOperationResultMessage
from inventory.stock.service import process_request
from inventory.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


class InventoryRequestConsumer:
    """Processes inventory operation request messages one at a time."""

    def __init__(self, publisher=None, queue: str | None = None):
        self._publisher = publisher
        self.queue = queue or request_queue()

    @property
    def publisher(self):
        return self._publisher or get_publisher()

    def parse(self, body) -> InventoryOperationRequestMessage:
        if isinstance(body, bytes | bytearray):
            body = body.decode("utf-8")
        if isinstance(body, str):
            body = json.loads(body)
        return InventoryOperationRequestMessage.model_validate(body)

    def on_message(self, body, reply_to: str | None = None) -> InventoryOperationResultMessage | None:
        """Handle one raw request message; returns the published result, if any."""
        try:
            request = self.parse(body)
        except ValueError as exc:  # JSON decode errors and pydantic ValidationError
            logger.error("Rejected malformed inventory request", error=str(exc))
            raise

        add_context(order_number=request.order_number)
        logger.debug("Received inventory request", queue=self.queue, operation=request.operation.value)
        try:
            result = process_request(request.to_command())
            if result is None:
                return None

            message = InventoryOperationResultMessage.from_result(result)
            destination = request.reply_to or reply_to or response_queue()
            self.publisher.publish(destination, message)
            logger.info(
                "Published inventory operation result",
                destination=destination,
                status=message.status.value,
            )
            return message
        finally:
            clear_context()
