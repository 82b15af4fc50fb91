"""Result publisher port — delivers operation results to reply destinations.

The inventory service programs against this interface; the transport (a
message broker queue, an HTTP callback, ...) lives in an adapter.
"""

from abc import ABC, abstractmethod

from inventory.messaging.schemas import InventoryOperationResultMessage


class ResultPublisher(ABC):
    """Abstract interface for result publisher adapters."""

    @abstractmethod
    def publish(self, destination: str, message: InventoryOperationResultMessage) -> None:
        """Deliver ``message`` to ``destination``.

        Raises on transport failure; the caller decides whether to retry.
        """
        ...
