"""Fake result publisher: records deliveries in memory for tests and development."""

from inventory.messaging.publisher.port import ResultPublisher
from inventory.messaging.schemas import InventoryOperationResultMessage


class ResultPublishError(RuntimeError):
    """Raised by the fake publisher when configured to fail."""


class FakeResultPublisher(ResultPublisher):
    """Keeps every published (destination, message) pair."""

    def __init__(self):
        self.published: list[tuple[str, InventoryOperationResultMessage]] = []
        self.should_fail = False
        self.failure_reason = "Broker unavailable"

    def configure(self, should_fail: bool = False, failure_reason: str = "Broker unavailable"):
        """Configure the fake publisher behavior for testing."""
        self.should_fail = should_fail
        self.failure_reason = failure_reason

    def publish(self, destination: str, message: InventoryOperationResultMessage) -> None:
        if self.should_fail:
            raise ResultPublishError(self.failure_reason)
        self.published.append((destination, message))

    def messages_for(self, destination: str) -> list[InventoryOperationResultMessage]:
        return [message for dest, message in self.published if dest == destination]
