"""Result publisher adapter registry.

Uses FakeResultPublisher by default. Other transports are selected through
the RESULT_PUBLISHER environment variable.
"""

from inventory.config import result_publisher_adapter

_publisher_instance = None


def get_publisher():
    """Return the configured result publisher (singleton)."""
    global _publisher_instance
    if _publisher_instance is None:
        adapter = result_publisher_adapter()
        if adapter == "fake":
            from inventory.messaging.publisher.fake_adapter import FakeResultPublisher

            _publisher_instance = FakeResultPublisher()
        else:
            raise ValueError(f"Unknown result publisher adapter: {adapter}")
    return _publisher_instance


def reset_publisher():
    """Reset the publisher singleton (useful for testing)."""
    global _publisher_instance
    _publisher_instance = None
