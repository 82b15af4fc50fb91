"""Runtime settings for the inventory service, read from the environment."""

import os

DEFAULT_QUEUE_INVENTORY_REQUEST = "queue.inventory.request"
DEFAULT_QUEUE_INVENTORY_RESPONSE = "queue.inventory.response"


def request_queue() -> str:
    """Queue the ordering side sends inventory operation requests to."""
    return os.environ.get("INVENTORY_REQUEST_QUEUE", DEFAULT_QUEUE_INVENTORY_REQUEST)


def response_queue() -> str:
    """Fallback destination for results whose request carried no reply address."""
    return os.environ.get("INVENTORY_RESPONSE_QUEUE", DEFAULT_QUEUE_INVENTORY_RESPONSE)


def result_publisher_adapter() -> str:
    return os.environ.get("RESULT_PUBLISHER", "fake")
