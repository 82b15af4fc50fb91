"""Default stock records for a fresh installation.

``create_default_inventory`` is an explicit startup routine: it is run once
(from ``manage.py seed``) against the repository it is handed, and only
creates records that are missing, so re-running it never resets live counts.
"""

import structlog

from inventory.stock.item_inventory import ItemInventory

logger = structlog.get_logger(__name__)

# item id -> initial in-stock count for the demo catalogue
DEFAULT_ITEM_STOCK = {
    1: 17,
    2: 12,
    3: 8,
    4: 24,
    5: 5,
    6: 30,
    7: 14,
    8: 9,
    9: 21,
    10: 11,
}


def create_default_inventory(repository, defaults=None) -> int:
    """Create the default stock records missing from ``repository``.

    Returns the number of records created.
    """
    defaults = DEFAULT_ITEM_STOCK if defaults is None else defaults

    created = 0
    for item_id, in_stock in defaults.items():
        if repository.exists_by_id(item_id):
            continue
        repository.save(ItemInventory.create(item_id=item_id, in_stock=in_stock))
        created += 1

    logger.info("Default inventory seeded", created=created, skipped=len(defaults) - created)
    return created
