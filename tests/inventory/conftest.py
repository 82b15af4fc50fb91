import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def inventory_bed():
    from inventory.domain import inventory

    bed = DomainFixture(inventory)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(inventory_bed):
    from inventory.messaging.publisher import reset_publisher
    from protean import current_domain

    with inventory_bed.domain_context():
        yield

        # Clear stored records and events between tests
        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()

    reset_publisher()
