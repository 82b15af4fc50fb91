"""Inventory service management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Create the default stock records
"""

import argparse
import sys


def setup_database():
    """Create the database schema of the inventory domain."""
    from inventory.domain import inventory
    from inventory.utils.db import setup_db

    print("Initializing inventory domain...")
    inventory.init()
    print("Creating inventory database schema...")
    setup_db(inventory)
    print("Done.")


def drop_database():
    """Drop the database schema of the inventory domain."""
    from inventory.domain import inventory
    from inventory.utils.db import drop_db

    print("Initializing inventory domain...")
    inventory.init()
    print("Dropping inventory database schema...")
    drop_db(inventory)
    print("Done.")


def seed_inventory():
    """Create the default stock records that do not exist yet."""
    from inventory.domain import inventory
    from inventory.stock.item_inventory import ItemInventory
    from inventory.stock.seed import create_default_inventory

    inventory.init()
    with inventory.domain_context():
        created = create_default_inventory(inventory.repository_for(ItemInventory))
    print(f"Created {created} stock record(s).")


def main():
    from inventory.utils.logging import configure_logging

    configure_logging()

    parser = argparse.ArgumentParser(description="Inventory service management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Create the default stock records")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_inventory()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
