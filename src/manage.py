"""Storefront bundles database management CLI.

Creates and drops the database schema of the bundles domain.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    """Create the database schema for the bundles domain."""
    from bundles.domain import bundles
    from bundles.utils.db import setup_db

    print("Initializing bundles domain...")
    bundles.init()
    print("Creating bundles database schema...")
    setup_db(bundles)
    print("Done.")


def drop_database():
    """Drop the database schema of the bundles domain."""
    from bundles.domain import bundles
    from bundles.utils.db import drop_db

    print("Initializing bundles domain...")
    bundles.init()
    print("Dropping bundles database schema...")
    drop_db(bundles)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Storefront bundles database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
