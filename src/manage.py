"""Storefront management CLI.

Usage:
    python src/manage.py setup-db                  # Create all tables
    python src/manage.py drop-db                   # Drop all tables
    python src/manage.py issue-token <user-id>     # Mint a bearer token for local testing
"""

import argparse
import sys


def setup_databases():
    """Create database schemas for the storefront domain."""
    from storefront.domain import storefront
    from storefront.utils.db import setup_db

    print("Initializing storefront domain...")
    storefront.init()
    print("Creating storefront database schema...")
    prepared = setup_db(storefront)
    if prepared:
        print(f"  schema ready for: {', '.join(prepared)}")
    else:
        print("  no SQL providers configured; nothing to create.")

    print("Done.")


def drop_databases():
    """Drop database schemas for the storefront domain."""
    from storefront.domain import storefront
    from storefront.utils.db import drop_db

    print("Initializing storefront domain...")
    storefront.init()
    print("Dropping storefront database schema...")
    dropped = drop_db(storefront)
    if dropped:
        print(f"  schema dropped for: {', '.join(dropped)}")
    else:
        print("  no SQL providers configured; nothing to drop.")

    print("Done.")


def issue_token(user_id, role):
    from storefront.api.auth import issue_token as _issue_token

    print(_issue_token(user_id, role=role))


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    token_parser = subparsers.add_parser("issue-token", help="Print a bearer token for a user id")
    token_parser.add_argument("user_id")
    token_parser.add_argument("--role", choices=["user", "admin"], default="user")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    elif args.command == "issue-token":
        issue_token(args.user_id, args.role)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
