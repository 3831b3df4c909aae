#!/usr/bin/env python3
"""
JavaMaster storefront operations CLI

Usage:
    python -m storefront.cli <command> [options]

Commands:
    db      Database operations (init, seed, stats)
    roles   Role management (grant, revoke, list)

Environment:
    DATABASE_URL    SQLAlchemy async connection string
    LOG_LEVEL       DEBUG|INFO|WARNING|ERROR
"""
import sys
import argparse
import logging
from typing import Optional

from storefront.cli.db_commands import DbCommand
from storefront.cli.role_commands import RoleCommand


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="storefront",
        description="JavaMaster storefront operations CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s db init
  %(prog)s db seed
  %(prog)s db stats
  %(prog)s roles grant --email admin@example.com
  %(prog)s roles list --email admin@example.com
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0"
    )

    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be done without executing"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Database commands
    db_parser = subparsers.add_parser("db", help="Database operations")
    db_subparsers = db_parser.add_subparsers(dest="db_action")

    db_subparsers.add_parser("init", help="Create missing tables")
    db_subparsers.add_parser("seed", help="Seed the course catalogue (idempotent)")
    db_subparsers.add_parser("stats", help="Show revenue, sales and student counts")

    # Role commands
    roles_parser = subparsers.add_parser("roles", help="Role management")
    roles_subparsers = roles_parser.add_subparsers(dest="roles_action")

    grant_parser = roles_subparsers.add_parser("grant", help="Grant a role to a user")
    grant_parser.add_argument("--email", "-e", required=True, help="User email")
    grant_parser.add_argument("--role", default="admin", help="Role name (default: admin)")

    revoke_parser = roles_subparsers.add_parser("revoke", help="Revoke a role from a user")
    revoke_parser.add_argument("--email", "-e", required=True, help="User email")
    revoke_parser.add_argument("--role", default="admin", help="Role name (default: admin)")

    list_parser = roles_subparsers.add_parser("list", help="List a user's roles")
    list_parser.add_argument("--email", "-e", required=True, help="User email")

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        return 1

    setup_logging(parsed.log_level)

    command_map = {
        "db": DbCommand,
        "roles": RoleCommand,
    }

    if parsed.command in command_map:
        handler = command_map[parsed.command](dry_run=parsed.dry_run)
        return handler.execute(parsed)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
