"""
Operations CLI: parsing, dry runs and role management.
"""
import pytest

from storefront.cli import create_parser, main
from storefront.cli.db_commands import DbCommand
from storefront.cli.role_commands import RoleCommand
from storefront.services import role_service


class TestCLIParser:

    def test_db_seed_parsing(self):
        args = create_parser().parse_args(["db", "seed"])
        assert args.command == "db"
        assert args.db_action == "seed"

    def test_roles_grant_parsing(self):
        args = create_parser().parse_args(["roles", "grant", "--email", "a@example.com"])
        assert args.command == "roles"
        assert args.roles_action == "grant"
        assert args.email == "a@example.com"
        assert args.role == "admin"

    def test_dry_run_flag(self):
        args = create_parser().parse_args(["--dry-run", "roles", "revoke", "-e", "a@example.com"])
        assert args.dry_run is True

    def test_email_is_required(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["roles", "grant"])


class TestDryRun:

    def test_no_command_prints_help(self):
        assert main([]) == 1

    def test_seed_dry_run(self, capsys):
        assert main(["--dry-run", "db", "seed"]) == 0
        assert "[DRY RUN]" in capsys.readouterr().out

    def test_grant_dry_run(self, capsys):
        assert main(["--dry-run", "roles", "grant", "--email", "a@example.com"]) == 0
        assert "Would grant role 'admin'" in capsys.readouterr().out

    def test_unknown_db_action(self):
        args = create_parser().parse_args(["db"])
        assert DbCommand().execute(args) == 1


class TestRoleCommand:

    async def test_grant_list_revoke(self, db, register_user):
        user_id, _ = await register_user(email="ops@example.com")
        command = RoleCommand()

        assert await command.grant(db, "ops@example.com") is True
        assert await command.grant(db, "ops@example.com") is False
        assert await command.list_roles(db, "ops@example.com") == ["admin"]
        assert await role_service.is_admin(db, user_id) is True

        assert await command.revoke(db, "ops@example.com") is True
        assert await command.revoke(db, "ops@example.com") is False
        assert await role_service.is_admin(db, user_id) is False

    async def test_unknown_email(self, db):
        with pytest.raises(LookupError):
            await RoleCommand().grant(db, "ghost@example.com")
