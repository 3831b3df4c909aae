"""
Role CLI commands: grant, revoke, list

The HTTP API never writes roles; this is the only way to make an admin.
"""
import asyncio
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.orm.user import User
from storefront.services import role_service


class RoleCommand:
    """Role CLI command handler."""

    def __init__(self, dry_run: bool = False):
        self.dry_run = dry_run

    def execute(self, args) -> int:
        """Execute role command."""
        action = args.roles_action
        if action not in ("grant", "revoke", "list"):
            print("Error: Unknown roles action")
            return 1

        email = args.email.strip().lower()
        role = getattr(args, "role", None)

        if self.dry_run and action != "list":
            print(f"[DRY RUN] Would {action} role '{role}' for {email}")
            return 0

        try:
            return asyncio.run(self._run(action, email, role))
        except Exception as e:
            print(f"Roles {action} failed: {e}")
            return 1

    async def _run(self, action: str, email: str, role: Optional[str]) -> int:
        from storefront.database import AsyncSessionLocal

        async with AsyncSessionLocal() as db:
            if action == "grant":
                changed = await self.grant(db, email, role)
                print(f"✓ Granted '{role}' to {email}" if changed else f"{email} already has '{role}'")
            elif action == "revoke":
                changed = await self.revoke(db, email, role)
                print(f"✓ Revoked '{role}' from {email}" if changed else f"{email} did not have '{role}'")
            else:
                roles = await self.list_roles(db, email)
                print(f"{email}: {', '.join(roles) if roles else '(no roles)'}")
        return 0

    async def _find_user(self, db: AsyncSession, email: str) -> User:
        result = await db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
        if not user:
            raise LookupError(f"No user with email {email}")
        return user

    async def grant(self, db: AsyncSession, email: str, role: str = "admin") -> bool:
        user = await self._find_user(db, email)
        return await role_service.grant_role(db, user.id, role)

    async def revoke(self, db: AsyncSession, email: str, role: str = "admin") -> bool:
        user = await self._find_user(db, email)
        return await role_service.revoke_role(db, user.id, role)

    async def list_roles(self, db: AsyncSession, email: str) -> List[str]:
        user = await self._find_user(db, email)
        return await role_service.list_roles(db, user.id)
