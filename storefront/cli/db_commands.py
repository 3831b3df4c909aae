"""
Database CLI commands: init, seed, stats
"""
import asyncio

from sqlalchemy.ext.asyncio import AsyncSession


class DbCommand:
    """Database CLI command handler."""

    def __init__(self, dry_run: bool = False):
        self.dry_run = dry_run

    def execute(self, args) -> int:
        """Execute database command."""
        if args.db_action == "init":
            return self._init(args)
        elif args.db_action == "seed":
            return self._seed(args)
        elif args.db_action == "stats":
            return self._stats(args)
        else:
            print("Error: Unknown database action")
            return 1

    def _init(self, args) -> int:
        print("=== Database Init ===")
        if self.dry_run:
            print("[DRY RUN] Would create missing tables")
            return 0

        from storefront.database import init_db
        try:
            asyncio.run(init_db())
        except Exception as e:
            print(f"Init failed: {e}")
            return 1
        print("✓ Tables ready")
        return 0

    def _seed(self, args) -> int:
        print("=== Course Catalogue Seed ===")
        if self.dry_run:
            from storefront.seed.seed_courses import validated_catalogue
            for seed in validated_catalogue():
                print(f"  - {seed.title}")
            print("[DRY RUN] Would insert the courses above if missing")
            return 0

        try:
            created = asyncio.run(self._with_session(self.seed))
        except Exception as e:
            print(f"Seed failed: {e}")
            return 1
        print(f"✓ {created} courses created")
        return 0

    def _stats(self, args) -> int:
        print("=== Storefront Stats ===")
        if self.dry_run:
            print("[DRY RUN] Would read order and profile totals")
            return 0

        try:
            stats = asyncio.run(self._with_session(self.stats))
        except Exception as e:
            print(f"Stats failed: {e}")
            return 1

        print(f"Total revenue:   {stats.total_revenue:.2f}")
        print(f"Refunded amount: {stats.refunded_amount:.2f}")
        print(f"Net revenue:     {stats.net_revenue:.2f}")
        print(f"Total sales:     {stats.total_sales}")
        print(f"Total students:  {stats.total_students}")
        return 0

    async def _with_session(self, operation):
        from storefront.database import AsyncSessionLocal, init_db

        await init_db()
        async with AsyncSessionLocal() as db:
            return await operation(db)

    async def seed(self, db: AsyncSession) -> int:
        from storefront.seed.seed_courses import seed_courses
        return await seed_courses(db)

    async def stats(self, db: AsyncSession):
        from storefront.services.admin_service import compute_stats
        return await compute_stats(db)
