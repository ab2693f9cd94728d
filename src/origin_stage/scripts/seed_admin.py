"""Create the administrator account from settings or command-line overrides."""
from __future__ import annotations

import argparse
import sys

from origin_stage.core.errors import AppError
from origin_stage.core.settings import settings
from origin_stage.db.session import SessionLocal, create_tables
from origin_stage.services.user_service import ensure_admin


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the administrator account")
    parser.add_argument("--email", default=settings.admin_email, help="Admin email (ADMIN_EMAIL)")
    parser.add_argument(
        "--password",
        default=settings.admin_password,
        help="Admin password (ADMIN_PASSWORD)",
    )
    parser.add_argument("--name", default=settings.admin_name, help="Display name (ADMIN_NAME)")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding.",
    )
    args = parser.parse_args(argv)

    if not args.email or not args.password:
        print("[seed_admin] ERROR: ADMIN_EMAIL and ADMIN_PASSWORD are required", file=sys.stderr)
        return 1

    if args.create_tables:
        create_tables()

    with SessionLocal() as db:
        try:
            user, created = ensure_admin(
                db,
                name=args.name,
                email=args.email,
                password=args.password,
            )
        except AppError as exc:
            print(f"[seed_admin] ERROR: {exc.message}", file=sys.stderr)
            return 1

        if created:
            print(f"[seed_admin] created admin user {user.id}")
        else:
            print("[seed_admin] admin user already exists, skipping creation")
    return 0


if __name__ == "__main__":
    sys.exit(main())
