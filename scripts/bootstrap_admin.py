#!/usr/bin/env python3
"""Bootstrap the first ADMIN account.

Self-registration only offers USER and CEO, and promotion requires an
ADMIN caller, so the first administrator is created (or promoted) here.

Usage:
    # Using environment variables:
    ADMIN_EMAIL=admin@example.com ADMIN_PASSWORD=change-me python -m scripts.bootstrap_admin

    # Or with command line args:
    python -m scripts.bootstrap_admin --email admin@example.com --password change-me --name Admin

Environment Variables:
    ADMIN_EMAIL: Email for the admin account
    ADMIN_PASSWORD: Password, used only when the account is created
    DATABASE_URL and the secrets required by the application settings
"""

from __future__ import annotations

import argparse
import asyncio
import os
import sys
from datetime import UTC, datetime


async def bootstrap_admin(
    email: str, password: str, name: str, dry_run: bool = False
) -> dict[str, str | None]:
    """Create an ACTIVE ADMIN account or promote an existing one.

    Returns:
        dict with account_id, email and status ('created', 'promoted',
        'already_admin' or 'dry_run').
    """
    # Import here so settings are loaded after argument parsing
    from uuid_extensions import uuid7

    from src.core.container import get_database, get_password_service
    from src.core.result import Failure
    from src.domain.entities.account import Account
    from src.domain.enums import AccountRole, AccountStatus
    from src.domain.validators import validate_email
    from src.infrastructure.persistence.repositories import AccountRepository

    email = validate_email(email)
    database = get_database()
    await database.create_all()

    try:
        async with database.get_session() as session:
            repo = AccountRepository(session=session)
            existing = await repo.find_by_email(email)

            if existing is not None:
                if existing.role == AccountRole.ADMIN:
                    return {"account_id": str(existing.id), "email": email, "status": "already_admin"}
                if dry_run:
                    return {"account_id": str(existing.id), "email": email, "status": "dry_run"}

                existing.change_role(AccountRole.ADMIN)
                existing.activate()
                result = await repo.update(existing)
                if isinstance(result, Failure):
                    raise RuntimeError(result.error.message)
                return {"account_id": str(existing.id), "email": email, "status": "promoted"}

            if dry_run:
                return {"account_id": None, "email": email, "status": "dry_run"}

            now = datetime.now(UTC)
            account = Account(
                id=uuid7(),
                name=name,
                email=email,
                phone=None,
                password_hash=get_password_service().hash_password(password),
                role=AccountRole.ADMIN,
                status=AccountStatus.ACTIVE,
                created_at=now,
                updated_at=now,
            )
            result = await repo.create(account)
            if isinstance(result, Failure):
                raise RuntimeError(result.error.message)
            return {"account_id": str(account.id), "email": email, "status": "created"}
    finally:
        await database.close()


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Create or promote the first ADMIN account",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--email",
        default=os.environ.get("ADMIN_EMAIL"),
        help="Admin email (or set ADMIN_EMAIL env var)",
    )
    parser.add_argument(
        "--password",
        default=os.environ.get("ADMIN_PASSWORD"),
        help="Admin password (or set ADMIN_PASSWORD env var)",
    )
    parser.add_argument("--name", default="Administrator", help="Display name")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be done without making changes",
    )
    args = parser.parse_args()

    if not args.email:
        print("Error: --email or ADMIN_EMAIL environment variable required")
        sys.exit(1)
    if not args.password or not 4 <= len(args.password.encode("utf-8")) <= 72:
        print("Error: --password or ADMIN_PASSWORD (4-72 bytes) required")
        sys.exit(1)

    try:
        result = asyncio.run(
            bootstrap_admin(args.email, args.password, args.name, args.dry_run)
        )
    except (RuntimeError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    messages = {
        "created": "Admin account created",
        "promoted": "Existing account promoted to ADMIN",
        "already_admin": "No changes needed - account is already ADMIN",
        "dry_run": "[DRY RUN] No changes made",
    }
    print(f"{messages[result['status']]}: {result['email']} (id: {result['account_id']})")


if __name__ == "__main__":
    main()
