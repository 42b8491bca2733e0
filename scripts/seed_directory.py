#!/usr/bin/env python3
"""
Seed the directory with demo organizations and employees.

Creates tables first when DATABASE_URL_APP points at SQLite.

Usage:
  python scripts/seed_directory.py
  python scripts/seed_directory.py --skip-existing
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app.core.config import settings  # noqa: E402
from app.core.db import init_models, reset_async_engine, session_scope  # noqa: E402
from app.repos import employee_repo, organization_repo  # noqa: E402

DEMO_DIRECTORY = {
    "Acme Corp": [
        ("Grace", "Hopper", "Senior Engineer", "Engineering", 60000, date(2019, 5, 1)),
        ("Alan", "Turing", "Junior Engineer", "Engineering", 40000, date(2021, 9, 15)),
        ("Mary", "Jackson", "Account Executive", "Sales", 90000, date(2023, 2, 1)),
    ],
    "Globex": [
        ("Katherine", "Johnson", "Analyst", "Research", 75000, date(2018, 3, 12)),
        ("Dorothy", "Vaughan", "Engineering Manager", "Engineering", 110000, date(2016, 7, 4)),
    ],
}


async def seed(skip_existing: bool) -> int:
    if settings.is_sqlite:
        await init_models()

    created = 0
    async with session_scope() as db:
        existing = {o.name for o in await organization_repo.list_organizations(db)}

        for org_name, employees in DEMO_DIRECTORY.items():
            if skip_existing and org_name in existing:
                print(f"[SKIP] {org_name} already exists")
                continue

            organization = await organization_repo.create_organization(db, org_name)
            for first, last, title, department, salary, joined in employees:
                await employee_repo.create_employee(
                    db,
                    {
                        "first_name": first,
                        "last_name": last,
                        "title": title,
                        "department": department,
                        "salary": salary,
                        "date_of_joining": joined,
                        "date_of_birth": date(1990, 1, 1),
                        "organization_id": organization.id,
                    },
                )
                created += 1
            print(f"[OK] {org_name}: {len(employees)} employees")

    await reset_async_engine()
    return created


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed demo directory data")
    parser.add_argument(
        "--skip-existing",
        action="store_true",
        help="Skip organizations whose name already exists",
    )
    args = parser.parse_args()

    created = asyncio.run(seed(args.skip_existing))
    print(f"Seeded {created} employees")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
