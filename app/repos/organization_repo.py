"""
Repository layer for Organization data access.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models import Organization

logger = logging.getLogger(__name__)


async def list_organizations(db: AsyncSession) -> list[Organization]:
    """
    Retrieve all organizations ordered by id.

    Args:
        db: Database session

    Returns:
        List of Organization models (employees not loaded)
    """
    result = await db.execute(select(Organization).order_by(Organization.id))
    organizations = list(result.scalars().all())

    logger.debug(f"Retrieved {len(organizations)} organizations")
    return organizations


async def get_organization(db: AsyncSession, organization_id: int) -> Organization | None:
    """
    Retrieve a single organization by ID.

    Args:
        db: Database session
        organization_id: Organization identifier

    Returns:
        Organization with its employees loaded, or None if it does not exist
    """
    stmt = (
        select(Organization)
        .options(selectinload(Organization.employees))
        .where(Organization.id == organization_id)
    )
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def create_organization(db: AsyncSession, name: str) -> Organization:
    organization = Organization(name=name)
    db.add(organization)
    await db.flush()

    logger.info(
        f"Created organization: id={organization.id}",
        extra={"organization_id": organization.id},
    )
    return organization
