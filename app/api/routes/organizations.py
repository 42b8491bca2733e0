"""
FastAPI routes for Organization operations.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Path, status

from app.api.schemas.organization import (
    OrganizationCreate,
    OrganizationDetailResponse,
    OrganizationResponse,
)
from app.core.dependencies import AsyncDbSession
from app.core.errors import NotFoundError
from app.db.models import Organization
from app.services import directory_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/organizations", tags=["Organizations"])


@router.get(
    "",
    response_model=list[OrganizationResponse],
    summary="List all organizations",
)
async def list_organizations(db: AsyncDbSession) -> list[Organization]:
    """List all organizations ordered by id."""
    return await directory_service.list_organizations(db)


@router.get(
    "/{organization_id}",
    response_model=OrganizationDetailResponse,
    summary="Get an organization with its employees",
    description="""
    Retrieve a single organization and all of its employees.

    **Errors:**
    - 404 Not Found: If the organization does not exist
    - 500: "Failed to fetch organization" if the database fails
    """,
)
async def get_organization(
    organization_id: Annotated[int, Path(description="Organization identifier")],
    db: AsyncDbSession,
) -> Organization:
    organization = await directory_service.get_organization(db, organization_id)
    if organization is None:
        raise NotFoundError(
            f"Organization '{organization_id}' not found",
            details={"organization_id": organization_id},
        )
    return organization


@router.post(
    "",
    response_model=OrganizationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an organization",
)
async def add_organization(payload: OrganizationCreate, db: AsyncDbSession) -> Organization:
    organization = await directory_service.add_organization(db, payload.name)

    logger.info(
        f"Added organization: {organization.id}",
        extra={"organization_id": organization.id},
    )
    return organization
