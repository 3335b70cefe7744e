"""Vendor router — record-store endpoints plus the stateless ordered listing.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject DB session via Depends
  3. Instantiate the service with (session, client_id, sessions)
  4. Call service methods and wrap result in response envelope
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from partnerlink.core.config import settings
from partnerlink.core.filtering import CriteriaParams
from partnerlink.core.pagination import PaginationParams
from partnerlink.core.response import DataResponse, ListResponse, paginated
from partnerlink.db.base import get_db
from partnerlink.ranking import DirectorySummary
from partnerlink.schemas.vendor import VendorCreate, VendorOut
from partnerlink.services.directory import directory_sessions
from partnerlink.services.vendor import VendorService

router = APIRouter(prefix="/vendors", tags=["Vendors"])


# ------------------------------------------------------------------
# Helper — instantiate service with session + default client
# ------------------------------------------------------------------

def _svc(session: AsyncSession) -> VendorService:
    return VendorService(session, settings.default_client_id, directory_sessions)


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[VendorOut])
async def list_vendors(
    params: CriteriaParams = Depends(),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """Filtered and sorted vendor list. Criteria come from the query string."""
    items = await _svc(session).ordered_view(params.criteria)
    return paginated(items, pagination)


@router.post("", response_model=DataResponse[VendorOut], status_code=status.HTTP_201_CREATED)
async def create_vendor(
    body: VendorCreate,
    session: AsyncSession = Depends(get_db),
):
    """Create a new vendor."""
    vendor = await _svc(session).create_vendor(body)
    return {"data": vendor}


@router.get("/summary", response_model=DataResponse[DirectorySummary])
async def vendor_summary(session: AsyncSession = Depends(get_db)):
    return {"data": await _svc(session).summary()}


@router.get("/{vendor_id}", response_model=DataResponse[VendorOut])
async def get_vendor(
    vendor_id: str,
    session: AsyncSession = Depends(get_db),
):
    vendor = await _svc(session).get_vendor(vendor_id)
    return {"data": vendor}


@router.post("/{vendor_id}/favorite", response_model=DataResponse[VendorOut])
async def toggle_favorite(
    vendor_id: str,
    session: AsyncSession = Depends(get_db),
):
    """Flip the favorite flag; open directory sessions see a new revision."""
    vendor = await _svc(session).toggle_favorite(vendor_id)
    return {"data": vendor}
