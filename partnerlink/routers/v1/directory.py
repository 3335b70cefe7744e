"""Directory session router — criteria, ordered view and drag-and-drop.

A session holds one DirectoryEngine. Clients open a session, push criteria
changes and drop events to it, and read the ordered view back.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from partnerlink.core.config import settings
from partnerlink.core.pagination import PaginationParams
from partnerlink.core.response import DataResponse, ListResponse, paginated
from partnerlink.db.base import get_db
from partnerlink.ranking import Criteria
from partnerlink.schemas.directory import DirectorySessionOut, DropRequest
from partnerlink.schemas.vendor import VendorOut
from partnerlink.services.directory import DirectoryService, directory_sessions
from partnerlink.services.vendor import VendorService

router = APIRouter(prefix="/directory/sessions", tags=["Directory"])


def _svc() -> DirectoryService:
    return DirectoryService(directory_sessions)


@router.post(
    "", response_model=DataResponse[DirectorySessionOut], status_code=status.HTTP_201_CREATED
)
async def open_session(criteria: Optional[Criteria] = Body(default=None)):
    """Open a directory session, optionally with initial criteria."""
    session_id, engine = _svc().open_session(criteria)
    return {"data": DirectorySessionOut.from_engine(session_id, engine)}


@router.get("/{session_id}", response_model=DataResponse[DirectorySessionOut])
async def get_session(session_id: str):
    engine = _svc().get_session(session_id)
    return {"data": DirectorySessionOut.from_engine(session_id, engine)}


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(session_id: str):
    _svc().close_session(session_id)


@router.put("/{session_id}/criteria", response_model=DataResponse[DirectorySessionOut])
async def set_criteria(session_id: str, criteria: Criteria):
    engine = _svc().set_criteria(session_id, criteria)
    return {"data": DirectorySessionOut.from_engine(session_id, engine)}


@router.post(
    "/{session_id}/criteria/clear-special",
    response_model=DataResponse[DirectorySessionOut],
)
async def clear_special_filter(session_id: str):
    """Reset the special filter, text query and category."""
    engine = _svc().clear_special_filter(session_id)
    return {"data": DirectorySessionOut.from_engine(session_id, engine)}


@router.get("/{session_id}/view", response_model=ListResponse[VendorOut])
async def get_ordered_view(
    session_id: str,
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    vendors = VendorService(session, settings.default_client_id, directory_sessions)
    items = await _svc().get_ordered_view(session_id, vendors)
    return paginated(items, pagination)


@router.post("/{session_id}/drop", response_model=DataResponse[DirectorySessionOut])
async def drop(session_id: str, body: DropRequest):
    """Apply a drag-and-drop reorder. Stale drops leave the order unchanged."""
    engine = _svc().drop(session_id, body.dragged_id, body.target_id, body.visible_ids)
    return {"data": DirectorySessionOut.from_engine(session_id, engine)}
