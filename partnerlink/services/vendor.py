"""Vendor service — record-store access for the directory.

Everything leaving this service is an immutable ``VendorRecord``; ORM rows
never reach the ranking engine or the routers.

Rule: No FastAPI here. Pure Python business logic over the repository.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from partnerlink.core.exceptions import DuplicateVendorError, NotFoundError
from partnerlink.ranking import Criteria, DirectoryEngine, DirectorySummary, VendorRecord, summarize
from partnerlink.repositories.vendor import VendorRepository
from partnerlink.schemas.vendor import VendorCreate
from partnerlink.services.directory import DirectorySessionRegistry

logger = logging.getLogger(__name__)

class VendorService:
    def __init__(
        self,
        session: AsyncSession,
        client_id: str,
        sessions: DirectorySessionRegistry | None = None,
    ):
        self._repo = VendorRepository(session, client_id)
        self._sessions = sessions

    async def get_all_records(self) -> list[VendorRecord]:
        rows = await self._repo.get_all_records()
        return [VendorRecord.model_validate(row) for row in rows]

    async def ordered_view(self, criteria: Criteria) -> list[VendorRecord]:
        """One-shot view for a criteria value with no manual order attached."""
        records = await self.get_all_records()
        return DirectoryEngine(criteria).get_ordered_view(records)

    async def summary(self) -> DirectorySummary:
        return summarize(await self.get_all_records())

    async def get_vendor(self, vendor_id: str) -> VendorRecord:
        vendor = await self._repo.get_by_id(vendor_id)
        if not vendor:
            raise NotFoundError("Vendor", vendor_id)
        return VendorRecord.model_validate(vendor)

    async def create_vendor(self, data: VendorCreate) -> VendorRecord:
        if data.id and await self._repo.exists(data.id):
            raise DuplicateVendorError(data.id)
        fields = data.model_dump(exclude_none=True)
        vendor = await self._repo.create_with_history(**fields)
        logger.info("Created vendor %s (%s)", vendor.id, vendor.name)
        self._invalidate_views()
        return VendorRecord.model_validate(vendor)

    async def toggle_favorite(self, vendor_id: str) -> VendorRecord:
        """Flip the favorite flag and return the new record value."""
        current = await self.get_vendor(vendor_id)
        updated = await self._repo.set_favorite(vendor_id, not current.is_favorite)
        if not updated:
            raise NotFoundError("Vendor", vendor_id)
        record = VendorRecord.model_validate(updated)
        logger.info("Vendor %s favorite=%s", vendor_id, record.is_favorite)
        self._invalidate_views()
        return record

    def _invalidate_views(self) -> None:
        if self._sessions is not None:
            self._sessions.invalidate_all()
