"""Vendor repository — the record store behind the ranking engine.

Reads hand back ORM rows; ``partnerlink.services.vendor`` converts them into
immutable ``VendorRecord`` values before anything else sees them.
"""

from __future__ import annotations

from typing import Any

from partnerlink.domain.vendor import Vendor, VendorContactLog, VendorTransaction
from partnerlink.repositories.base import BaseRepository


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor

    async def get_all_records(self) -> list[Vendor]:
        """Master set in its canonical (insertion) order."""
        return await self.list_all()

    async def create_with_history(
        self,
        *,
        contact_logs: list[dict[str, Any]] | None = None,
        transactions: list[dict[str, Any]] | None = None,
        **fields: Any,
    ) -> Vendor:
        """Insert a vendor together with its contact-log and transaction rows."""
        return await self.create(
            contact_logs=[VendorContactLog(**log) for log in contact_logs or []],
            transactions=[VendorTransaction(**txn) for txn in transactions or []],
            **fields,
        )

    async def set_favorite(self, vendor_id: str, is_favorite: bool) -> Vendor | None:
        return await self.update(vendor_id, is_favorite=is_favorite)
