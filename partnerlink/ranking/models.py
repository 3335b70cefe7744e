"""Read models the ranking engine works on.

The record store owns vendor data; the engine only ever sees these frozen
snapshots. Favorite toggling produces a new ``VendorRecord`` instead of
mutating one in place.
"""

from __future__ import annotations

import datetime
from enum import Enum

from pydantic import Field

from partnerlink.schemas.common import FrozenCamelModel

# Service-area wildcard: a vendor listing it serves every area, and a filter
# set to it accepts every vendor.
ALL_AREAS = "all"


class Region(str, Enum):
    TAIWAN = "taiwan"
    CHINA = "china"


class EntityType(str, Enum):
    COMPANY = "company"
    INDIVIDUAL = "individual"


class ContactEvent(FrozenCamelModel):
    id: str
    date: datetime.date
    status: str = "success"
    note: str = ""


class TransactionEvent(FrozenCamelModel):
    id: str
    date: datetime.date
    description: str = ""
    amount: float = 0.0


class VendorRecord(FrozenCamelModel):
    """Immutable snapshot of one vendor as seen by filtering and sorting."""

    id: str
    name: str
    tax_id: str | None = None
    tags: tuple[str, ...] = ()
    categories: tuple[str, ...] = ()
    region: Region = Region.TAIWAN
    entity_type: EntityType = EntityType.COMPANY
    service_area: tuple[str, ...] = ()
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    is_blacklisted: bool = False
    is_favorite: bool = False
    missed_contact_log_count: int = Field(default=0, ge=0)
    contact_logs: tuple[ContactEvent, ...] = ()
    transactions: tuple[TransactionEvent, ...] = ()

    @property
    def last_transaction_date(self) -> datetime.date | None:
        """Date of the most recent transaction, or None without any."""
        if not self.transactions:
            return None
        return max(txn.date for txn in self.transactions)
