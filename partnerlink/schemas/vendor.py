"""Vendor Pydantic schemas (request DTOs and response models)."""


import datetime as dt

from pydantic import Field

from partnerlink.ranking.models import EntityType, Region, VendorRecord
from partnerlink.schemas.common import CamelModel

class ContactLogCreate(CamelModel):
    id: str | None = None
    date: dt.date
    status: str = "success"
    note: str = ""

class TransactionCreate(CamelModel):
    id: str | None = None
    date: dt.date
    description: str = ""
    amount: float = 0.0

class VendorCreate(CamelModel):
    id: str | None = Field(default=None, min_length=1, max_length=36)
    name: str = Field(min_length=1, max_length=255)
    tax_id: str | None = Field(default=None, max_length=20)
    region: Region = Region.TAIWAN
    entity_type: EntityType = EntityType.COMPANY
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    service_area: list[str] = Field(default_factory=list)
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    is_blacklisted: bool = False
    is_favorite: bool = False
    missed_contact_log_count: int = Field(default=0, ge=0)
    contact_logs: list[ContactLogCreate] = Field(default_factory=list)
    transactions: list[TransactionCreate] = Field(default_factory=list)

    model_config = {"use_enum_values": True}

# Responses expose the engine's read model as-is.
VendorOut = VendorRecord
