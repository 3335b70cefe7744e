"""Headline numbers shown above the vendor directory."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from partnerlink.ranking.models import EntityType, Region, VendorRecord
from partnerlink.schemas.common import CamelModel


class DirectorySummary(CamelModel):
    total: int
    by_region: dict[Region, int]
    companies: int
    favorites: int
    blacklisted: int
    average_rating: float


def summarize(records: Sequence[VendorRecord]) -> DirectorySummary:
    regions = Counter(record.region for record in records)
    average = (
        round(sum(record.rating for record in records) / len(records), 1)
        if records
        else 0.0
    )
    return DirectorySummary(
        total=len(records),
        by_region={region: regions.get(region, 0) for region in Region},
        companies=sum(1 for r in records if r.entity_type is EntityType.COMPANY),
        favorites=sum(1 for r in records if r.is_favorite),
        blacklisted=sum(1 for r in records if r.is_blacklisted),
        average_rating=average,
    )
