"""Filter engine: reduces the master vendor set to the candidate sequence.

Every predicate is total. Missing optional data (no tax id, no tags, an empty
service area) simply fails that sub-condition; nothing here raises.
"""

from __future__ import annotations

from collections.abc import Iterable

from partnerlink.ranking.criteria import BlacklistView, Criteria, SpecialFilter
from partnerlink.ranking.models import ALL_AREAS, VendorRecord


def _matches_text(record: VendorRecord, query: str) -> bool:
    if not query:
        return True
    needle = query.casefold()
    haystack = [record.name, record.id, *record.categories, *record.tags]
    if record.tax_id:
        haystack.append(record.tax_id)
    return any(needle in value.casefold() for value in haystack)


def _matches_service_area(record: VendorRecord, service_area: str | None) -> bool:
    if not service_area or service_area == ALL_AREAS:
        return True
    return service_area in record.service_area or ALL_AREAS in record.service_area


def _matches_blacklist(record: VendorRecord, view: BlacklistView) -> bool:
    if view is BlacklistView.BLACKLISTED:
        return record.is_blacklisted
    return not record.is_blacklisted


def _matches_special(record: VendorRecord, special: SpecialFilter) -> bool:
    if special is SpecialFilter.MISSED_CONTACT:
        return record.missed_contact_log_count > 0
    if special is SpecialFilter.ACTIVELY_CONTACTING:
        return len(record.contact_logs) > 0
    return True


def matches(record: VendorRecord, criteria: Criteria) -> bool:
    """Return True when *record* satisfies every predicate of *criteria*."""
    if criteria.category and criteria.category not in record.categories:
        return False
    if criteria.region is not None and record.region != criteria.region:
        return False
    if criteria.entity_type is not None and record.entity_type != criteria.entity_type:
        return False
    if record.rating < criteria.min_rating:
        return False
    if criteria.favorites_only and not record.is_favorite:
        return False
    return (
        _matches_text(record, criteria.query)
        and _matches_service_area(record, criteria.service_area)
        and _matches_blacklist(record, criteria.blacklist_view)
        and _matches_special(record, criteria.special_filter)
    )


def filter_records(
    records: Iterable[VendorRecord], criteria: Criteria
) -> list[VendorRecord]:
    """Return the records passing *criteria*, in their original relative order."""
    return [record for record in records if matches(record, criteria)]
