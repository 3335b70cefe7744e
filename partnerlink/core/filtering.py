"""Query-string seeding of directory criteria for list endpoints."""


from typing import Optional

from fastapi import Query

from partnerlink.ranking import (
    BlacklistView,
    Criteria,
    EntityType,
    Region,
    SortMode,
    SpecialFilter,
)

# Short names used by links elsewhere in the app, e.g. /vendors?filter=missed
_SPECIAL_FILTER_ALIASES: dict[str, SpecialFilter] = {
    "missed": SpecialFilter.MISSED_CONTACT,
    "contacting": SpecialFilter.ACTIVELY_CONTACTING,
}


def parse_special_filter(value: str | None) -> SpecialFilter:
    """Map a ``filter`` query value to a SpecialFilter; unknown values mean none."""
    if not value:
        return SpecialFilter.NONE
    if value in _SPECIAL_FILTER_ALIASES:
        return _SPECIAL_FILTER_ALIASES[value]
    try:
        return SpecialFilter(value)
    except ValueError:
        return SpecialFilter.NONE


class CriteriaParams:
    """FastAPI dependency for `?q=&category=&region=&filter=missed&sort=rating-desc`."""

    def __init__(
        self,
        q: str = Query(default="", description="Case-insensitive substring search"),
        category: Optional[str] = Query(default=None),
        region: Optional[Region] = Query(default=None),
        entity_type: Optional[EntityType] = Query(default=None, alias="entityType"),
        service_area: Optional[str] = Query(default=None, alias="serviceArea"),
        min_rating: float = Query(default=0.0, ge=0.0, le=5.0, alias="minRating"),
        blacklisted: bool = Query(default=False, description="Show only blacklisted vendors"),
        favorites: bool = Query(default=False, description="Show only favorites"),
        special: Optional[str] = Query(
            default=None, alias="filter", description="missed | contacting"
        ),
        sort: SortMode = Query(default=SortMode.DEFAULT),
    ):
        self.criteria = Criteria(
            query=q,
            category=category or None,
            region=region,
            entity_type=entity_type,
            service_area=service_area or None,
            min_rating=min_rating,
            blacklist_view=BlacklistView.BLACKLISTED if blacklisted else BlacklistView.NON_BLACKLISTED,
            favorites_only=favorites,
            special_filter=parse_special_filter(special),
            sort_mode=sort,
        )
