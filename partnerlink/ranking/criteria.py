"""Criteria value object: the active filter and sort selections of a view."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from partnerlink.ranking.models import EntityType, Region
from partnerlink.schemas.common import FrozenCamelModel


class SortMode(str, Enum):
    DEFAULT = "default"
    RATING_DESC = "rating-desc"
    TRANSACTION_COUNT_DESC = "transaction-count-desc"
    LAST_ACTIVE_DESC = "last-active-desc"


class SpecialFilter(str, Enum):
    NONE = "none"
    MISSED_CONTACT = "missed-contact"
    ACTIVELY_CONTACTING = "actively-contacting"


class BlacklistView(str, Enum):
    """Blacklisted and non-blacklisted vendors are never listed together."""

    NON_BLACKLISTED = "non-blacklisted"
    BLACKLISTED = "blacklisted"


class Criteria(FrozenCamelModel):
    """Immutable description of one directory query.

    Optional filters left as ``None`` impose no constraint.
    """

    query: str = ""
    category: str | None = None
    region: Region | None = None
    entity_type: EntityType | None = None
    service_area: str | None = None
    min_rating: float = Field(default=0.0, ge=0.0, le=5.0)
    blacklist_view: BlacklistView = BlacklistView.NON_BLACKLISTED
    favorites_only: bool = False
    special_filter: SpecialFilter = SpecialFilter.NONE
    sort_mode: SortMode = SortMode.DEFAULT

    def without_special_filter(self) -> Criteria:
        """Drop the special filter along with the text query and category."""
        return self.model_copy(
            update={"special_filter": SpecialFilter.NONE, "query": "", "category": None}
        )
