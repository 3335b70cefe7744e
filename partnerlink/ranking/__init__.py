"""Vendor ranking & ordering engine.

Pure Python, no FastAPI or SQLAlchemy imports. Given a master set of
``VendorRecord`` values and a ``Criteria`` it produces a deterministic ordered
view, and it keeps a drag-reorderable manual order for the favorites view.

Modules:
  models.py      — VendorRecord and its event/enum types
  criteria.py    — Criteria value object and its option enums
  filters.py     — filter engine
  sorting.py     — stable sort engine
  reconciler.py  — manual order merge + reorder
  engine.py      — DirectoryEngine (set_criteria / get_ordered_view / on_drop)
  summary.py     — directory headline statistics
"""

from partnerlink.ranking.criteria import BlacklistView, Criteria, SortMode, SpecialFilter
from partnerlink.ranking.engine import DirectoryEngine
from partnerlink.ranking.filters import filter_records, matches
from partnerlink.ranking.models import (
    ALL_AREAS,
    ContactEvent,
    EntityType,
    Region,
    TransactionEvent,
    VendorRecord,
)
from partnerlink.ranking.reconciler import ManualOrder, compute_order, reorder
from partnerlink.ranking.sorting import sort_records
from partnerlink.ranking.summary import DirectorySummary, summarize

__all__ = [
    "ALL_AREAS",
    "BlacklistView",
    "ContactEvent",
    "Criteria",
    "DirectoryEngine",
    "DirectorySummary",
    "EntityType",
    "ManualOrder",
    "Region",
    "SortMode",
    "SpecialFilter",
    "TransactionEvent",
    "VendorRecord",
    "compute_order",
    "filter_records",
    "matches",
    "reorder",
    "sort_records",
    "summarize",
]
