"""DirectoryEngine — the stateful face of the ranking package.

One engine backs one directory session. It owns the active ``Criteria`` and
the favorites ``ManualOrder``; the master record set is passed in on every
read so each view is recomputed from current data.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from partnerlink.ranking.criteria import Criteria
from partnerlink.ranking.filters import filter_records
from partnerlink.ranking.models import VendorRecord
from partnerlink.ranking.reconciler import ManualOrder, compute_order, reorder
from partnerlink.ranking.sorting import sort_records

logger = logging.getLogger(__name__)


class DirectoryEngine:
    """Filter → sort/reconcile pipeline plus the drag-and-drop write path.

    ``revision`` increases whenever an input the view depends on changes
    (criteria, manual order, or an external ``invalidate``). Callers compare
    revisions to know when a rendered view is stale.
    """

    def __init__(self, criteria: Criteria | None = None):
        self._criteria = criteria or Criteria()
        self._manual_order: ManualOrder = ()
        self._revision = 0

    @property
    def criteria(self) -> Criteria:
        return self._criteria

    @property
    def manual_order(self) -> ManualOrder:
        return self._manual_order

    @property
    def revision(self) -> int:
        return self._revision

    def set_criteria(self, criteria: Criteria) -> None:
        self._criteria = criteria
        self._revision += 1

    def invalidate(self) -> None:
        """Record that the underlying master set changed."""
        self._revision += 1

    def get_ordered_view(self, records: Iterable[VendorRecord]) -> list[VendorRecord]:
        candidates = filter_records(records, self._criteria)
        if self._criteria.favorites_only and self._manual_order:
            return compute_order(candidates, self._manual_order)
        return sort_records(candidates, self._criteria.sort_mode)

    def on_drop(
        self,
        dragged_id: str | None,
        target_id: str | None,
        visible_ids: Sequence[str],
    ) -> ManualOrder:
        new_order = reorder(self._manual_order, dragged_id, target_id, visible_ids)
        if new_order != self._manual_order:
            self._manual_order = new_order
            self._revision += 1
            logger.debug("Manual order now has %d ids", len(new_order))
        return self._manual_order
