"""Order reconciler for the manually curated favorites view.

The manual order is a tuple of unique vendor ids. It is only ever replaced by
``reorder``; filtering and sorting read it but never change it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from partnerlink.ranking.models import VendorRecord

logger = logging.getLogger(__name__)

ManualOrder = tuple[str, ...]


def compute_order(
    records: Sequence[VendorRecord], manual_order: Sequence[str]
) -> list[VendorRecord]:
    """Merge *records* against *manual_order*.

    Records whose id is ranked come first, in manual order. The rest follow in
    their candidate order. No record is ever dropped.
    """
    rank = {vendor_id: position for position, vendor_id in enumerate(manual_order)}
    known = [record for record in records if record.id in rank]
    unknown = [record for record in records if record.id not in rank]
    known.sort(key=lambda record: rank[record.id])
    return known + unknown


def reorder(
    manual_order: Sequence[str],
    dragged_id: str | None,
    target_id: str | None,
    visible_ids: Iterable[str],
) -> ManualOrder:
    """Move *dragged_id* into *target_id*'s slot and return the new manual order.

    The working list starts from the current manual order (or the visible ids
    when nothing has been ranked yet) and is completed with any visible id it
    is missing before the move. Stale or degenerate drops return the current
    order unchanged.
    """
    current = tuple(manual_order)
    if not dragged_id or not target_id or dragged_id == target_id:
        return current

    visible = list(dict.fromkeys(visible_ids))
    working = list(current) if current else list(visible)
    seen = set(working)
    for vendor_id in visible:
        if vendor_id not in seen:
            working.append(vendor_id)
            seen.add(vendor_id)

    if dragged_id not in seen or target_id not in seen:
        logger.debug(
            "Ignoring stale drop %s -> %s (not in working order)", dragged_id, target_id
        )
        return current

    to_index = working.index(target_id)
    working.remove(dragged_id)
    working.insert(to_index, dragged_id)
    return tuple(working)
