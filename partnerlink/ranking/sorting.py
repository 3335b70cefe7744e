"""Sort engine.

Every mode relies on ``sorted`` being stable (also with ``reverse=True``), so
records with equal keys keep their candidate order and repeated runs over the
same input give the same output.
"""

from __future__ import annotations

import datetime
from collections.abc import Callable, Iterable
from typing import Any

from partnerlink.ranking.criteria import SortMode
from partnerlink.ranking.models import VendorRecord


def _last_active(record: VendorRecord) -> datetime.date:
    # No transactions sorts after every real date.
    return record.last_transaction_date or datetime.date.min


_SORT_KEYS: dict[SortMode, Callable[[VendorRecord], Any]] = {
    SortMode.RATING_DESC: lambda record: record.rating,
    SortMode.TRANSACTION_COUNT_DESC: lambda record: len(record.transactions),
    SortMode.LAST_ACTIVE_DESC: _last_active,
}


def sort_records(
    records: Iterable[VendorRecord], sort_mode: SortMode
) -> list[VendorRecord]:
    """Order *records* by *sort_mode*; ``DEFAULT`` keeps the input order."""
    key = _SORT_KEYS.get(sort_mode)
    if key is None:
        return list(records)
    return sorted(records, key=key, reverse=True)
