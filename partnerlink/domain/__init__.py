"""Domain package — all ORM models are imported here so create_all sees them.

Folder intent:
  vendor.py  — vendor records plus their contact-log and transaction rows
  mixins.py  — Shared TimestampMixin, TenantMixin
"""

from partnerlink.domain.vendor import Vendor, VendorContactLog, VendorTransaction

__all__ = [
    "Vendor",
    "VendorContactLog",
    "VendorTransaction",
]
