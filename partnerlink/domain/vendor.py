"""SQLAlchemy ORM models for the vendor record store.

Column names mirror ``partnerlink.ranking.models.VendorRecord`` so a loaded
``Vendor`` validates straight into the engine's read model
(``VendorRecord.model_validate(vendor)``).
"""

from __future__ import annotations

import datetime as dt
import uuid
from typing import List, Optional

from sqlalchemy import JSON, Boolean, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from partnerlink.db.base import Base
from partnerlink.domain.mixins import TenantMixin, TimestampMixin


class Vendor(Base, TenantMixin, TimestampMixin):
    __tablename__ = "vendors"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    tax_id: Mapped[Optional[str]] = mapped_column(String(20), index=True, nullable=True)

    # "taiwan" | "china"
    region: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    # "company" | "individual"
    entity_type: Mapped[str] = mapped_column(String(20), nullable=False)

    categories: Mapped[List[str]] = mapped_column(JSON, default=list, nullable=False)
    tags: Mapped[List[str]] = mapped_column(JSON, default=list, nullable=False)
    service_area: Mapped[List[str]] = mapped_column(JSON, default=list, nullable=False)

    rating: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    is_blacklisted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_favorite: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    missed_contact_log_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    contact_logs: Mapped[List["VendorContactLog"]] = relationship(
        back_populates="vendor",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="VendorContactLog.date",
    )
    transactions: Mapped[List["VendorTransaction"]] = relationship(
        back_populates="vendor",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="VendorTransaction.date",
    )


class VendorContactLog(Base, TimestampMixin):
    """One contact attempt with a vendor."""

    __tablename__ = "vendor_contact_logs"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    vendor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("vendors.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(String(50), default="success", nullable=False)
    note: Mapped[str] = mapped_column(Text, default="", nullable=False)

    vendor: Mapped["Vendor"] = relationship(back_populates="contact_logs")


class VendorTransaction(Base, TimestampMixin):
    """One job/transaction completed with a vendor."""

    __tablename__ = "vendor_transactions"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    vendor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("vendors.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    amount: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)

    vendor: Mapped["Vendor"] = relationship(back_populates="transactions")
