from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ideabox.models.base import Base, SoftDeleteMixin, utcnow


class WorkerCoffeeShop(SoftDeleteMixin, Base):
    """Membership of a user in a coffee shop's staff roster."""

    __tablename__ = "worker_coffee_shops"
    __table_args__ = (
        # At most one active relation per (worker, shop); deleted rows are history.
        Index(
            "uq_worker_coffee_shops_active",
            "worker_id",
            "coffee_shop_id",
            unique=True,
            postgresql_where=text("is_deleted = false"),
            sqlite_where=text("is_deleted = 0"),
        ),
        Index("ix_worker_coffee_shops_coffee_shop_id", "coffee_shop_id"),
        Index("ix_worker_coffee_shops_worker_id", "worker_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    worker_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    coffee_shop_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("coffee_shops.id", ondelete="CASCADE"), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    worker = relationship("User", lazy="joined")
    coffee_shop = relationship("CoffeeShop", lazy="joined")
