from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


@dataclass(frozen=True)
class Active:
    pass


@dataclass(frozen=True)
class Deleted:
    at: datetime | None


class SoftDeleteMixin:
    """Rows are never removed: deleting flips the flag and stamps the time.

    Repositories filter reads through ``visible()`` so a deleted row behaves as
    absent everywhere, while its id stays allocated.
    """

    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    @property
    def lifecycle(self) -> Active | Deleted:
        if self.is_deleted:
            return Deleted(at=self.deleted_at)
        return Active()

    def mark_deleted(self) -> None:
        if self.is_deleted:
            return
        self.is_deleted = True
        self.deleted_at = utcnow()

    @classmethod
    def visible(cls):
        return cls.is_deleted.is_(False)
