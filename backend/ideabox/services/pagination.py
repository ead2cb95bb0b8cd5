from __future__ import annotations

from dataclasses import dataclass

from ideabox.core.config import settings


@dataclass(frozen=True)
class PageWindow:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return self.page * self.limit


def clamp_page(page: int | None, limit: int | None) -> PageWindow:
    """Normalize client paging: zero-based page, limit in (0, PAGE_LIMIT_MAX]."""
    lim = int(limit or 0)
    if lim <= 0 or lim > settings.PAGE_LIMIT_MAX:
        lim = settings.PAGE_LIMIT_DEFAULT
    pg = int(page or 0)
    if pg < 0:
        pg = 0
    return PageWindow(page=pg, limit=lim)
