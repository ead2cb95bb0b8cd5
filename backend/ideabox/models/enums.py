from __future__ import annotations

import enum


class RoleName(str, enum.Enum):
    """Platform-wide role. Not scoped to a coffee shop."""
    admin = "admin"
