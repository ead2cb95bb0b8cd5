"""
Unit tests for the manage-authority decision and list paging – no database.
"""

import uuid

import pytest

from ideabox.core.errors import AccessDeniedError
from ideabox.models.worker_coffee_shop import WorkerCoffeeShop
from ideabox.services.access_control import ShopAuthority, decide_manage, require_self
from ideabox.services.pagination import clamp_page


def _membership() -> WorkerCoffeeShop:
    return WorkerCoffeeShop(id=uuid.uuid4(), worker_id=uuid.uuid4(), coffee_shop_id=uuid.uuid4())


# ── Tests: decide_manage ─────────────────────────────────────────────

@pytest.mark.parametrize("role", [None, "admin", "barista"])
@pytest.mark.parametrize("with_membership", [False, True])
def test_creator_always_allowed(role, with_membership):
    membership = _membership() if with_membership else None
    decision = decide_manage(ShopAuthority(is_creator=True, global_role=role, active_membership=membership))
    assert decision.allowed
    assert decision.reason == "is creator"


@pytest.mark.parametrize("role", [None, "barista", "Admin"])
def test_non_admin_denied_even_with_membership(role):
    decision = decide_manage(ShopAuthority(is_creator=False, global_role=role, active_membership=_membership()))
    assert not decision.allowed
    assert decision.reason == "user is not an admin for this coffee shop"


def test_admin_with_active_membership_allowed():
    decision = decide_manage(ShopAuthority(is_creator=False, global_role="admin", active_membership=_membership()))
    assert decision.allowed
    assert decision.reason == "admin-role worker"


def test_admin_without_membership_denied():
    decision = decide_manage(ShopAuthority(is_creator=False, global_role="admin"))
    assert not decision.allowed


# ── Tests: require_self ──────────────────────────────────────────────

def test_require_self_passes_for_same_id():
    uid = uuid.uuid4()
    require_self(uid, uid, "nope")


def test_require_self_denies_other_id():
    with pytest.raises(AccessDeniedError) as e:
        require_self(uuid.uuid4(), uuid.uuid4(), "you can only view your own coffee shops")
    assert e.value.message == "you can only view your own coffee shops"


# ── Tests: clamp_page ────────────────────────────────────────────────

@pytest.mark.parametrize(
    "page,limit,expected",
    [
        (0, 0, (0, 25)),
        (0, 999, (0, 25)),
        (-1, 10, (0, 10)),
        (2, 50, (2, 50)),
        (None, None, (0, 25)),
        (0, -5, (0, 25)),
    ],
)
def test_clamp_page(page, limit, expected):
    window = clamp_page(page, limit)
    assert (window.page, window.limit) == expected


def test_offset_is_page_times_limit():
    assert clamp_page(3, 20).offset == 60
    assert clamp_page(-1, 999).offset == 0
