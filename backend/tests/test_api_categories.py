"""
Categories and reward types: public reads, manage-gated writes, logical deletes.
"""

import uuid

import pytest

pytestmark = pytest.mark.anyio


def _categories_url(shop) -> str:
    return f"/api/v1/coffee-shops/{shop.id}/categories"


@pytest.fixture
async def staff(seed):
    creator = await seed.user("creator")
    manager = await seed.user("manager", admin=True)
    barista = await seed.user("barista")
    shop = await seed.shop(creator)
    await seed.membership(manager, shop)
    await seed.membership(barista, shop)
    return {"creator": creator, "manager": manager, "barista": barista, "shop": shop}


async def test_category_lifecycle(client, auth, staff):
    shop, manager = staff["shop"], staff["manager"]

    r = await client.post(_categories_url(shop), headers=auth(manager), json={"title": "Drinks", "description": "Hot & cold"})
    assert r.status_code == 201, r.text
    category_id = r.json()["id"]

    r = await client.get(f"{_categories_url(shop)}/{category_id}")
    assert r.status_code == 200
    assert r.json()["title"] == "Drinks"

    r = await client.put(f"{_categories_url(shop)}/{category_id}", headers=auth(staff["creator"]), json={"title": "Beverages"})
    assert r.status_code == 200
    assert r.json()["title"] == "Beverages"
    assert r.json()["description"] is None

    r = await client.get(_categories_url(shop))
    assert r.json()["total"] == 1

    r = await client.delete(f"{_categories_url(shop)}/{category_id}", headers=auth(manager))
    assert r.status_code == 204

    r = await client.get(f"{_categories_url(shop)}/{category_id}")
    assert r.status_code == 404
    r = await client.get(_categories_url(shop))
    assert r.json() == {"data": [], "total": 0}

    r = await client.delete(f"{_categories_url(shop)}/{category_id}", headers=auth(manager))
    assert r.status_code == 404


async def test_plain_worker_cannot_manage_categories(client, auth, staff):
    shop = staff["shop"]

    r = await client.post(_categories_url(shop), headers=auth(staff["barista"]), json={"title": "Food"})
    assert r.status_code == 403

    r = await client.post(_categories_url(shop), json={"title": "Food"})
    assert r.status_code == 401


async def test_category_title_is_validated(client, auth, staff):
    r = await client.post(_categories_url(staff["shop"]), headers=auth(staff["creator"]), json={"title": "ab"})
    assert r.status_code == 422


async def test_category_of_unknown_shop(client, auth, staff):
    r = await client.post(
        f"/api/v1/coffee-shops/{uuid.uuid4()}/categories",
        headers=auth(staff["creator"]),
        json={"title": "Food"},
    )
    assert r.status_code == 404


async def test_reward_type_lifecycle(client, auth, staff):
    shop, manager = staff["shop"], staff["manager"]

    r = await client.post(
        "/api/v1/admin/rewards/type",
        headers=auth(staff["barista"]),
        json={"coffee_shop_id": str(shop.id), "description": "Free espresso"},
    )
    assert r.status_code == 403

    r = await client.post(
        "/api/v1/admin/rewards/type",
        headers=auth(manager),
        json={"coffee_shop_id": str(shop.id), "description": "Free espresso"},
    )
    assert r.status_code == 201, r.text
    rt_id = r.json()["id"]

    r = await client.put(f"/api/v1/admin/rewards/type/{rt_id}", headers=auth(staff["barista"]), json={"description": "x"})
    assert r.status_code == 403

    r = await client.put(f"/api/v1/admin/rewards/type/{rt_id}", headers=auth(staff["creator"]), json={"description": "Free latte"})
    assert r.status_code == 204

    r = await client.get(f"/api/v1/rewards/type/{rt_id}")
    assert r.json()["description"] == "Free latte"

    r = await client.get(f"/api/v1/coffee-shops/{shop.id}/rewards/type")
    assert [x["id"] for x in r.json()] == [rt_id]

    r = await client.delete(f"/api/v1/admin/rewards/type/{rt_id}", headers=auth(manager))
    assert r.status_code == 204

    r = await client.get(f"/api/v1/rewards/type/{rt_id}")
    assert r.status_code == 404
    r = await client.get(f"/api/v1/coffee-shops/{shop.id}/rewards/type")
    assert r.json() == []


async def test_reward_type_update_unknown_is_not_found(client, auth, staff):
    r = await client.put(f"/api/v1/admin/rewards/type/{uuid.uuid4()}", headers=auth(staff["creator"]), json={"description": "x"})
    assert r.status_code == 404
