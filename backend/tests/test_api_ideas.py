"""
Auth plumbing and ideas: admin sign-up creates a shop, customers submit ideas.
"""

import uuid

import pytest
from sqlalchemy import func, select

from ideabox.models.user import Role
from ideabox.services.roles import ensure_admin_role

pytestmark = pytest.mark.anyio


async def _register_admin(client, login="owner"):
    r = await client.post(
        "/api/v1/auth/admin/register",
        json={"login": login, "password": "secret123", "coffee_shop_name": "Owner's Cup", "address": "5 Mocha Rd"},
    )
    assert r.status_code == 201, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


async def test_health_reaches_database(client):
    r = await client.get("/api/v1/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


async def test_admin_register_login_me(client):
    headers = await _register_admin(client)

    r = await client.get("/api/v1/auth/me", headers=headers)
    assert r.status_code == 200
    assert r.json()["role"] == "admin"
    assert r.json()["login"] == "owner"

    r = await client.post("/api/v1/auth/admin/login", json={"login": "owner", "password": "secret123"})
    assert r.status_code == 200

    r = await client.post("/api/v1/auth/admin/login", json={"login": "owner", "password": "wrong-pass"})
    assert r.status_code == 401

    r = await client.post(
        "/api/v1/auth/admin/register",
        json={"login": "owner", "password": "secret123", "coffee_shop_name": "Again", "address": "x"},
    )
    assert r.status_code == 409


async def test_admin_login_rejects_plain_user(client):
    r = await client.post(
        "/api/v1/auth/register",
        json={"name": "Casey", "login": "casey", "password": "secret123"},
    )
    assert r.status_code == 201, r.text

    r = await client.post("/api/v1/auth/admin/login", json={"login": "casey", "password": "secret123"})
    assert r.status_code == 401
    assert r.json()["message"] == "invalid credentials"


async def test_admin_role_seed_is_idempotent(session_maker, session):
    first = await ensure_admin_role(session_maker)
    second = await ensure_admin_role(session_maker)

    assert first.id == second.id
    count = (await session.execute(select(func.count(Role.id)).where(Role.name == "admin"))).scalar_one()
    assert count == 1


async def test_me_rejects_garbage_token(client):
    r = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401


async def test_customer_submits_idea(client, seed, auth):
    creator = await seed.user("creator")
    customer = await seed.user("customer")
    shop = await seed.shop(creator)

    r = await client.post(
        "/api/v1/ideas",
        headers=auth(customer),
        json={"coffee_shop_id": str(shop.id), "title": "Oat milk", "description": "Please"},
    )
    assert r.status_code == 201, r.text
    idea_id = r.json()["id"]

    r = await client.get(f"/api/v1/ideas/{idea_id}")
    assert r.json()["creator_id"] == str(customer.id)

    r = await client.get(f"/api/v1/coffee-shops/{shop.id}/ideas")
    assert [i["id"] for i in r.json()] == [idea_id]

    r = await client.get(f"/api/v1/coffee-shops/{shop.id}")
    assert r.json()["name"] == shop.name


async def test_idea_with_foreign_category_is_rejected(client, seed, auth):
    creator = await seed.user("creator")
    shop = await seed.shop(creator)

    r = await client.post(
        "/api/v1/ideas",
        headers=auth(creator),
        json={"coffee_shop_id": str(shop.id), "category_id": str(uuid.uuid4()), "title": "Oat milk", "description": "x"},
    )
    assert r.status_code == 400


async def test_idea_delete_by_author_or_manager(client, seed, auth):
    creator = await seed.user("creator")
    customer = await seed.user("customer")
    stranger = await seed.user("stranger")
    shop = await seed.shop(creator)
    first = await seed.idea(shop, customer)
    second = await seed.idea(shop, customer, title="Vinyl nights")

    r = await client.delete(f"/api/v1/ideas/{first.id}", headers=auth(stranger))
    assert r.status_code == 403

    r = await client.delete(f"/api/v1/ideas/{first.id}", headers=auth(customer))
    assert r.status_code == 204

    r = await client.delete(f"/api/v1/ideas/{second.id}", headers=auth(creator))
    assert r.status_code == 204

    r = await client.get(f"/api/v1/ideas/{first.id}")
    assert r.status_code == 404
