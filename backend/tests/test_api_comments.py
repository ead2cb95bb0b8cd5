"""
Comments: any active worker of the idea's shop, admin or not, may post, read and delete.
"""

import uuid

import pytest

from ideabox.core.errors import InternalError
from ideabox.services.comment import CommentService

pytestmark = pytest.mark.anyio


def _comments_url(idea) -> str:
    return f"/api/v1/ideas/{idea.id}/comments"


@pytest.fixture
async def shop_with_idea(seed):
    creator = await seed.user("creator", admin=True)
    barista = await seed.user("barista")
    cashier = await seed.user("cashier")
    customer = await seed.user("customer")
    shop = await seed.shop(creator)
    await seed.membership(barista, shop)
    await seed.membership(cashier, shop)
    idea = await seed.idea(shop, customer)
    return {"barista": barista, "cashier": cashier, "customer": customer, "shop": shop, "idea": idea}


async def test_worker_comments_and_outsider_is_denied(client, auth, shop_with_idea):
    idea = shop_with_idea["idea"]

    r = await client.post(_comments_url(idea), headers=auth(shop_with_idea["barista"]), json={"text": "Good one", "name": "Bob"})
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["text"] == "Good one"
    assert body["name"] == "Bob"

    r = await client.post(_comments_url(idea), headers=auth(shop_with_idea["customer"]), json={"text": "me too", "name": "C"})
    assert r.status_code == 403
    assert r.json()["message"] == "user is not a worker for this coffee shop"

    r = await client.post(_comments_url(idea), json={"text": "anon", "name": "A"})
    assert r.status_code == 401


async def test_list_comments_newest_first_and_paged(client, auth, shop_with_idea):
    idea, barista = shop_with_idea["idea"], shop_with_idea["barista"]
    for i in range(3):
        r = await client.post(_comments_url(idea), headers=auth(barista), json={"text": f"c{i}", "name": "Bob"})
        assert r.status_code == 201

    r = await client.get(_comments_url(idea), headers=auth(shop_with_idea["cashier"]))
    assert r.status_code == 200
    assert [c["text"] for c in r.json()] == ["c2", "c1", "c0"]

    r = await client.get(_comments_url(idea) + "?page=1&limit=2", headers=auth(barista))
    assert [c["text"] for c in r.json()] == ["c0"]

    r = await client.get(_comments_url(idea), headers=auth(shop_with_idea["customer"]))
    assert r.status_code == 403


async def test_any_worker_deletes_comment(client, auth, shop_with_idea):
    idea = shop_with_idea["idea"]
    r = await client.post(_comments_url(idea), headers=auth(shop_with_idea["barista"]), json={"text": "x", "name": "Bob"})
    comment_id = r.json()["id"]

    r = await client.delete(f"{_comments_url(idea)}/{comment_id}", headers=auth(shop_with_idea["customer"]))
    assert r.status_code == 403

    r = await client.delete(f"{_comments_url(idea)}/{comment_id}", headers=auth(shop_with_idea["cashier"]))
    assert r.status_code == 204

    r = await client.get(_comments_url(idea), headers=auth(shop_with_idea["barista"]))
    assert r.json() == []

    r = await client.delete(f"{_comments_url(idea)}/{comment_id}", headers=auth(shop_with_idea["cashier"]))
    assert r.status_code == 404


async def test_comment_from_another_idea_is_not_valid(client, seed, auth, shop_with_idea):
    idea = shop_with_idea["idea"]
    barista = shop_with_idea["barista"]
    other_idea = await seed.idea(shop_with_idea["shop"], shop_with_idea["customer"], title="Longer hours")
    r = await client.post(_comments_url(other_idea), headers=auth(barista), json={"text": "x", "name": "Bob"})
    comment_id = r.json()["id"]

    r = await client.delete(f"{_comments_url(idea)}/{comment_id}", headers=auth(barista))
    assert r.status_code == 400
    assert r.json()["message"] == "comment does not belong to this idea"


async def test_unknown_idea_is_not_found(client, auth, shop_with_idea):
    r = await client.get(f"/api/v1/ideas/{uuid.uuid4()}/comments", headers=auth(shop_with_idea["barista"]))
    assert r.status_code == 404


async def test_idea_without_shop_is_internal_error(session, seed):
    author = await seed.user("author")
    orphan = await seed.idea(None, author)

    with pytest.raises(InternalError):
        await CommentService(session).create(author.id, orphan.id, "hi", "A")
