"""
Activity feeds: posts written, liked, commented on and shared by a user.
"""

from uuid import uuid4

import pytest

from socialhub.shared.services.activity_service import unique_in_order


def test_unique_in_order_keeps_first_occurrence():
    a, b, c = uuid4(), uuid4(), uuid4()

    assert unique_in_order([a, b, a, c, b]) == [a, b, c]
    assert unique_in_order([]) == []


class TestPostActivity:

    async def test_newest_first_with_limit(self, client, make_user, make_post):
        ada = await make_user("ada")
        posts = [await make_post(ada, f"post {n}") for n in range(3)]

        everything = await client.get(f"/in/{ada['id']}/postActivity")
        latest_two = await client.get(f"/in/{ada['id']}/postActivity/2")

        assert [p["id"] for p in everything.json()] == [p["id"] for p in reversed(posts)]
        assert [p["id"] for p in latest_two.json()] == [posts[2]["id"], posts[1]["id"]]

    @pytest.mark.parametrize("qty", ["0", "-1", "many"])
    async def test_invalid_qty(self, client, make_user, qty):
        ada = await make_user("ada")

        response = await client.get(f"/in/{ada['id']}/postActivity/{qty}")

        assert response.status_code == 400

    async def test_unknown_user(self, client):
        response = await client.get(f"/in/{uuid4()}/postActivity")

        assert response.status_code == 404


class TestLikeActivity:

    async def test_liked_posts(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        first = await make_post(ada, "first")
        second = await make_post(ada, "second")
        await make_post(ada, "not liked")
        for post in (first, second):
            await client.put(f"/post-like/{post['id']}", headers=bob["headers"])

        response = await client.get(f"/in/{bob['id']}/likeActivity")

        assert response.status_code == 200
        assert {p["id"] for p in response.json()} == {first["id"], second["id"]}

        limited = await client.get(f"/in/{bob['id']}/likeActivity/1")
        assert len(limited.json()) == 1


class TestCommentActivity:

    async def test_posts_are_listed_once(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        older = await make_post(ada, "older")
        newer = await make_post(ada, "newer")
        for post, text in ((older, "a"), (newer, "b"), (older, "c")):
            await client.post(
                f"/create-comment/{post['id']}", json={"content": text}, headers=bob["headers"]
            )

        response = await client.get(f"/in/{bob['id']}/commentActivity")

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [older["id"], newer["id"]]

    async def test_limit_applies_to_comments(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        older = await make_post(ada, "older")
        newer = await make_post(ada, "newer")
        for post, text in ((newer, "a"), (older, "b"), (older, "c")):
            await client.post(
                f"/create-comment/{post['id']}", json={"content": text}, headers=bob["headers"]
            )

        response = await client.get(f"/in/{bob['id']}/commentActivity/2")

        assert [p["id"] for p in response.json()] == [older["id"]]


class TestShareActivity:

    async def test_only_the_users_shares_are_listed(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        post = await make_post(ada)
        await client.post(f"/share-post/{post['id']}", json={}, headers=ada["headers"])
        await client.post(f"/share-post/{post['id']}", json={}, headers=bob["headers"])

        response = await client.get(f"/in/{bob['id']}/shareActivity")

        assert response.status_code == 200
        body = response.json()
        assert [p["id"] for p in body] == [post["id"]]
        assert [share["userId"] for share in body[0]["shares"]] == [bob["id"]]

        full = await client.get(f"/post/{post['id']}")
        assert len(full.json()["shares"]) == 2
