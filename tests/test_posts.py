"""
Post endpoints: create, read, update, like, dislike and delete.
"""

from uuid import uuid4


class TestCreateAndRead:

    async def test_create_post(self, client, make_user, make_post):
        ada = await make_user("ada")

        post = await make_post(ada, "First post!", image_url="https://cdn.example.com/a.png")

        assert post["content"] == "First post!"
        assert post["imageUrl"] == "https://cdn.example.com/a.png"
        assert post["user"]["id"] == ada["id"]
        assert post["user"]["name"] == "Ada"
        assert post["likes"] == []
        assert post["comments"] == []
        assert post["shares"] == []

    async def test_create_post_for_someone_else_is_forbidden(self, client, make_user):
        ada = await make_user("ada")
        bob = await make_user("bob")

        response = await client.post(
            f"/create-post/{bob['id']}", json={"content": "hi"}, headers=ada["headers"]
        )

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "PERMISSION_DENIED"

    async def test_create_post_requires_token(self, client, make_user):
        ada = await make_user("ada")

        response = await client.post(f"/create-post/{ada['id']}", json={"content": "hi"})

        assert response.status_code == 401

    async def test_create_post_requires_content(self, client, make_user):
        ada = await make_user("ada")

        response = await client.post(
            f"/create-post/{ada['id']}", json={"content": "  "}, headers=ada["headers"]
        )

        assert response.status_code == 400
        assert response.json()["errorMessage"] == "Please provide the post content"

    async def test_list_posts_newest_first(self, client, make_user, make_post):
        ada = await make_user("ada")
        first = await make_post(ada, "one")
        second = await make_post(ada, "two")

        response = await client.get("/posts")

        assert response.status_code == 200
        assert [post["id"] for post in response.json()] == [second["id"], first["id"]]

    async def test_get_post(self, client, make_user, make_post):
        ada = await make_user("ada")
        post = await make_post(ada)

        response = await client.get(f"/post/{post['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == post["id"]

    async def test_get_missing_post(self, client):
        response = await client.get(f"/post/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_malformed_post_id(self, client):
        response = await client.get("/post/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestUpdate:

    async def test_author_can_update(self, client, make_user, make_post):
        ada = await make_user("ada")
        post = await make_post(ada, "draft")

        response = await client.put(
            f"/post-update/{post['id']}",
            json={"content": "final", "imageUrl": "https://cdn.example.com/b.png"},
            headers=ada["headers"],
        )

        assert response.status_code == 200
        assert response.json()["content"] == "final"
        assert response.json()["imageUrl"] == "https://cdn.example.com/b.png"

    async def test_other_user_cannot_update(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        post = await make_post(ada, "draft")

        response = await client.put(
            f"/post-update/{post['id']}", json={"content": "hacked"}, headers=bob["headers"]
        )

        assert response.status_code == 403
        unchanged = await client.get(f"/post/{post['id']}")
        assert unchanged.json()["content"] == "draft"

    async def test_update_missing_post(self, client, make_user):
        ada = await make_user("ada")

        response = await client.put(
            f"/post-update/{uuid4()}", json={"content": "x"}, headers=ada["headers"]
        )

        assert response.status_code == 404


class TestLikes:

    async def test_like_then_like_again(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        post = await make_post(ada)

        first = await client.put(f"/post-like/{post['id']}", headers=bob["headers"])
        second = await client.put(f"/post-like/{post['id']}", headers=bob["headers"])

        assert first.status_code == 200
        assert first.json()["id"] == bob["id"]
        assert first.json()["likedPosts"] == [post["id"]]
        assert second.status_code == 409
        assert second.json()["error"]["code"] == "ALREADY_LIKED"

        populated = await client.get(f"/post/{post['id']}")
        assert populated.json()["likes"] == [bob["id"]]

    async def test_dislike_is_idempotent(self, client, make_user, make_post):
        ada = await make_user("ada")
        post = await make_post(ada)
        await client.put(f"/post-like/{post['id']}", headers=ada["headers"])

        first = await client.put(f"/post-dislike/{post['id']}", headers=ada["headers"])
        second = await client.put(f"/post-dislike/{post['id']}", headers=ada["headers"])

        assert first.status_code == 200
        assert first.json()["likedPosts"] == []
        assert second.status_code == 200
        assert second.json()["likedPosts"] == []

    async def test_like_missing_post(self, client, make_user):
        ada = await make_user("ada")

        response = await client.put(f"/post-like/{uuid4()}", headers=ada["headers"])

        assert response.status_code == 404

    async def test_account_response_has_no_password(self, client, make_user, make_post):
        ada = await make_user("ada")
        post = await make_post(ada)

        response = await client.put(f"/post-like/{post['id']}", headers=ada["headers"])

        body = response.json()
        assert "password" not in body
        assert "passwordHash" not in body


class TestDelete:

    async def test_delete_post_cascades(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        post = await make_post(ada)
        await client.put(f"/post-like/{post['id']}", headers=bob["headers"])
        await client.post(
            f"/create-comment/{post['id']}", json={"content": "nice"}, headers=bob["headers"]
        )
        await client.post(f"/share-post/{post['id']}", json={}, headers=bob["headers"])

        response = await client.delete(f"/post-delete/{post['id']}", headers=ada["headers"])

        assert response.status_code == 200
        assert response.json()["id"] == post["id"]
        assert (await client.get(f"/post/{post['id']}")).status_code == 404
        assert (await client.get(f"/comments/{post['id']}")).status_code == 404

        liked = await client.get(f"/in/{bob['id']}/likeActivity")
        assert liked.json() == []
        shares = await client.get(f"/check-share/{bob['id']}")
        assert shares.json()["shares"] == []

    async def test_other_user_cannot_delete(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        post = await make_post(ada)

        response = await client.delete(f"/post-delete/{post['id']}", headers=bob["headers"])

        assert response.status_code == 403
        assert (await client.get(f"/post/{post['id']}")).status_code == 200
