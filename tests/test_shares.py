"""
Share endpoints.
"""

from uuid import uuid4


class TestSharePost:

    async def test_share_post(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        post = await make_post(ada)

        response = await client.post(
            f"/share-post/{post['id']}",
            json={"userId": bob["id"], "content": "look at this"},
            headers=bob["headers"],
        )

        assert response.status_code == 200
        share = response.json()
        assert share["userId"] == bob["id"]
        assert share["postId"] == post["id"]
        assert share["content"] == "look at this"

        shares = await client.get(f"/check-share/{bob['id']}")
        assert shares.json()["sharedPostsIds"] == [post["id"]]

    async def test_share_without_body(self, client, make_user, make_post):
        ada = await make_user("ada")
        post = await make_post(ada)

        response = await client.post(f"/share-post/{post['id']}", headers=ada["headers"])

        assert response.status_code == 200
        assert response.json()["userId"] == ada["id"]

    async def test_sharing_twice_is_rejected(self, client, make_user, make_post):
        ada = await make_user("ada")
        post = await make_post(ada)

        await client.post(f"/share-post/{post['id']}", json={}, headers=ada["headers"])
        response = await client.post(f"/share-post/{post['id']}", json={}, headers=ada["headers"])

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "ALREADY_SHARED"

    async def test_sharing_as_someone_else_is_forbidden(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        post = await make_post(ada)

        response = await client.post(
            f"/share-post/{post['id']}", json={"userId": ada["id"]}, headers=bob["headers"]
        )

        assert response.status_code == 403

    async def test_share_missing_post(self, client, make_user):
        ada = await make_user("ada")

        response = await client.post(f"/share-post/{uuid4()}", json={}, headers=ada["headers"])

        assert response.status_code == 404


class TestDeleteShare:

    async def _share(self, client, user, post):
        response = await client.post(f"/share-post/{post['id']}", json={}, headers=user["headers"])
        return response.json()

    async def test_delete_own_share(self, client, make_user, make_post):
        ada = await make_user("ada")
        post = await make_post(ada)
        share = await self._share(client, ada, post)

        response = await client.request(
            "DELETE",
            f"/delete-share/{share['id']}",
            json={"userId": ada["id"], "postId": post["id"]},
            headers=ada["headers"],
        )

        assert response.status_code == 200
        assert response.json()["id"] == share["id"]
        remaining = await client.get(f"/check-share/{ada['id']}")
        assert remaining.json()["shares"] == []

    async def test_delete_share_of_another_user_is_a_mismatch(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        post = await make_post(ada)
        share = await self._share(client, ada, post)

        response = await client.delete(f"/delete-share/{share['id']}", headers=bob["headers"])

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INTEGRITY_MISMATCH"

    async def test_delete_missing_share_is_a_mismatch(self, client, make_user):
        ada = await make_user("ada")

        response = await client.delete(f"/delete-share/{uuid4()}", headers=ada["headers"])

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INTEGRITY_MISMATCH"

    async def test_delete_share_with_wrong_post_is_a_mismatch(self, client, make_user, make_post):
        ada = await make_user("ada")
        post = await make_post(ada, "shared")
        other = await make_post(ada, "not shared")
        share = await self._share(client, ada, post)

        response = await client.request(
            "DELETE",
            f"/delete-share/{share['id']}",
            json={"postId": other["id"]},
            headers=ada["headers"],
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INTEGRITY_MISMATCH"

    async def test_delete_share_naming_another_user_is_forbidden(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        post = await make_post(ada)
        share = await self._share(client, ada, post)

        response = await client.request(
            "DELETE",
            f"/delete-share/{share['id']}",
            json={"userId": ada["id"]},
            headers=bob["headers"],
        )

        assert response.status_code == 403
