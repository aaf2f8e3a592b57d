"""
Comment endpoints.
"""

from uuid import uuid4


class TestComments:

    async def test_create_comment_returns_updated_post(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        post = await make_post(ada)

        response = await client.post(
            f"/create-comment/{post['id']}", json={"content": "nice"}, headers=bob["headers"]
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == post["id"]
        assert len(body["comments"]) == 1
        assert body["comments"][0]["content"] == "nice"
        assert body["comments"][0]["user"]["id"] == bob["id"]

    async def test_comment_requires_content(self, client, make_user, make_post):
        ada = await make_user("ada")
        post = await make_post(ada)

        response = await client.post(
            f"/create-comment/{post['id']}", json={}, headers=ada["headers"]
        )

        assert response.status_code == 400
        assert response.json()["errorMessage"] == "Please provide the comment content"

    async def test_comment_on_missing_post(self, client, make_user):
        ada = await make_user("ada")

        response = await client.post(
            f"/create-comment/{uuid4()}", json={"content": "hello"}, headers=ada["headers"]
        )

        assert response.status_code == 404

    async def test_list_comments_oldest_first(self, client, make_user, make_post):
        ada = await make_user("ada")
        post = await make_post(ada)
        for text in ("first", "second"):
            await client.post(
                f"/create-comment/{post['id']}", json={"content": text}, headers=ada["headers"]
            )

        response = await client.get(f"/comments/{post['id']}")

        assert response.status_code == 200
        assert [comment["content"] for comment in response.json()] == ["first", "second"]
        assert response.json()[0]["user"]["name"] == "Ada"

    async def test_update_own_comment(self, client, make_user, make_post):
        ada = await make_user("ada")
        post = await make_post(ada)
        created = await client.post(
            f"/create-comment/{post['id']}", json={"content": "typo"}, headers=ada["headers"]
        )
        comment_id = created.json()["comments"][0]["id"]

        response = await client.put(
            f"/comment-update/{comment_id}", json={"content": "fixed"}, headers=ada["headers"]
        )

        assert response.status_code == 200
        assert response.json()["content"] == "fixed"

    async def test_cannot_edit_or_delete_others_comment(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        post = await make_post(ada)
        created = await client.post(
            f"/create-comment/{post['id']}", json={"content": "mine"}, headers=ada["headers"]
        )
        comment_id = created.json()["comments"][0]["id"]

        edit = await client.put(
            f"/comment-update/{comment_id}", json={"content": "theirs"}, headers=bob["headers"]
        )
        delete = await client.delete(f"/comment/{comment_id}", headers=bob["headers"])

        assert edit.status_code == 403
        assert delete.status_code == 403

    async def test_delete_own_comment(self, client, make_user, make_post):
        ada = await make_user("ada")
        post = await make_post(ada)
        created = await client.post(
            f"/create-comment/{post['id']}", json={"content": "bye"}, headers=ada["headers"]
        )
        comment_id = created.json()["comments"][0]["id"]

        response = await client.delete(f"/comment/{comment_id}", headers=ada["headers"])

        assert response.status_code == 200
        assert response.json()["id"] == comment_id
        remaining = await client.get(f"/comments/{post['id']}")
        assert remaining.json() == []

    async def test_delete_missing_comment(self, client, make_user):
        ada = await make_user("ada")

        response = await client.delete(f"/comment/{uuid4()}", headers=ada["headers"])

        assert response.status_code == 404
