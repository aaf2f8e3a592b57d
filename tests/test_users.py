"""
User endpoints: profile pages, follows, profile edits and account deletion.
"""

from uuid import uuid4


class TestProfile:

    async def test_profile_is_populated(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        post = await make_post(ada, "hello")
        await client.put(f"/post-like/{post['id']}", headers=ada["headers"])
        await client.put(
            f"/in/{bob['id']}/follow", json={"followUserId": ada["id"]}, headers=bob["headers"]
        )

        response = await client.get(f"/in/{ada['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["username"] == "ada"
        assert [p["content"] for p in body["posts"]] == ["hello"]
        assert body["posts"][0]["user"]["id"] == ada["id"]
        assert [p["id"] for p in body["likedPosts"]] == [post["id"]]
        assert [f["id"] for f in body["followers"]] == [bob["id"]]
        assert body["following"] == []
        assert "email" not in body
        assert "passwordHash" not in body

    async def test_profile_of_liker(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        post = await make_post(ada, "hello")
        await client.put(f"/post-like/{post['id']}", headers=bob["headers"])

        response = await client.get(f"/in/{bob['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["posts"] == []
        liked = body["likedPosts"]
        assert [p["id"] for p in liked] == [post["id"]]
        assert liked[0]["user"]["id"] == ada["id"]
        assert liked[0]["likes"] == [bob["id"]]

    async def test_missing_profile(self, client):
        response = await client.get(f"/in/{uuid4()}")

        assert response.status_code == 404


class TestFollow:

    async def test_follow_toggles(self, client, make_user):
        ada = await make_user("ada")
        bob = await make_user("bob")

        follow = await client.put(
            f"/in/{bob['id']}/follow", json={"followUserId": ada["id"]}, headers=bob["headers"]
        )
        assert follow.status_code == 200
        assert follow.json()["following"] == [ada["id"]]

        followed = await client.get(
            f"/in/{bob['id']}/follow",
            params={"followUserId": ada["id"]},
            headers=bob["headers"],
        )
        assert followed.json() is True

        unfollow = await client.put(
            f"/in/{bob['id']}/follow", json={"followUserId": ada["id"]}, headers=bob["headers"]
        )
        assert unfollow.status_code == 200
        assert unfollow.json()["following"] == []

        followed = await client.get(
            f"/in/{bob['id']}/follow",
            params={"followUserId": ada["id"]},
            headers=bob["headers"],
        )
        assert followed.json() is False

    async def test_check_follow(self, client, make_user):
        ada = await make_user("ada")
        bob = await make_user("bob")
        await client.put(
            f"/in/{bob['id']}/follow", json={"followUserId": ada["id"]}, headers=bob["headers"]
        )

        response = await client.get(f"/check-follow/{bob['id']}")

        assert response.status_code == 200
        assert response.json() == {"id": bob["id"], "following": [ada["id"]]}

    async def test_cannot_follow_yourself(self, client, make_user):
        ada = await make_user("ada")

        response = await client.put(
            f"/in/{ada['id']}/follow", json={"followUserId": ada["id"]}, headers=ada["headers"]
        )

        assert response.status_code == 400
        assert response.json()["errorMessage"] == "You cannot follow yourself"

    async def test_cannot_follow_on_behalf_of_others(self, client, make_user):
        ada = await make_user("ada")
        bob = await make_user("bob")

        response = await client.put(
            f"/in/{ada['id']}/follow", json={"followUserId": bob["id"]}, headers=bob["headers"]
        )

        assert response.status_code == 403

    async def test_follow_unknown_user(self, client, make_user):
        ada = await make_user("ada")

        response = await client.put(
            f"/in/{ada['id']}/follow", json={"followUserId": str(uuid4())}, headers=ada["headers"]
        )

        assert response.status_code == 404


class TestProfileEdit:

    async def test_partial_edit(self, client, make_user):
        ada = await make_user("ada")

        response = await client.put(
            f"/profile-edit/{ada['id']}",
            json={"about": "Analyst", "location": "London"},
            headers=ada["headers"],
        )

        assert response.status_code == 200
        body = response.json()
        assert body["about"] == "Analyst"
        assert body["location"] == "London"
        assert body["username"] == "ada"
        assert body["name"] == "Ada"

    async def test_rename_to_taken_username(self, client, make_user):
        ada = await make_user("ada")
        await make_user("bob")

        response = await client.put(
            f"/profile-edit/{ada['id']}", json={"username": "bob"}, headers=ada["headers"]
        )

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "USERNAME_TAKEN"

    async def test_edit_someone_else(self, client, make_user):
        ada = await make_user("ada")
        bob = await make_user("bob")

        response = await client.put(
            f"/profile-edit/{ada['id']}", json={"about": "hacked"}, headers=bob["headers"]
        )

        assert response.status_code == 403


class TestPasswordEdit:

    async def test_new_password_is_used_for_login(self, client, make_user):
        ada = await make_user("ada")

        response = await client.put(
            f"/edit-password/{ada['id']}", json={"newPassword": "N3wSecret"}, headers=ada["headers"]
        )
        assert response.status_code == 200

        old = await client.post("/auth/login", json={"loginName": "ada", "password": "Passw0rd"})
        new = await client.post("/auth/login", json={"loginName": "ada", "password": "N3wSecret"})
        assert old.status_code == 401
        assert new.status_code == 200

    async def test_weak_new_password(self, client, make_user):
        ada = await make_user("ada")

        response = await client.put(
            f"/edit-password/{ada['id']}", json={"newPassword": "weak"}, headers=ada["headers"]
        )

        assert response.status_code == 400


class TestDeleteAccount:

    async def test_delete_user_cascades(self, client, make_user, make_post):
        ada = await make_user("ada")
        bob = await make_user("bob")
        ada_post = await make_post(ada, "by ada")
        bob_post = await make_post(bob, "by bob")
        await client.post(
            f"/create-comment/{ada_post['id']}", json={"content": "on own"}, headers=bob["headers"]
        )
        await client.post(
            f"/create-comment/{bob_post['id']}", json={"content": "from ada"}, headers=ada["headers"]
        )
        await client.put(f"/post-like/{bob_post['id']}", headers=ada["headers"])
        await client.post(f"/share-post/{bob_post['id']}", json={}, headers=ada["headers"])
        await client.put(
            f"/in/{bob['id']}/follow", json={"followUserId": ada["id"]}, headers=bob["headers"]
        )

        response = await client.delete(f"/profile-delete/{ada['id']}", headers=ada["headers"])

        assert response.status_code == 200
        assert response.json()["id"] == ada["id"]
        assert (await client.get(f"/in/{ada['id']}")).status_code == 404
        assert (await client.get(f"/post/{ada_post['id']}")).status_code == 404

        remaining = (await client.get(f"/post/{bob_post['id']}")).json()
        assert remaining["likes"] == []
        assert remaining["comments"] == []
        assert remaining["shares"] == []

        bob_profile = (await client.get(f"/in/{bob['id']}")).json()
        assert bob_profile["following"] == []

        login = await client.post("/auth/login", json={"loginName": "ada", "password": "Passw0rd"})
        assert login.status_code == 401

    async def test_cannot_delete_someone_else(self, client, make_user):
        ada = await make_user("ada")
        bob = await make_user("bob")

        response = await client.delete(f"/profile-delete/{ada['id']}", headers=bob["headers"])

        assert response.status_code == 403
