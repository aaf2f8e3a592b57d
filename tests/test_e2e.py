"""
End-to-end flow across two accounts.
"""


async def test_two_user_flow(client, make_user, make_post):
    ada = await make_user("ada")
    bob = await make_user("bob")

    # Ada posts, Bob likes it
    post = await make_post(ada, "Hello from Ada")
    liked = await client.put(f"/post-like/{post['id']}", headers=bob["headers"])
    assert liked.status_code == 200
    assert post["id"] in liked.json()["likedPosts"]

    again = await client.put(f"/post-like/{post['id']}", headers=bob["headers"])
    assert again.status_code == 409

    # Bob comments and follows Ada
    commented = await client.post(
        f"/create-comment/{post['id']}", json={"content": "Hi Ada"}, headers=bob["headers"]
    )
    assert commented.status_code == 201
    followed = await client.put(
        f"/in/{bob['id']}/follow", json={"followUserId": ada["id"]}, headers=bob["headers"]
    )
    assert followed.status_code == 200

    ada_profile = (await client.get(f"/in/{ada['id']}")).json()
    assert [f["id"] for f in ada_profile["followers"]] == [bob["id"]]
    assert ada_profile["posts"][0]["likes"] == [bob["id"]]
    assert ada_profile["posts"][0]["comments"][0]["content"] == "Hi Ada"

    # Ada deletes the post
    deleted = await client.delete(f"/post-delete/{post['id']}", headers=ada["headers"])
    assert deleted.status_code == 200

    bob_profile = (await client.get(f"/in/{bob['id']}")).json()
    assert bob_profile["likedPosts"] == []
    assert (await client.get(f"/in/{bob['id']}/commentActivity")).json() == []
    assert (await client.get("/posts")).json() == []


async def test_health_endpoints(client):
    index = await client.get("/api")
    health = await client.get("/health")

    assert index.json() == {"message": "All good in here"}
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert health.json()["service"] == "socialhub"
