"""
IntegrityService cascades, exercised directly against the database.
"""

import pytest
import pytest_asyncio
from sqlalchemy import func, select

from socialhub.shared.core.exceptions import IntegrityMismatchError
from socialhub.shared.models import Comment, Follow, Post, PostLike, Share, User
from socialhub.shared.repositories import (
    CommentRepository,
    FollowRepository,
    PostLikeRepository,
    PostRepository,
    ShareRepository,
    UserRepository,
)
from socialhub.shared.services.integrity_service import IntegrityService


async def _count(session, model, *criteria) -> int:
    result = await session.execute(select(func.count()).select_from(model).where(*criteria))
    return result.scalar_one()


async def _user(session, username: str) -> User:
    return await UserRepository(session).create(
        username=username,
        email=f"{username}@example.com",
        name=username.title(),
        password_hash="x",
    )


@pytest_asyncio.fixture
async def graph(db_session):
    """Two users, a post each, with likes, comments, shares and follows across them."""
    ada = await _user(db_session, "ada")
    bob = await _user(db_session, "bob")

    posts = PostRepository(db_session)
    ada_post = await posts.create(user_id=ada.id, content="by ada")
    bob_post = await posts.create(user_id=bob.id, content="by bob")

    comments = CommentRepository(db_session)
    await comments.create(user_id=bob.id, post_id=ada_post.id, content="bob on ada")
    await comments.create(user_id=ada.id, post_id=bob_post.id, content="ada on bob")

    likes = PostLikeRepository(db_session)
    await likes.add(bob.id, ada_post.id)
    await likes.add(ada.id, bob_post.id)

    shares = ShareRepository(db_session)
    await shares.create(user_id=bob.id, post_id=ada_post.id)
    await shares.create(user_id=ada.id, post_id=bob_post.id)

    follows = FollowRepository(db_session)
    await follows.add(bob.id, ada.id)
    await follows.add(ada.id, bob.id)

    await db_session.commit()

    return {"ada": ada, "bob": bob, "ada_post": ada_post, "bob_post": bob_post}


class TestDeletePost:

    async def test_removes_post_and_dependents(self, db_session, graph):
        post_id = graph["ada_post"].id

        await IntegrityService(db_session).delete_post(post_id)
        await db_session.commit()

        assert await _count(db_session, Post, Post.id == post_id) == 0
        assert await _count(db_session, PostLike, PostLike.post_id == post_id) == 0
        assert await _count(db_session, Comment, Comment.post_id == post_id) == 0
        assert await _count(db_session, Share, Share.post_id == post_id) == 0

        # Other post untouched
        assert await _count(db_session, Post) == 1
        assert await _count(db_session, PostLike) == 1
        assert await _count(db_session, Comment) == 1
        assert await _count(db_session, Share) == 1


class TestDeleteUser:

    async def test_removes_every_reference(self, db_session, graph):
        ada_id = graph["ada"].id

        await IntegrityService(db_session).delete_user(ada_id)
        await db_session.commit()

        assert await _count(db_session, User, User.id == ada_id) == 0
        assert await _count(db_session, Post, Post.user_id == ada_id) == 0
        assert await _count(db_session, Comment, Comment.user_id == ada_id) == 0
        assert await _count(db_session, PostLike, PostLike.user_id == ada_id) == 0
        assert await _count(db_session, Share, Share.user_id == ada_id) == 0
        assert await _count(db_session, Follow) == 0

        # Bob's post survives without anything ada left on it
        assert await _count(db_session, Post) == 1
        assert await _count(db_session, Comment) == 0
        assert await _count(db_session, Share) == 0


class TestDeleteShare:

    async def test_mismatched_owner(self, db_session, graph):
        share = await ShareRepository(db_session).get_user_share(
            graph["bob"].id, graph["ada_post"].id
        )

        with pytest.raises(IntegrityMismatchError):
            await IntegrityService(db_session).delete_share(share.id, user_id=graph["ada"].id)

    async def test_mismatched_post(self, db_session, graph):
        share = await ShareRepository(db_session).get_user_share(
            graph["bob"].id, graph["ada_post"].id
        )

        with pytest.raises(IntegrityMismatchError):
            await IntegrityService(db_session).delete_share(
                share.id, user_id=graph["bob"].id, post_id=graph["bob_post"].id
            )

    async def test_matching_share_is_deleted(self, db_session, graph):
        share = await ShareRepository(db_session).get_user_share(
            graph["bob"].id, graph["ada_post"].id
        )

        deleted = await IntegrityService(db_session).delete_share(
            share.id, user_id=graph["bob"].id, post_id=graph["ada_post"].id
        )
        await db_session.commit()

        assert deleted.id == share.id
        assert await _count(db_session, Share, Share.id == share.id) == 0
