"""End-to-end tests for the forum HTTP API."""

from uuid import UUID, uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from forum.config import Settings
from forum.domain.repository import CommentRepository
from forum.domain.service import IdentityClient
from forum.domain.value import PostId, UserId
from forum.interface.api.app import create_app
from forum.util.jwt import create_token
from tests.di import build_test_container
from tests.factories import make_author, make_comment

ALICE = "user_alice"
BOB = "user_bob"


@pytest_asyncio.fixture
async def container():
    test_container = build_test_container()
    identity = await test_container.get(IdentityClient)
    identity.add_user(make_author(ALICE, username="alice"))
    identity.add_user(make_author(BOB, username=None, first_name="Bob"))
    yield test_container
    await test_container.close()


@pytest_asyncio.fixture
async def client(container):
    """Anonymous client against an app wired to the test container."""
    transport = ASGITransport(app=create_app(container=container))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def auth(user_id: str) -> dict[str, str]:
    """Cookies for a signed-in user."""
    return {"auth_token": create_token(user_id, Settings().auth)}


async def _create_post(client: AsyncClient, user_id: str = ALICE) -> str:
    client.cookies = auth(user_id)
    response = await client.post("/posts", json={"title": "Hello", "content": "Body"})
    assert response.status_code == 201
    return response.json()["post"]["post_id"]


async def _create_comment(
    client: AsyncClient, post_id: str, user_id: str, parent_id: str | None = None
) -> str:
    client.cookies = auth(user_id)
    path = f"/posts/{post_id}/comments"
    if parent_id:
        path = f"{path}/{parent_id}/replies"
    response = await client.post(path, json={"content": f"from {user_id}"})
    assert response.status_code == 201
    return response.json()["comment"]["comment_id"]


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestPosts:
    """Tests for /posts endpoints."""

    @pytest.mark.asyncio
    async def test_create_requires_auth(self, client):
        response = await client.post("/posts", json={"title": "t", "content": "c"})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_create_and_list(self, client):
        post_id = await _create_post(client)

        client.cookies.clear()
        response = await client.get("/posts")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["posts"][0]["post"]["post_id"] == post_id
        assert data["posts"][0]["author"]["username"] == "alice"

    @pytest.mark.asyncio
    async def test_title_too_long_names_field(self, client):
        client.cookies = auth(ALICE)

        response = await client.post(
            "/posts", json={"title": "x" * 181, "content": "Body"}
        )

        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "title"

    @pytest.mark.asyncio
    async def test_missing_body_field_names_field(self, client):
        client.cookies = auth(ALICE)

        response = await client.post("/posts", json={"title": "Hello"})

        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "content"

    @pytest.mark.asyncio
    async def test_failed_create_leaves_feed_intact(self, client):
        post_id = await _create_post(client)
        client.cookies = auth("user_ghost")

        created = await client.post(
            "/posts", json={"title": "Ghost", "content": "Body"}
        )
        commented = await client.post(
            f"/posts/{post_id}/comments", json={"content": "boo"}
        )

        client.cookies.clear()
        feed = await client.get("/posts")
        tree = await client.get(f"/posts/{post_id}/comments")

        assert created.status_code == 500
        assert commented.status_code == 500
        assert feed.status_code == 200
        assert [item["post"]["post_id"] for item in feed.json()["posts"]] == [post_id]
        assert tree.json()["comments"] == []

    @pytest.mark.asyncio
    async def test_get_missing_post(self, client):
        response = await client.get(f"/posts/{uuid4()}")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_get_malformed_id(self, client):
        response = await client.get("/posts/not-a-uuid")

        assert response.status_code == 404


class TestComments:
    """Tests for the comment tree endpoints."""

    @pytest.mark.asyncio
    async def test_tree_round_trip(self, client):
        # Arrange
        post_id = await _create_post(client)
        top = await _create_comment(client, post_id, ALICE)
        reply = await _create_comment(client, post_id, BOB, parent_id=top)
        await _create_comment(client, post_id, ALICE, parent_id=reply)

        # Act
        client.cookies.clear()
        response = await client.get(f"/posts/{post_id}/comments")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        first = data["comments"][0]
        assert first["comment"]["comment_type"] == "post"
        nested = first["comment"]["comments"][0]
        assert nested["comment"]["comment_id"] == reply
        assert nested["comment"]["comment_type"] == "comment"
        assert nested["author"]["display_name"] == "Bob"
        assert len(nested["comment"]["comments"]) == 1

    @pytest.mark.asyncio
    async def test_comment_requires_auth(self, client):
        post_id = await _create_post(client)

        client.cookies.clear()
        response = await client.post(
            f"/posts/{post_id}/comments", json={"content": "hi"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_comments_on_missing_post(self, client):
        response = await client.get(f"/posts/{uuid4()}/comments")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_author_is_generic_server_error(self, client, container):
        post_id = await _create_post(client)
        comment_repo = await container.get(CommentRepository)
        await comment_repo.save(
            make_comment(PostId(UUID(post_id)), UserId("user_ghost"))
        )

        client.cookies.clear()
        response = await client.get(f"/posts/{post_id}/comments")

        assert response.status_code == 500
        assert "user_ghost" not in response.text


class TestVotes:
    """Tests for the vote endpoints."""

    @pytest.mark.asyncio
    async def test_vote_requires_auth(self, client):
        post_id = await _create_post(client)

        client.cookies.clear()
        response = await client.post(
            f"/posts/{post_id}/vote", json={"direction": "up"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_toggle_post_vote(self, client):
        post_id = await _create_post(client)
        client.cookies = auth(BOB)

        up = await client.post(f"/posts/{post_id}/vote", json={"direction": "up"})
        again = await client.post(f"/posts/{post_id}/vote", json={"direction": "up"})
        down = await client.post(f"/posts/{post_id}/vote", json={"direction": "down"})

        assert up.json()["rating"] == 1
        assert again.json()["changed"] is False
        assert down.json()["rating"] == -1
        assert down.json()["up_vote"] is False
        assert down.json()["down_vote"] is True

        listing = await client.get(f"/posts/{post_id}")
        assert listing.json()["post"]["down_vote"] is True

    @pytest.mark.asyncio
    async def test_comment_vote_shows_in_tree(self, client):
        post_id = await _create_post(client)
        top = await _create_comment(client, post_id, ALICE)
        client.cookies = auth(BOB)

        response = await client.post(
            f"/comments/{top}/vote", json={"direction": "up", "comment_type": "post"}
        )
        tree = await client.get(f"/posts/{post_id}/comments")

        assert response.status_code == 200
        node = tree.json()["comments"][0]["comment"]
        assert node["rating"] == 1
        assert node["up_vote"] is True

    @pytest.mark.asyncio
    async def test_comment_kind_mismatch(self, client):
        post_id = await _create_post(client)
        top = await _create_comment(client, post_id, ALICE)
        client.cookies = auth(BOB)

        response = await client.post(
            f"/comments/{top}/vote",
            json={"direction": "up", "comment_type": "comment"},
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_invalid_direction(self, client):
        post_id = await _create_post(client)
        client.cookies = auth(BOB)

        response = await client.post(
            f"/posts/{post_id}/vote", json={"direction": "sideways"}
        )

        assert response.status_code == 422
        assert response.json()["detail"]["field"] == "direction"
        assert "message" in response.json()["detail"]
