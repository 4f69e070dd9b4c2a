"""
Comment endpoint tests — listing an article's comments, posting, vote
updates and deletion, including every error path of those routes.
"""
import pytest
from httpx import AsyncClient

COMMENT_KEYS = {"comment_id", "body", "author", "article_id", "votes", "created_at"}


# ---------------------------------------------------------------------------
# List comments for an article
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_comments_defaults(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/1/comments")
    assert resp.status_code == 200
    comments = resp.json()["comments"]
    assert len(comments) == 10
    created = [c["created_at"] for c in comments]
    assert created == sorted(created, reverse=True)
    for comment in comments:
        assert set(comment) == COMMENT_KEYS
        assert comment["article_id"] == 1
    assert [c["comment_id"] for c in comments[:3]] == [5, 2, 18]


@pytest.mark.asyncio
async def test_list_comments_limit(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/1/comments?limit=5")
    assert resp.status_code == 200
    assert len(resp.json()["comments"]) == 5


@pytest.mark.asyncio
async def test_list_comments_page(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/1/comments?limit=1&p=1")
    assert resp.status_code == 200
    comments = resp.json()["comments"]
    assert len(comments) == 1
    assert comments[0]["comment_id"] == 2
    assert comments[0]["votes"] == 14
    assert comments[0]["author"] == "butter_bridge"
    assert comments[0]["created_at"].startswith("2020-10-31T03:03:00")


@pytest.mark.asyncio
async def test_list_comments_offset(async_client: AsyncClient):
    """``p`` skips that many comments, whatever the limit."""
    full = (await async_client.get("/api/articles/1/comments?limit=20")).json()["comments"]
    resp = await async_client.get("/api/articles/1/comments?limit=5&p=1")
    assert resp.status_code == 200
    comments = resp.json()["comments"]
    assert comments == full[1:6]
    assert [c["comment_id"] for c in comments] == [2, 18, 13, 7, 8]


@pytest.mark.asyncio
async def test_list_comments_offset_near_end(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/1/comments?p=10")
    assert [c["comment_id"] for c in resp.json()["comments"]] == [9]


@pytest.mark.asyncio
async def test_list_comments_article_without_comments(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/11/comments")
    assert resp.status_code == 200
    assert resp.json() == {"comments": []}


@pytest.mark.asyncio
async def test_list_comments_article_not_found(async_client: AsyncClient):
    resp = await async_client.get("/api/articles/100000/comments")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "article_id not found in the database"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path",
    [
        "/api/articles/not-a-number/comments",
        "/api/articles/1/comments?limit=not-valid",
        "/api/articles/1/comments?p=delete",
    ],
)
async def test_list_comments_bad_request(async_client: AsyncClient, path: str):
    resp = await async_client.get(path)
    assert resp.status_code == 400
    assert resp.json() == {"msg": "You have made a bad request"}


# ---------------------------------------------------------------------------
# Post comment
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_post_comment(async_client: AsyncClient):
    resp = await async_client.post(
        "/api/articles/1/comments",
        json={"username": "icellusedkars", "body": "this is great!"},
    )
    assert resp.status_code == 201
    comment = resp.json()["comment"]
    assert comment["comment_id"] == 19
    assert comment["body"] == "this is great!"
    assert comment["author"] == "icellusedkars"
    assert comment["article_id"] == 1
    assert comment["votes"] == 0
    assert comment["created_at"]


@pytest.mark.asyncio
async def test_post_comment_is_listed(async_client: AsyncClient):
    await async_client.post(
        "/api/articles/11/comments",
        json={"username": "rogersop", "body": "Nice"},
    )
    resp = await async_client.get("/api/articles/11/comments")
    comments = resp.json()["comments"]
    assert [(c["author"], c["body"]) for c in comments] == [("rogersop", "Nice")]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [{}, {"username": "icellusedkars"}, {"body": "no author"}],
)
async def test_post_comment_missing_fields(async_client: AsyncClient, payload: dict):
    resp = await async_client.post("/api/articles/1/comments", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"msg": "You have made a bad request"}


@pytest.mark.asyncio
async def test_post_comment_unknown_username(async_client: AsyncClient):
    resp = await async_client.post(
        "/api/articles/1/comments",
        json={"username": "han", "body": "this is great!"},
    )
    assert resp.status_code == 404
    assert resp.json() == {"msg": "username not found in the database"}


@pytest.mark.asyncio
async def test_post_comment_invalid_article_id(async_client: AsyncClient):
    resp = await async_client.post(
        "/api/articles/not-a-number/comments",
        json={"username": "icellusedkars", "body": "this is great!"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"msg": "You have made a bad request"}


@pytest.mark.asyncio
async def test_post_comment_article_not_found(async_client: AsyncClient):
    """A missing article is reported by the foreign-key check, not a lookup."""
    resp = await async_client.post(
        "/api/articles/100000/comments",
        json={"username": "icellusedkars", "body": "this is great!"},
    )
    assert resp.status_code == 404
    assert resp.json() == {"msg": "Value not found in the database"}


# ---------------------------------------------------------------------------
# Patch comment votes
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_patch_comment_votes(async_client: AsyncClient):
    resp = await async_client.patch("/api/comments/1", json={"inc_votes": 10})
    assert resp.status_code == 200
    comment = resp.json()["comment"]
    assert comment["comment_id"] == 1
    assert comment["votes"] == 26
    assert comment["author"] == "butter_bridge"
    assert comment["article_id"] == 9
    assert comment["created_at"].startswith("2020-04-06T12:17:00")


@pytest.mark.asyncio
async def test_patch_comment_votes_negative(async_client: AsyncClient):
    resp = await async_client.patch("/api/comments/1", json={"inc_votes": -20})
    assert resp.status_code == 200
    assert resp.json()["comment"]["votes"] == -4


@pytest.mark.asyncio
async def test_patch_comment_empty_body(async_client: AsyncClient):
    resp = await async_client.patch("/api/comments/1", json={})
    assert resp.status_code == 200
    assert resp.json()["comment"]["votes"] == 16


@pytest.mark.asyncio
async def test_patch_comment_invalid_id(async_client: AsyncClient):
    resp = await async_client.patch("/api/comments/not-a-number", json={"inc_votes": 1})
    assert resp.status_code == 400
    assert resp.json() == {"msg": "You have made a bad request"}


@pytest.mark.asyncio
async def test_patch_comment_invalid_votes(async_client: AsyncClient):
    resp = await async_client.patch("/api/comments/1", json={"inc_votes": "not-a-number"})
    assert resp.status_code == 400
    assert resp.json() == {"msg": "You have made a bad request"}


@pytest.mark.asyncio
async def test_patch_comment_not_found(async_client: AsyncClient):
    resp = await async_client.patch("/api/comments/100000", json={"inc_votes": 1})
    assert resp.status_code == 404
    assert resp.json() == {"msg": "comment_id not found in the database"}


# ---------------------------------------------------------------------------
# Delete comment
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_delete_comment(async_client: AsyncClient):
    resp = await async_client.delete("/api/comments/5")
    assert resp.status_code == 204
    assert resp.content == b""

    article = (await async_client.get("/api/articles/1")).json()["article"]
    assert article["comment_count"] == 10


@pytest.mark.asyncio
async def test_delete_comment_twice(async_client: AsyncClient):
    first = await async_client.delete("/api/comments/5")
    second = await async_client.delete("/api/comments/5")
    assert first.status_code == 204
    assert second.status_code == 404
    assert second.json() == {"msg": "comment_id not found in the database"}


@pytest.mark.asyncio
async def test_delete_comment_invalid_id(async_client: AsyncClient):
    resp = await async_client.delete("/api/comments/not-a-number")
    assert resp.status_code == 400
    assert resp.json() == {"msg": "You have made a bad request"}


@pytest.mark.asyncio
async def test_delete_comment_not_found(async_client: AsyncClient):
    resp = await async_client.delete("/api/comments/10000")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "comment_id not found in the database"}
