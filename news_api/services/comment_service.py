"""
Comment service — listing, creation, vote updates and deletion of comments.

The existence of the parent article is only checked when listing, where
"no comments" and "no article" must be told apart.  On insert the
foreign key is left to the database: a missing article surfaces as an
``IntegrityError`` that the error pipeline reports as 404.
"""
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.config import settings
from news_api.errors import BadRequest, NotFound
from news_api.models import Comment, User
from news_api.schemas import CommentCreate
from news_api.services import article_service, user_service

COMMENT_NOT_FOUND_MSG = "comment_id not found in the database"


def _comment_to_dict(row) -> dict:
    return {
        "comment_id": row.comment_id,
        "body": row.body,
        "author": row.author,
        "article_id": row.article_id,
        "votes": row.votes,
        "created_at": row.created_at.isoformat() if row.created_at else None,
    }


async def get_comments_for_article(
    db: AsyncSession,
    article_id: int,
    limit: int = settings.DEFAULT_PAGE_SIZE,
    offset: int = 0,
) -> list[dict]:
    """
    Return up to *limit* of the article's comments from row *offset*, newest first.

    Raises ``NotFound`` when the article does not exist; an existing
    article without comments yields an empty list.
    """
    if not await article_service.article_exists(db, article_id):
        raise NotFound(article_service.ARTICLE_NOT_FOUND_MSG)

    q = (
        select(Comment)
        .where(Comment.article_id == article_id)
        .order_by(Comment.created_at.desc(), Comment.comment_id.desc())
        .limit(limit)
        .offset(offset)
    )
    result = await db.execute(q)
    return [_comment_to_dict(c) for c in result.scalars().all()]


async def add_comment(db: AsyncSession, article_id: int, data: CommentCreate) -> dict:
    """
    Insert a comment by ``data.username`` on *article_id* and return it.

    Raises ``BadRequest`` when the username or body is missing and
    ``NotFound`` when the username is unknown.
    """
    if data.username is None or data.body is None:
        raise BadRequest()

    user = await db.execute(select(User.username).where(User.username == data.username))
    if user.scalar_one_or_none() is None:
        raise NotFound(user_service.USERNAME_NOT_FOUND_MSG)

    comment = Comment(body=data.body, author=data.username, article_id=article_id, votes=0)
    db.add(comment)
    await db.flush()
    # created_at comes from a server default.
    await db.refresh(comment)
    return _comment_to_dict(comment)


async def update_comment_votes(db: AsyncSession, comment_id: int, inc_votes: int = 0) -> dict:
    """Add *inc_votes* to the comment's vote count and return the updated comment."""
    q = (
        update(Comment)
        .where(Comment.comment_id == comment_id)
        .values(votes=Comment.votes + inc_votes)
        .returning(*Comment.__table__.c)
    )
    row = (await db.execute(q)).one_or_none()
    if row is None:
        raise NotFound(COMMENT_NOT_FOUND_MSG)
    return _comment_to_dict(row)


async def delete_comment(db: AsyncSession, comment_id: int) -> dict:
    """
    Delete the comment identified by *comment_id* and return the removed row.

    Raises ``NotFound`` when no row was deleted.
    """
    q = delete(Comment).where(Comment.comment_id == comment_id).returning(*Comment.__table__.c)
    row = (await db.execute(q)).one_or_none()
    if row is None:
        raise NotFound(COMMENT_NOT_FOUND_MSG)
    return _comment_to_dict(row)
