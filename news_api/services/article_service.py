"""
Article service — reads and vote updates for the Article aggregate.

Design notes
------------
- ``comment_count`` is never stored.  Every read LEFT JOINs the comments
  table and groups by article, so the count always matches the live rows.
- Sort columns come from the ``_SORTABLE_COLUMNS`` allow-list and are
  resolved to column expressions; request strings never reach the SQL
  text.
- Vote changes are a single ``UPDATE ... SET votes = votes + :delta
  RETURNING`` statement, so concurrent increments do not lose updates.
- Service functions do not commit; the transaction boundary is owned by
  the ``get_db`` dependency in the router layer.
"""
from sqlalchemy import asc, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.config import settings
from news_api.errors import BadRequest, NotFound
from news_api.models import Article, Comment, Topic

ARTICLE_NOT_FOUND_MSG = "article_id not found in the database"
TOPIC_NOT_FOUND_MSG = "You have made a bad request - this topic does not exist"

_SORT_ORDERS: frozenset[str] = frozenset({"asc", "desc"})

# ---------------------------------------------------------------------------
# Query helpers
# ---------------------------------------------------------------------------

_comment_count = func.count(Comment.comment_id).label("comment_count")

# Columns that are safe to sort by; guards against arbitrary SQL.
_SORTABLE_COLUMNS = {
    "article_id": Article.article_id,
    "title": Article.title,
    "topic": Article.topic,
    "body": Article.body,
    "created_at": Article.created_at,
    "votes": Article.votes,
    "comment_count": _comment_count,
}


def _articles_with_comment_count():
    """SELECT every article column plus the live comment count, grouped by article."""
    return (
        select(*Article.__table__.c, _comment_count)
        .select_from(Article)
        .outerjoin(Comment, Comment.article_id == Article.article_id)
        .group_by(Article.article_id)
    )


def _resolve_order(sort_by: str, order: str):
    """
    Return the ORDER BY expression for *sort_by* / *order*.

    Raises ``BadRequest`` for a column outside the allow-list or a
    direction other than asc/desc (case-insensitive).
    """
    direction = order.lower()
    if direction not in _SORT_ORDERS or sort_by not in _SORTABLE_COLUMNS:
        raise BadRequest()
    column = _SORTABLE_COLUMNS[sort_by]
    return desc(column) if direction == "desc" else asc(column)


# ---------------------------------------------------------------------------
# Serialisation helpers
# ---------------------------------------------------------------------------

def _article_to_dict(row) -> dict:
    """Serialise an article row (ORM instance or result row) to a plain dict."""
    return {
        "article_id": row.article_id,
        "title": row.title,
        "topic": row.topic,
        "body": row.body,
        "created_at": row.created_at.isoformat() if row.created_at else None,
        "votes": row.votes,
        "article_img_url": row.article_img_url,
    }


def _article_detail_to_dict(row) -> dict:
    data = _article_to_dict(row)
    data["comment_count"] = row.comment_count
    return data


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def article_exists(db: AsyncSession, article_id: int) -> bool:
    result = await db.execute(select(Article.article_id).where(Article.article_id == article_id))
    return result.scalar_one_or_none() is not None


async def get_article(db: AsyncSession, article_id: int) -> dict:
    """
    Return the article identified by *article_id* with its comment count.

    Raises ``NotFound`` when the article does not exist.
    """
    q = _articles_with_comment_count().where(Article.article_id == article_id)
    row = (await db.execute(q)).one_or_none()
    if row is None:
        raise NotFound(ARTICLE_NOT_FOUND_MSG)
    return _article_detail_to_dict(row)


async def get_articles(
    db: AsyncSession,
    topic: str | None = None,
    sort_by: str = "created_at",
    order: str = "desc",
    limit: int = settings.DEFAULT_PAGE_SIZE,
    offset: int = 0,
) -> list[dict]:
    """
    Return up to *limit* articles starting at row *offset*, optionally
    restricted to *topic*.

    Two SQL statements are issued when a topic is given:
    1. Topic lookup, so an unknown topic (404) can be told apart from a
       known topic that has no articles yet (empty list).
    2. The grouped article SELECT with ORDER BY / LIMIT / OFFSET.
    """
    order_expr = _resolve_order(sort_by, order)

    q = _articles_with_comment_count()
    if topic:
        known = await db.execute(select(Topic.slug).where(Topic.slug == topic))
        if known.scalar_one_or_none() is None:
            raise NotFound(TOPIC_NOT_FOUND_MSG)
        q = q.where(Article.topic == topic)

    # article_id breaks ties so offsets are stable between requests.
    q = q.order_by(order_expr, Article.article_id.desc()).limit(limit).offset(offset)
    result = await db.execute(q)
    return [_article_detail_to_dict(row) for row in result.all()]


async def update_article_votes(db: AsyncSession, article_id: int, inc_votes: int = 0) -> dict:
    """
    Add *inc_votes* (which may be negative) to the article's vote count and
    return the updated article.

    Raises ``NotFound`` when the article does not exist.
    """
    q = (
        update(Article)
        .where(Article.article_id == article_id)
        .values(votes=Article.votes + inc_votes)
        .returning(*Article.__table__.c)
    )
    row = (await db.execute(q)).one_or_none()
    if row is None:
        raise NotFound(ARTICLE_NOT_FOUND_MSG)
    return _article_to_dict(row)
