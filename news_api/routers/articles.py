from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from news_api.database import get_db
from news_api.dependencies import PageParams
from news_api.schemas import (
    ArticleEnvelope,
    ArticleListResponse,
    CommentCreate,
    CommentEnvelope,
    CommentListResponse,
    ERROR_RESPONSES,
    UpdatedArticleEnvelope,
    VoteUpdate,
)
from news_api.services import article_service, comment_service

router = APIRouter(prefix="/api/articles", tags=["articles"], responses=ERROR_RESPONSES)

@router.get("", response_model=ArticleListResponse)
async def list_articles(
    topic: str | None = None,
    sort_by: str = "created_at",
    order: str = "desc",
    pagination: PageParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    articles = await article_service.get_articles(
        db, topic, sort_by, order, pagination.limit, pagination.offset
    )
    return {"articles": articles}

@router.get("/{article_id}", response_model=ArticleEnvelope)
async def get_article(article_id: int, db: AsyncSession = Depends(get_db)):
    return {"article": await article_service.get_article(db, article_id)}

@router.patch("/{article_id}", response_model=UpdatedArticleEnvelope)
async def patch_article_votes(
    article_id: int,
    data: VoteUpdate | None = None,
    db: AsyncSession = Depends(get_db),
):
    inc_votes = data.inc_votes if data else 0
    return {"article": await article_service.update_article_votes(db, article_id, inc_votes)}

@router.get("/{article_id}/comments", response_model=CommentListResponse)
async def list_comments(
    article_id: int,
    pagination: PageParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    comments = await comment_service.get_comments_for_article(
        db, article_id, pagination.limit, pagination.offset
    )
    return {"comments": comments}

@router.post("/{article_id}/comments", status_code=201, response_model=CommentEnvelope)
async def add_comment(article_id: int, data: CommentCreate, db: AsyncSession = Depends(get_db)):
    return {"comment": await comment_service.add_comment(db, article_id, data)}
