from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from news_api.database import get_db
from news_api.schemas import ERROR_RESPONSES, CommentEnvelope, VoteUpdate
from news_api.services import comment_service

router = APIRouter(prefix="/api/comments", tags=["comments"], responses=ERROR_RESPONSES)

@router.patch("/{comment_id}", response_model=CommentEnvelope)
async def patch_comment_votes(
    comment_id: int,
    data: VoteUpdate | None = None,
    db: AsyncSession = Depends(get_db),
):
    inc_votes = data.inc_votes if data else 0
    return {"comment": await comment_service.update_comment_votes(db, comment_id, inc_votes)}

@router.delete("/{comment_id}", status_code=204, response_class=Response)
async def delete_comment(comment_id: int, db: AsyncSession = Depends(get_db)):
    await comment_service.delete_comment(db, comment_id)
