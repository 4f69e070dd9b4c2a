from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from news_api.database import get_db
from news_api.schemas import ERROR_RESPONSES, UserEnvelope, UserListResponse
from news_api.services import user_service

router = APIRouter(prefix="/api/users", tags=["users"], responses=ERROR_RESPONSES)

@router.get("", response_model=UserListResponse)
async def list_users(db: AsyncSession = Depends(get_db)):
    return {"users": await user_service.get_users(db)}

@router.get("/{username}", response_model=UserEnvelope)
async def get_user(username: str, db: AsyncSession = Depends(get_db)):
    return {"user": await user_service.get_user(db, username)}
