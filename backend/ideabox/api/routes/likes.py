from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.api.deps import get_db, get_current_user
from ideabox.schemas.like import HasLikedOut
from ideabox.services.like import LikeService

router = APIRouter()


@router.post("/like", status_code=status.HTTP_201_CREATED)
async def like_idea(idea_id: uuid.UUID, db: AsyncSession = Depends(get_db), user=Depends(get_current_user)):
    await LikeService(db).like(user.id, idea_id)
    await db.commit()
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete("/unlike", status_code=status.HTTP_204_NO_CONTENT)
async def unlike_idea(idea_id: uuid.UUID, db: AsyncSession = Depends(get_db), user=Depends(get_current_user)):
    await LikeService(db).unlike(user.id, idea_id)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/liked", response_model=HasLikedOut)
async def has_liked(idea_id: uuid.UUID, db: AsyncSession = Depends(get_db), user=Depends(get_current_user)):
    return HasLikedOut(has_liked=await LikeService(db).has_liked(user.id, idea_id))
