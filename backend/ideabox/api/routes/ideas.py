from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.api.deps import get_db, get_current_user
from ideabox.schemas.idea import IdeaCreate, IdeaOut
from ideabox.services.idea import IdeaService

router = APIRouter()


@router.post("/ideas", response_model=IdeaOut, status_code=status.HTTP_201_CREATED)
async def create_idea(payload: IdeaCreate, db: AsyncSession = Depends(get_db), user=Depends(get_current_user)):
    idea = await IdeaService(db).create(
        user.id,
        payload.coffee_shop_id,
        payload.title,
        payload.description,
        category_id=payload.category_id,
    )
    await db.commit()
    return idea


@router.get("/ideas/{idea_id}", response_model=IdeaOut)
async def get_idea(idea_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return await IdeaService(db).get(idea_id)


@router.get("/coffee-shops/{shop_id}/ideas", response_model=list[IdeaOut])
async def list_ideas(shop_id: uuid.UUID, page: int = 0, limit: int = 0, db: AsyncSession = Depends(get_db)):
    return await IdeaService(db).list_for_shop(shop_id, page, limit)


@router.delete("/ideas/{idea_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_idea(idea_id: uuid.UUID, db: AsyncSession = Depends(get_db), user=Depends(get_current_user)):
    await IdeaService(db).delete(user.id, idea_id)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
