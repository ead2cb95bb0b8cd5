from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ideabox.api.deps import get_db, get_current_user
from ideabox.schemas.comment import CommentCreate, CommentOut
from ideabox.services.comment import CommentService

router = APIRouter()


@router.post("", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
async def create_comment(
    idea_id: uuid.UUID,
    payload: CommentCreate,
    db: AsyncSession = Depends(get_db),
    user=Depends(get_current_user),
):
    comment = await CommentService(db).create(user.id, idea_id, payload.text, payload.name)
    await db.commit()
    return CommentOut.from_model(comment)


@router.get("", response_model=list[CommentOut])
async def list_comments(
    idea_id: uuid.UUID,
    page: int = 0,
    limit: int = 0,
    db: AsyncSession = Depends(get_db),
    user=Depends(get_current_user),
):
    comments = await CommentService(db).list_for_idea(user.id, idea_id, page, limit)
    return [CommentOut.from_model(c) for c in comments]


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    idea_id: uuid.UUID,
    comment_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    user=Depends(get_current_user),
):
    await CommentService(db).delete(user.id, idea_id, comment_id)
    await db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
