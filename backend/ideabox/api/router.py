from __future__ import annotations

from fastapi import APIRouter

from ideabox.api.routes import health, auth, coffee_shops, categories, reward_types, ideas, comments, likes, workers

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(coffee_shops.router, prefix="/coffee-shops", tags=["coffee-shops"])
router.include_router(categories.router, prefix="/coffee-shops/{shop_id}/categories", tags=["categories"])
router.include_router(reward_types.router, tags=["rewards"])
router.include_router(ideas.router, tags=["ideas"])
router.include_router(comments.router, prefix="/ideas/{idea_id}/comments", tags=["comments"])
router.include_router(likes.router, prefix="/ideas/{idea_id}", tags=["likes"])
router.include_router(workers.router, tags=["workers"])
