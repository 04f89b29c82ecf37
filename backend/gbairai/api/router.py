"""
GBAIRAI - API Router
Regroupe tous les endpoints
"""
from fastapi import APIRouter

from gbairai.api.endpoints import comments, emotion, moderation, validation

api_router = APIRouter()

api_router.include_router(
    moderation.router,
    tags=["Modération"],
)

api_router.include_router(
    validation.router,
    tags=["Validation"],
)

api_router.include_router(
    emotion.router,
    tags=["Émotions"],
)

api_router.include_router(
    comments.router,
    prefix="/comments",
    tags=["Commentaires"],
)
