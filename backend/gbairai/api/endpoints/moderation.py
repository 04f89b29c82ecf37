"""
GBAIRAI - Moderation Endpoints
Test de modération et contrôle avant publication
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from gbairai.api.deps import get_content_moderator, get_publication_gate
from gbairai.core.logger import get_traced_logger
from gbairai.schemas.moderation import ModerationRequest, ModerationResult
from gbairai.schemas.publication import PublicationCheckRequest, PublicationDecision
from gbairai.services.moderation.content_moderation import ContentModerator
from gbairai.services.publication_gate import PublicationGate

logger = get_traced_logger("ModerationAPI")

router = APIRouter()


@router.post(
    "/moderate-content",
    response_model=ModerationResult,
    response_model_exclude_none=True,
)
async def moderate_content(
    request: ModerationRequest,
    moderator: ContentModerator = Depends(get_content_moderator),
):
    """
    Modère un texte (liste noire puis IA)

    Une panne du service IA n'est jamais visible: le contenu est approuvé.
    """
    if not isinstance(request.content, str) or not request.content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Contenu requis"},
        )

    try:
        return await moderator.moderate_content(request.content)
    except Exception:
        logger.exception("POST /api/moderate-content - moderation failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Erreur lors de la modération"},
        )


@router.post(
    "/publication-check",
    response_model=PublicationDecision,
    response_model_exclude_none=True,
    responses={400: {"model": PublicationDecision}},
)
async def check_publication(
    request: PublicationCheckRequest,
    gate: PublicationGate = Depends(get_publication_gate),
):
    """
    Contrôle qu'un gbairai ou un commentaire peut être publié

    200 si le contenu passe, 400 avec le motif de refus sinon.
    """
    if not isinstance(request.content, str) or not request.content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Contenu requis"},
        )

    try:
        decision = await gate.check(request.content, request.kind)
    except Exception:
        logger.exception("POST /api/publication-check - check failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Erreur lors du contrôle"},
        )

    if not decision.allowed:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=decision.model_dump(by_alias=True, exclude_none=True),
        )
    return decision
