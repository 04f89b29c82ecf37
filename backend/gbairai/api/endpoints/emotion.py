"""
GBAIRAI - Emotion Endpoints
Analyse d'émotion et taxonomie
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from gbairai.api.deps import get_dictionary, get_emotion_service
from gbairai.core.logger import get_traced_logger
from gbairai.schemas.emotion import (
    EmotionAnalysisRequest,
    EmotionAnalysisResponse,
    EmotionDefinitionResponse,
)
from gbairai.services.emotion.dictionary import IvorianDictionary
from gbairai.services.emotion.emotion_analysis import EmotionAnalysisService

logger = get_traced_logger("EmotionAPI")

router = APIRouter()


@router.post("/analyze-emotion", response_model=EmotionAnalysisResponse)
async def analyze_emotion(
    request: EmotionAnalysisRequest,
    service: EmotionAnalysisService = Depends(get_emotion_service),
):
    """
    Détecte l'émotion d'un texte

    Le LLM est utilisé s'il est configuré et suffisamment sûr,
    sinon le dictionnaire ivoirien local.
    """
    if not isinstance(request.text, str) or not request.text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Texte requis"},
        )

    try:
        result = await service.analyze_emotion(request.text, request.language)
    except Exception:
        logger.exception("POST /api/analyze-emotion - analysis failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Erreur lors de l'analyse"},
        )

    logger.info(
        "POST /api/analyze-emotion - completed",
        metadata={
            "emotion": result.emotion,
            "confidence": result.confidence,
            "language": request.language,
        },
    )
    return EmotionAnalysisResponse(success=True, **result.model_dump())


@router.get("/emotions", response_model=List[EmotionDefinitionResponse])
async def list_emotions(
    dictionary: IvorianDictionary = Depends(get_dictionary),
):
    """Les sept émotions du dictionnaire"""
    return [
        EmotionDefinitionResponse(
            name=emotion.name,
            triggers=list(emotion.triggers),
            nouchi_expressions=list(emotion.nouchi_expressions),
            weight=emotion.weight,
        )
        for emotion in dictionary.get_emotions()
    ]
