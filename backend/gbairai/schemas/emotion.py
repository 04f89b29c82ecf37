"""
GBAIRAI - Emotion Schemas
Schémas de l'analyse d'émotion
"""
from typing import Any, List

from pydantic import BaseModel, Field, StrictStr

from gbairai.schemas.base import CamelModel


class EmotionSuggestion(CamelModel):
    """Émotion candidate avec sa justification"""
    emotion: str
    confidence: float = Field(ge=0.0, le=1.0)
    reasoning: str = ""


class EmotionAnalysisResult(CamelModel):
    """Résultat d'analyse, retourné directement à l'appelant"""
    emotion: str
    confidence: float = Field(ge=0.0, le=1.0)
    local_terms: List[str] = Field(default_factory=list, description="Termes nouchi/français détectés")
    suggestions: List[EmotionSuggestion] = Field(
        default_factory=list,
        description="Suggestions triées par confiance décroissante",
    )


class EmotionAnalysisRequest(BaseModel):
    """Requête d'analyse"""
    text: Any = None
    language: StrictStr = "fr-ci"


class EmotionAnalysisResponse(EmotionAnalysisResult):
    """Réponse HTTP de l'analyse"""
    success: bool = True


class EmotionDefinitionResponse(CamelModel):
    """Définition publique d'une émotion du dictionnaire"""
    name: str
    triggers: List[str]
    nouchi_expressions: List[str]
    weight: float
