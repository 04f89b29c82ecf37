"""
GBAIRAI - Moderation Schemas
Schémas de la modération de contenu
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from gbairai.schemas.base import CamelModel


class ModerationRequest(BaseModel):
    """Requête de modération"""
    content: Any = Field(None, description="Texte d'un gbairai ou d'un commentaire (chaîne non vide)")


class ModerationResult(CamelModel):
    """
    Résultat d'une modération

    Produit à chaque appel, jamais persisté.
    """
    approved: bool
    reason: Optional[str] = Field(None, description="Message de refus stylisé")
    found_words: Optional[List[str]] = Field(None, description="Mots interdits détectés localement")
    suggestion: Optional[str] = Field(None, description="Conseil pour reformuler")


class AIModerationVerdict(BaseModel):
    """Réponse JSON attendue du modèle de modération"""
    approved: bool
    toxicity_score: Optional[float] = Field(None, ge=0.0, le=1.0)
    reason: Optional[str] = None
    category: Optional[str] = None
