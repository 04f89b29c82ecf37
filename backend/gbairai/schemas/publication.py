"""
GBAIRAI - Publication Schemas
"""
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from gbairai.schemas.base import CamelModel


class PublicationKind(str, Enum):
    """Type de contenu soumis"""
    GBAIRAI = "gbairai"
    COMMENT = "comment"


class PublicationCheckRequest(BaseModel):
    """Contrôle préalable à la publication"""
    content: Any = None
    kind: PublicationKind = PublicationKind.GBAIRAI


class PublicationDecision(CamelModel):
    """
    Décision de publication

    Champs d'erreur identiques à ceux renvoyés lors de la création
    d'un gbairai ou d'un commentaire.
    """
    allowed: bool
    error: Optional[str] = None
    message: Optional[str] = None
    suggestion: Optional[str] = None
    found_words: Optional[List[str]] = None
    issues: Optional[List[str]] = None
    suggestions: Optional[List[str]] = Field(None, description="Corrections proposées par la validation")
