"""
GBAIRAI - Validation Schemas
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from gbairai.schemas.base import CamelModel


class ValidationRequest(BaseModel):
    """Requête de validation"""
    content: Any = None


class ValidationResult(CamelModel):
    """Résultat des heuristiques de validation"""
    is_valid: bool
    issues: List[str] = Field(default_factory=list)
    confidence: float = Field(ge=0.0, le=1.0)
    suggested_changes: List[str] = Field(default_factory=list)
