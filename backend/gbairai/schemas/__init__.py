"""
GBAIRAI - Pydantic Schemas
Schémas des requêtes et réponses de l'API
"""
from gbairai.schemas.comment import (
    OrganizeRepliesRequest,
    OrganizeRepliesResponse,
    ReplyRecord,
    ThreadedReply,
)
from gbairai.schemas.emotion import (
    EmotionAnalysisRequest,
    EmotionAnalysisResponse,
    EmotionAnalysisResult,
    EmotionDefinitionResponse,
    EmotionSuggestion,
)
from gbairai.schemas.moderation import (
    AIModerationVerdict,
    ModerationRequest,
    ModerationResult,
)
from gbairai.schemas.publication import (
    PublicationCheckRequest,
    PublicationDecision,
    PublicationKind,
)
from gbairai.schemas.validation import ValidationRequest, ValidationResult

__all__ = [
    # Comment
    "OrganizeRepliesRequest",
    "OrganizeRepliesResponse",
    "ReplyRecord",
    "ThreadedReply",
    # Emotion
    "EmotionAnalysisRequest",
    "EmotionAnalysisResponse",
    "EmotionAnalysisResult",
    "EmotionDefinitionResponse",
    "EmotionSuggestion",
    # Moderation
    "AIModerationVerdict",
    "ModerationRequest",
    "ModerationResult",
    # Publication
    "PublicationCheckRequest",
    "PublicationDecision",
    "PublicationKind",
    # Validation
    "ValidationRequest",
    "ValidationResult",
]
