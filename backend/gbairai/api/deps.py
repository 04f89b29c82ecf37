"""
GBAIRAI - API Dependencies
Construction des services injectés dans les endpoints

Chaque service est construit une fois par processus à partir de la
configuration, puis réutilisé. Les tests remplacent ces fonctions via
app.dependency_overrides.
"""
from functools import lru_cache

from fastapi import Depends

from gbairai.core.config import get_settings
from gbairai.core.llm import LLMManager
from gbairai.core.llm_provider import LLMUsageRole
from gbairai.services.emotion.dictionary import IvorianDictionary
from gbairai.services.emotion.emotion_analysis import EmotionAnalysisService
from gbairai.services.moderation.blacklist import default_blacklist
from gbairai.services.moderation.content_moderation import ContentModerator
from gbairai.services.moderation.rejection_policy import RejectionMessagePolicy
from gbairai.services.publication_gate import PublicationGate
from gbairai.services.validation.content_validation import ContentValidationService


@lru_cache
def get_llm_manager() -> LLMManager:
    return LLMManager(get_settings())


@lru_cache
def get_dictionary() -> IvorianDictionary:
    return IvorianDictionary()


@lru_cache
def get_content_moderator() -> ContentModerator:
    settings = get_settings()
    return ContentModerator(
        provider=get_llm_manager().get_optional_client(LLMUsageRole.MODERATION),
        blacklist=default_blacklist,
        rejection_policy=RejectionMessagePolicy(),
        fail_open=settings.moderation_fail_open,
    )


@lru_cache
def get_emotion_service() -> EmotionAnalysisService:
    settings = get_settings()
    return EmotionAnalysisService(
        provider=get_llm_manager().get_optional_client(LLMUsageRole.EMOTION),
        dictionary=get_dictionary(),
        confidence_threshold=settings.emotion_confidence_threshold,
    )


@lru_cache
def get_validation_service() -> ContentValidationService:
    return ContentValidationService()


def get_publication_gate(
    moderator: ContentModerator = Depends(get_content_moderator),
    validator: ContentValidationService = Depends(get_validation_service),
) -> PublicationGate:
    return PublicationGate(moderator=moderator, validator=validator)
