"""
GBAIRAI backend - fixtures de test communes

Principes:
- Le fournisseur LLM est simulé: aucun appel réseau vers OpenRouter/OpenAI
- Les réponses préenregistrées couvrent les cas attendus de chaque service
- Les messages de refus sont rendus déterministes (premier message)
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union

import pytest

from gbairai.core.llm_provider import (
    LLMProvider,
    LLMProviderConfig,
    LLMResponse,
    ProviderType,
)
from gbairai.services.moderation.rejection_policy import (
    DEFAULT_REJECTION_MESSAGES,
    RejectionMessagePolicy,
)


# =============================================================================
# MockLLMProvider
# LLMProvider de test: renvoie un JSON préenregistré sans appel externe
# =============================================================================

class MockLLMProvider(LLMProvider):
    """
    LLMProvider de test.

    - `preset_json`: objet renvoyé par generate_json()
    - `call_count`: nombre d'appels (vérifiable dans les tests)
    - `last_messages`: derniers messages reçus
    """

    def __init__(self, preset_json: Optional[Dict[str, Any]] = None):
        config = LLMProviderConfig(
            provider=ProviderType.OPENROUTER,
            model="mock-gpt-test",
        )
        super().__init__(config)
        self._preset_json: Dict[str, Any] = preset_json or {}
        self.call_count: int = 0
        self.last_messages: List[Dict[str, str]] = []

    @property
    def provider_type(self) -> ProviderType:
        return ProviderType.OPENROUTER

    async def initialize(self) -> None:
        """Rien à initialiser"""
        self._initialized = True

    async def generate_text(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        self.call_count += 1
        self.last_messages = messages
        return LLMResponse(
            content=json.dumps(self._preset_json, ensure_ascii=False),
            model="mock-gpt-test",
            provider=ProviderType.OPENROUTER,
        )

    async def generate_json(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> Dict[str, Any]:
        self.call_count += 1
        self.last_messages = messages
        return self._preset_json


# =============================================================================
# Réponses préenregistrées
# Structure JSON que chaque service attend du LLM
# =============================================================================

# --- Modération ---
MODERATION_PRESETS: Dict[str, Dict[str, Any]] = {
    "approved": {
        "approved": True,
        "toxicity_score": 0.1,
    },
    "rejected": {
        "approved": False,
        "toxicity_score": 0.92,
        "reason": "Propos insultants envers un autre utilisateur",
        "category": "harcèlement",
    },
    "rejected_no_reason": {
        "approved": False,
        "toxicity_score": 0.8,
    },
    # champ approved absent: réponse inexploitable
    "malformed": {
        "toxicity_score": 0.4,
    },
}

# --- Émotion ---
EMOTION_PRESETS: Dict[str, Dict[str, Any]] = {
    "confident": {
        "emotion": "enjaillé",
        "confidence": 0.9,
        "reasoning": "Expression ivoirienne de joie",
        "localTerms": ["même pas fatigue"],
        "suggestions": [
            {"emotion": "Légé", "confidence": 0.3, "reasoning": "Ton posé"},
            {"emotion": "enjaillé", "confidence": 0.9, "reasoning": "Présence de termes positifs"},
        ],
    },
    "low_confidence": {
        "emotion": "goumin",
        "confidence": 0.4,
        "localTerms": [],
        "suggestions": [],
    },
    "at_threshold": {
        "emotion": "goumin",
        "confidence": 0.6,
    },
    "generic_label": {
        "emotion": "Joie",
        "confidence": 0.8,
        "localTerms": ["c'est sweet"],
    },
    "unknown_label": {
        "emotion": "nostalgie",
        "confidence": 0.75,
    },
    "no_emotion": {
        "confidence": 0.9,
    },
}


# =============================================================================
# Fixtures: fabrique de MockLLMProvider
# =============================================================================

@pytest.fixture
def make_mock_provider():
    """
    Fabrique de MockLLMProvider à partir d'une clé de réponse
    préenregistrée ou d'un dict.

    Exemple:
        moderator = ContentModerator(provider=make_mock_provider("rejected", "moderation"))
    """
    preset_map = {
        "moderation": MODERATION_PRESETS,
        "emotion": EMOTION_PRESETS,
    }

    def _factory(
        preset: Union[str, Dict[str, Any]],
        preset_type: str = "moderation",
    ) -> MockLLMProvider:
        if isinstance(preset, dict):
            return MockLLMProvider(preset_json=preset)
        presets = preset_map.get(preset_type, {})
        return MockLLMProvider(preset_json=presets.get(preset, {}))

    return _factory


@pytest.fixture
def first_message_policy():
    """Politique de refus renvoyant toujours le premier message"""
    return RejectionMessagePolicy(selector=lambda messages: messages[0])


@pytest.fixture
def first_rejection_message():
    return DEFAULT_REJECTION_MESSAGES[0]


# =============================================================================
# Fixture: client HTTP
# Services sans LLM, injectés via app.dependency_overrides
# =============================================================================

@pytest.fixture
def client(first_message_policy):
    """TestClient sur l'application, modération et émotion en mode local"""
    from fastapi.testclient import TestClient

    from gbairai.api.deps import get_content_moderator, get_emotion_service
    from gbairai.main import app
    from gbairai.services.emotion.emotion_analysis import EmotionAnalysisService
    from gbairai.services.moderation.content_moderation import ContentModerator

    moderator = ContentModerator(provider=None, rejection_policy=first_message_policy)
    emotion_service = EmotionAnalysisService(provider=None)

    app.dependency_overrides[get_content_moderator] = lambda: moderator
    app.dependency_overrides[get_emotion_service] = lambda: emotion_service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
