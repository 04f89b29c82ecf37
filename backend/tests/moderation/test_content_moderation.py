"""
ContentModerator - tests unitaires

Stratégie:
1. Étape locale: refus par liste noire sans appel au LLM
2. Étape IA: MockLLMProvider avec réponses préenregistrées
3. Pannes du LLM: fail-open par défaut, fail-closed sur demande
"""
import pytest
from unittest.mock import AsyncMock

from gbairai.services.moderation.content_moderation import (
    AI_DEFAULT_SUGGESTION,
    LOCAL_SUGGESTION,
    UNAVAILABLE_SUGGESTION,
    ContentModerator,
)
from gbairai.services.moderation.rejection_policy import DEFAULT_REJECTION_MESSAGES

CLEAN_TEXT = "On est ensemble ce soir"
BANNED_TEXT = "Espèce de connard"


# =============================================================================
# Étape locale (liste noire)
# =============================================================================

class TestLocalModeration:
    """Modération locale, sans LLM"""

    def test_clean_text_is_approved(self):
        moderator = ContentModerator()
        result = moderator.check_local_moderation(CLEAN_TEXT)
        assert result.approved is True
        assert result.found_words is None

    def test_banned_text_is_rejected(self, first_message_policy, first_rejection_message):
        moderator = ContentModerator(rejection_policy=first_message_policy)
        result = moderator.check_local_moderation(BANNED_TEXT)

        assert result.approved is False
        assert result.found_words == ["connard", "con"]
        assert result.reason == first_rejection_message
        assert result.suggestion == LOCAL_SUGGESTION

    def test_reason_comes_from_default_messages(self):
        result = ContentModerator().check_local_moderation(BANNED_TEXT)
        assert result.reason in DEFAULT_REJECTION_MESSAGES


# =============================================================================
# Pipeline complet avec MockLLMProvider
# =============================================================================

class TestModeratePipeline:
    """moderate_content: liste noire puis IA"""

    @pytest.mark.asyncio
    async def test_local_rejection_skips_ai(self, make_mock_provider):
        provider = make_mock_provider("approved")
        moderator = ContentModerator(provider=provider)

        result = await moderator.moderate_content(BANNED_TEXT)

        assert result.approved is False
        assert "connard" in result.found_words
        assert provider.call_count == 0

    @pytest.mark.asyncio
    async def test_clean_text_approved_by_ai(self, make_mock_provider):
        provider = make_mock_provider("approved")
        moderator = ContentModerator(provider=provider)

        result = await moderator.moderate_content(CLEAN_TEXT)

        assert result.approved is True
        assert provider.call_count == 1
        assert provider.last_messages[0]["role"] == "system"
        assert provider.last_messages[1]["content"] == f'Analyse ce message: "{CLEAN_TEXT}"'

    @pytest.mark.asyncio
    async def test_ai_rejection(self, make_mock_provider, first_message_policy, first_rejection_message):
        moderator = ContentModerator(
            provider=make_mock_provider("rejected"),
            rejection_policy=first_message_policy,
        )

        result = await moderator.moderate_content(CLEAN_TEXT)

        assert result.approved is False
        assert result.reason == first_rejection_message
        assert result.suggestion == "Propos insultants envers un autre utilisateur"
        assert result.found_words is None

    @pytest.mark.asyncio
    async def test_ai_rejection_without_reason_uses_default_suggestion(self, make_mock_provider):
        moderator = ContentModerator(provider=make_mock_provider("rejected_no_reason"))

        result = await moderator.moderate_content(CLEAN_TEXT)

        assert result.approved is False
        assert result.suggestion == AI_DEFAULT_SUGGESTION

    @pytest.mark.asyncio
    async def test_threat_is_rejected_without_provider(self):
        result = await ContentModerator(provider=None).moderate_content("je vais te tuer")
        assert result.approved is False
        assert "tuer" in result.found_words

    @pytest.mark.asyncio
    async def test_friendly_greeting_is_approved_without_provider(self):
        result = await ContentModerator(provider=None).moderate_content("Salut, comment ça va aujourd'hui ?")
        assert result.approved is True

    @pytest.mark.asyncio
    async def test_no_provider_means_local_only(self):
        """Sans fournisseur, même en fail-closed, seul le filtre local s'applique"""
        moderator = ContentModerator(provider=None, fail_open=False)
        result = await moderator.moderate_content(CLEAN_TEXT)
        assert result.approved is True

    @pytest.mark.asyncio
    async def test_repeated_calls_give_same_decision(self, make_mock_provider, first_message_policy):
        moderator = ContentModerator(
            provider=make_mock_provider("rejected"),
            rejection_policy=first_message_policy,
        )
        first = await moderator.moderate_content(CLEAN_TEXT)
        second = await moderator.moderate_content(CLEAN_TEXT)
        assert first == second


# =============================================================================
# Pannes du service IA
# =============================================================================

class TestAIUnavailable:
    """Erreur réseau, délai dépassé ou réponse illisible"""

    @pytest.mark.asyncio
    async def test_exception_fails_open(self, make_mock_provider):
        provider = make_mock_provider("approved")
        provider.generate_json = AsyncMock(side_effect=RuntimeError("connection reset"))
        moderator = ContentModerator(provider=provider)

        result = await moderator.moderate_content(CLEAN_TEXT)

        assert result.approved is True

    @pytest.mark.asyncio
    async def test_timeout_fails_open(self, make_mock_provider):
        provider = make_mock_provider("approved")
        provider.generate_json = AsyncMock(side_effect=TimeoutError("LLM timeout"))
        moderator = ContentModerator(provider=provider)

        result = await moderator.check_ai_moderation(CLEAN_TEXT)

        assert result.approved is True

    @pytest.mark.asyncio
    async def test_malformed_response_fails_open(self, make_mock_provider):
        moderator = ContentModerator(provider=make_mock_provider("malformed"))
        result = await moderator.moderate_content(CLEAN_TEXT)
        assert result.approved is True

    @pytest.mark.asyncio
    async def test_unparseable_json_fails_open(self, make_mock_provider):
        provider = make_mock_provider("approved")
        provider.generate_json = AsyncMock(side_effect=ValueError("Failed to extract JSON"))
        moderator = ContentModerator(provider=provider)

        result = await moderator.moderate_content(CLEAN_TEXT)

        assert result.approved is True

    @pytest.mark.asyncio
    async def test_exception_fails_closed_when_configured(self, make_mock_provider, first_message_policy):
        provider = make_mock_provider("approved")
        provider.generate_json = AsyncMock(side_effect=RuntimeError("connection reset"))
        moderator = ContentModerator(
            provider=provider,
            rejection_policy=first_message_policy,
            fail_open=False,
        )

        result = await moderator.moderate_content(CLEAN_TEXT)

        assert result.approved is False
        assert result.suggestion == UNAVAILABLE_SUGGESTION
        assert moderator.fail_open is False
