"""
PublicationGate - tests unitaires

gbairai: modération puis validation; commentaire: modération seulement.
"""
import pytest
from unittest.mock import MagicMock

from gbairai.schemas.publication import PublicationKind
from gbairai.services.moderation.content_moderation import LOCAL_SUGGESTION, ContentModerator
from gbairai.services.publication_gate import ERROR_INVALID, ERROR_MODERATED, PublicationGate
from gbairai.services.validation.content_validation import (
    ISSUE_TOO_SHORT,
    ContentValidationService,
)


@pytest.fixture
def gate(first_message_policy):
    return PublicationGate(
        moderator=ContentModerator(provider=None, rejection_policy=first_message_policy),
        validator=ContentValidationService(),
    )


class TestGbairaiPublication:

    @pytest.mark.asyncio
    async def test_clean_gbairai_is_allowed(self, gate):
        decision = await gate.check("On est ensemble ce soir", PublicationKind.GBAIRAI)
        assert decision.allowed is True
        assert decision.error is None

    @pytest.mark.asyncio
    async def test_banned_gbairai_is_moderated(self, gate, first_rejection_message):
        decision = await gate.check_gbairai("Espèce de connard")

        assert decision.allowed is False
        assert decision.error == ERROR_MODERATED
        assert decision.message == first_rejection_message
        assert decision.suggestion == LOCAL_SUGGESTION
        assert "connard" in decision.found_words

    @pytest.mark.asyncio
    async def test_short_gbairai_is_invalid(self, gate):
        decision = await gate.check_gbairai("Yo")

        assert decision.allowed is False
        assert decision.error == ERROR_INVALID
        assert decision.issues == [ISSUE_TOO_SHORT]
        assert decision.suggestions == ["Ajoutez plus de détails à votre message"]

    @pytest.mark.asyncio
    async def test_validation_skipped_when_moderation_rejects(self, first_message_policy):
        validator = MagicMock(spec=ContentValidationService)
        gate = PublicationGate(
            moderator=ContentModerator(provider=None, rejection_policy=first_message_policy),
            validator=validator,
        )

        decision = await gate.check_gbairai("Espèce de connard")

        assert decision.error == ERROR_MODERATED
        validator.validate_content.assert_not_called()


class TestCommentPublication:

    @pytest.mark.asyncio
    async def test_short_comment_is_allowed(self, gate):
        """Les commentaires ne passent pas par la validation de forme"""
        decision = await gate.check("Yo", PublicationKind.COMMENT)
        assert decision.allowed is True

    @pytest.mark.asyncio
    async def test_banned_comment_is_moderated(self, gate):
        decision = await gate.check_comment("Quelle merde")
        assert decision.allowed is False
        assert decision.error == ERROR_MODERATED
