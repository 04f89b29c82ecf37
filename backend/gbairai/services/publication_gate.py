"""
GBAIRAI - Publication Gate
Contrôles exécutés avant la création d'un gbairai ou d'un commentaire

- gbairai: modération, puis validation de forme
- commentaire: modération seulement
"""
from gbairai.core.logger import get_traced_logger
from gbairai.schemas.publication import PublicationDecision, PublicationKind
from gbairai.services.moderation.content_moderation import ContentModerator
from gbairai.services.validation.content_validation import ContentValidationService

logger = get_traced_logger("PublicationGate")

ERROR_MODERATED = "Contenu modéré"
ERROR_INVALID = "Contenu invalide"


class PublicationGate:
    """Enchaîne modération et validation; le premier refus l'emporte"""

    def __init__(
        self,
        moderator: ContentModerator,
        validator: ContentValidationService,
    ):
        self._moderator = moderator
        self._validator = validator

    async def check(self, content: str, kind: PublicationKind) -> PublicationDecision:
        if kind == PublicationKind.COMMENT:
            return await self.check_comment(content)
        return await self.check_gbairai(content)

    async def check_gbairai(self, content: str) -> PublicationDecision:
        decision = await self._moderate(content)
        if not decision.allowed:
            return decision

        validation = self._validator.validate_content(content)
        if not validation.is_valid:
            logger.info(
                "gbairai rejected by validation",
                metadata={"issues": validation.issues, "confidence": validation.confidence},
            )
            return PublicationDecision(
                allowed=False,
                error=ERROR_INVALID,
                issues=validation.issues,
                suggestions=validation.suggested_changes,
            )

        return PublicationDecision(allowed=True)

    async def check_comment(self, content: str) -> PublicationDecision:
        return await self._moderate(content)

    async def _moderate(self, content: str) -> PublicationDecision:
        result = await self._moderator.moderate_content(content)
        if result.approved:
            return PublicationDecision(allowed=True)
        return PublicationDecision(
            allowed=False,
            error=ERROR_MODERATED,
            message=result.reason,
            suggestion=result.suggestion,
            found_words=result.found_words,
        )
