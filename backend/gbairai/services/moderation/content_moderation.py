"""
GBAIRAI - Content Moderation Pipeline
Modération en deux étapes: liste noire locale, puis jugement par LLM

1. Étape locale: filtre de mots interdits. Un refus court-circuite l'appel distant.
2. Étape distante: le LLM juge la toxicité en tolérant le nouchi respectueux.

Sans fournisseur configuré, seule l'étape locale s'applique.
Panne du LLM (erreur réseau, délai dépassé, réponse illisible): le contenu est
approuvé (fail-open) sauf si fail_open=False. Aucune relance.
"""
from typing import Optional

from pydantic import ValidationError

from gbairai.core.llm_provider import LLMProvider
from gbairai.core.logger import get_traced_logger, trace_execution
from gbairai.schemas.moderation import AIModerationVerdict, ModerationResult
from gbairai.services.moderation.blacklist import BlacklistFilter, default_blacklist
from gbairai.services.moderation.rejection_policy import RejectionMessagePolicy

logger = get_traced_logger("Moderation")

LOCAL_SUGGESTION = "Utilise des mots plus respectueux pour exprimer ton gbairai"
AI_DEFAULT_SUGGESTION = "Contenu inapproprié détecté par l'IA"
UNAVAILABLE_SUGGESTION = "La modération est indisponible, réessaie plus tard"

MODERATION_PROMPT = """Tu es une IA de modération pour Gbairai, un réseau social ivoirien. Ta mission est d'analyser le contenu des messages et de déterminer s'ils respectent les règles de bonne conduite.

RÈGLES DE MODÉRATION:
- Bloque tout contenu offensant, vulgaire, haineux ou irrespectueux
- Bloque les contenus sexuels explicites, violents ou liés aux drogues
- Bloque les discriminations, le harcèlement et les menaces
- Respecte la culture ivoirienne et l'usage du nouchi/argot local quand c'est respectueux
- Sois tolérant avec l'humour ivoirien tant qu'il reste respectueux

RÉPONSE ATTENDUE:
Réponds UNIQUEMENT par un JSON avec cette structure:
{
  "approved": boolean,
  "toxicity_score": number (0-1),
  "reason": "explication courte si refusé",
  "category": "type de problème si refusé"
}

Si le message est acceptable, réponds: {"approved": true, "toxicity_score": 0.1}
Si le message est problématique, donne une raison claire et un score de toxicité."""


class ContentModerator:
    """
    Content Moderator (pipeline de modération)

    Fonctions:
    - check_local_moderation: liste noire, pure et synchrone
    - check_ai_moderation: jugement LLM, ne lève jamais d'exception
    - moderate_content: enchaîne les deux étapes
    """

    def __init__(
        self,
        provider: Optional[LLMProvider] = None,
        blacklist: BlacklistFilter = default_blacklist,
        rejection_policy: Optional[RejectionMessagePolicy] = None,
        fail_open: bool = True,
    ):
        self._provider = provider
        self._blacklist = blacklist
        self._rejection_policy = rejection_policy or RejectionMessagePolicy()
        self._fail_open = fail_open

    @property
    def fail_open(self) -> bool:
        return self._fail_open

    def check_local_moderation(self, content: str) -> ModerationResult:
        """Modération locale par liste noire"""
        found_words = self._blacklist.get_found_banned_words(content)

        if found_words:
            return ModerationResult(
                approved=False,
                reason=self._rejection_policy.pick(),
                found_words=found_words,
                suggestion=LOCAL_SUGGESTION,
            )

        return ModerationResult(approved=True)

    async def check_ai_moderation(self, content: str) -> ModerationResult:
        """Modération par LLM; toute panne est convertie selon la politique fail-open"""
        if self._provider is None:
            # modération locale uniquement
            logger.debug("AI moderation skipped, no provider configured")
            return ModerationResult(approved=True)

        try:
            await self._provider.initialize()
            result = await self._provider.generate_json(
                messages=[
                    {"role": "system", "content": MODERATION_PROMPT},
                    {"role": "user", "content": f'Analyse ce message: "{content}"'},
                ],
                temperature=0.1,
            )
            verdict = AIModerationVerdict.model_validate(result)
        except (ValidationError, ValueError) as e:
            logger.warning(
                "AI moderation response unparseable",
                metadata={"error": str(e)},
            )
            return self._on_unavailable(str(e))
        except Exception as e:
            logger.warning(
                "AI moderation call failed",
                metadata={"error": str(e), "error_type": type(e).__name__},
            )
            return self._on_unavailable(str(e))

        if not verdict.approved:
            logger.info(
                "content rejected by AI moderation",
                metadata={
                    "toxicity_score": verdict.toxicity_score,
                    "category": verdict.category,
                },
            )
            return ModerationResult(
                approved=False,
                reason=self._rejection_policy.pick(),
                suggestion=verdict.reason or AI_DEFAULT_SUGGESTION,
            )

        return ModerationResult(approved=True)

    @trace_execution("Moderation", "moderate_content")
    async def moderate_content(self, content: str) -> ModerationResult:
        """
        Modération complète

        Returns:
            ModerationResult; en cas de refus local, found_words liste les mots détectés
        """
        local_result = self.check_local_moderation(content)
        if not local_result.approved:
            logger.info(
                "content rejected by blacklist",
                metadata={"found_words": local_result.found_words},
            )
            return local_result

        return await self.check_ai_moderation(content)

    def _on_unavailable(self, error: str) -> ModerationResult:
        if self._fail_open:
            return ModerationResult(approved=True)

        logger.warning(
            "AI moderation unavailable, rejecting (fail-closed)",
            metadata={"error": error},
        )
        return ModerationResult(
            approved=False,
            reason=self._rejection_policy.pick(),
            suggestion=UNAVAILABLE_SUGGESTION,
        )
