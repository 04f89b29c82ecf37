"""
GBAIRAI - LLM Manager
Sélection du fournisseur et du modèle selon l'usage (modération, émotion)
"""
from typing import Any, Dict, Optional

from gbairai.core.config import Settings
from gbairai.core.llm_provider import (
    LLMProvider,
    LLMProviderConfig,
    LLMUsageRole,
    ProviderType,
)


class LLMManager:
    """
    Gestionnaire des fournisseurs LLM

    Retourne le fournisseur adapté à chaque usage (LLMUsageRole).
    Les instances sont mises en cache par usage.
    Construit explicitement à partir d'un objet Settings.
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._providers: Dict[LLMUsageRole, LLMProvider] = {}

    def _create_provider(self, config: Dict[str, Any]) -> LLMProvider:
        """Crée un fournisseur à partir de sa configuration"""
        provider_type = config.get("provider", ProviderType.OPENROUTER.value).lower()
        model = config.get("model", "openai/gpt-4o-mini")
        temperature = config.get("temperature", 0.1)
        max_tokens = config.get("max_tokens")

        provider_config = LLMProviderConfig(
            provider=ProviderType(provider_type),
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
        )

        from gbairai.core.providers.openai import OpenAIProvider

        if provider_config.provider == ProviderType.OPENROUTER:
            return OpenAIProvider(
                config=provider_config,
                api_key=self._settings.openrouter_api_key,
                base_url=self._settings.openrouter_base_url,
                timeout=self._settings.llm_timeout_seconds,
                default_headers={
                    "HTTP-Referer": self._settings.openrouter_referer,
                    "X-Title": self._settings.openrouter_title,
                },
            )
        if provider_config.provider == ProviderType.OPENAI:
            return OpenAIProvider(
                config=provider_config,
                api_key=self._settings.openrouter_api_key,
                timeout=self._settings.llm_timeout_seconds,
            )
        raise ValueError(f"Unknown provider type: {provider_type}")

    def get_client(self, role: LLMUsageRole) -> LLMProvider:
        """
        Fournisseur LLM pour un usage

        Chaque usage a son propre fournisseur: deux usages sur le même
        modèle gardent leurs propres temperature et max_tokens.

        Args:
            role: LLMUsageRole (MODERATION, EMOTION)

        Returns:
            LLMProvider configuré pour cet usage
        """
        if role not in self._providers:
            config = self._settings.get_llm_config(role.value)
            self._providers[role] = self._create_provider(config)

        return self._providers[role]

    def get_optional_client(self, role: LLMUsageRole) -> Optional[LLMProvider]:
        """
        Fournisseur LLM, ou None si aucune clé API n'est configurée
        ou si la configuration est invalide
        """
        if not self._settings.is_llm_available():
            return None
        try:
            return self.get_client(role)
        except ValueError:
            return None
