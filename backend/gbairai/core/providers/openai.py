"""
GBAIRAI - OpenAI-compatible Provider
Fournisseur LLM pour toute API compatible OpenAI (OpenRouter, OpenAI)
"""
import json
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI

from gbairai.core.llm_provider import (
    LLMProvider,
    LLMProviderConfig,
    LLMResponse,
    ProviderType,
    extract_json_from_text,
)


class OpenAIProvider(LLMProvider):
    """
    Fournisseur basé sur le client AsyncOpenAI

    Caractéristiques:
    - Appels asynchrones via AsyncOpenAI
    - base_url configurable: le même client sert OpenRouter et OpenAI
    - Mode JSON pour les modèles qui le supportent
    - Aucune relance automatique (max_retries=0)
    """

    def __init__(
        self,
        config: LLMProviderConfig,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        default_headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(config)
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._default_headers = default_headers or {}
        self._client: Optional[AsyncOpenAI] = None

    @property
    def provider_type(self) -> ProviderType:
        return self.config.provider

    async def initialize(self) -> None:
        """Initialise le client"""
        if self._initialized:
            return

        if not self._api_key:
            raise ValueError(f"{self.provider_type.value} API key is not configured")

        self._client = AsyncOpenAI(
            api_key=self._api_key,
            base_url=self._base_url,
            timeout=self._timeout,
            max_retries=0,
            default_headers=self._default_headers,
        )
        self._initialized = True

    @property
    def client(self) -> AsyncOpenAI:
        """Client initialisé"""
        if self._client is None:
            raise RuntimeError("Provider not initialized. Call initialize() first.")
        return self._client

    def _build_kwargs(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float],
        max_tokens: Optional[int],
    ) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "model": self.config.model,
            "messages": messages,
        }

        # Les modèles de raisonnement n'acceptent pas la température
        if not self.is_reasoning_model():
            kwargs["temperature"] = temperature if temperature is not None else self.config.temperature

        if max_tokens:
            kwargs["max_tokens"] = max_tokens
        elif self.config.max_tokens:
            kwargs["max_tokens"] = self.config.max_tokens

        return kwargs

    async def generate_text(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """Génération de texte"""
        await self.initialize()

        kwargs = self._build_kwargs(messages, temperature, max_tokens)
        response = await self.client.chat.completions.create(**kwargs)
        content = response.choices[0].message.content or ""

        usage = None
        if response.usage:
            usage = {
                "prompt_tokens": response.usage.prompt_tokens,
                "completion_tokens": response.usage.completion_tokens,
                "total_tokens": response.usage.total_tokens,
            }

        return LLMResponse(
            content=content,
            model=self.config.model,
            provider=self.provider_type,
            usage=usage,
        )

    async def generate_json(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Génération JSON"""
        await self.initialize()

        # copie: le prompt système peut être complété
        kwargs = self._build_kwargs([dict(m) for m in messages], temperature, max_tokens)

        if self.is_reasoning_model():
            # Pas de mode JSON: la consigne passe par le prompt système
            for msg in kwargs["messages"]:
                if msg.get("role") == "system":
                    msg["content"] += "\n\nRéponds obligatoirement avec un JSON valide."
                    break
        else:
            kwargs["response_format"] = {"type": "json_object"}

        response = await self.client.chat.completions.create(**kwargs)
        content = response.choices[0].message.content or ""

        try:
            result = json.loads(content)
            if isinstance(result, dict):
                return result
        except json.JSONDecodeError:
            pass

        result = extract_json_from_text(content)
        if result is None:
            raise ValueError(f"Failed to extract JSON from response: {content[:200]}...")
        return result
