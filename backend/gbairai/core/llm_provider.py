"""
GBAIRAI - LLM Provider Abstract Interface
Interface abstraite commune aux fournisseurs de modèles
"""
import json
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel


class LLMUsageRole(str, Enum):
    """Usages du LLM dans l'application"""
    MODERATION = "moderation"  # Jugement de toxicité d'un gbairai ou commentaire
    EMOTION = "emotion"        # Classification de l'émotion d'un texte


class ProviderType(str, Enum):
    """Types de fournisseurs supportés"""
    OPENAI = "openai"
    OPENROUTER = "openrouter"


class LLMProviderConfig(BaseModel):
    """Configuration d'un fournisseur"""
    provider: ProviderType
    model: str
    temperature: Optional[float] = 0.1
    max_tokens: Optional[int] = None


class LLMResponse(BaseModel):
    """Réponse d'un LLM"""
    content: str
    model: str
    provider: ProviderType
    usage: Optional[Dict[str, int]] = None


class LLMProvider(ABC):
    """
    Classe de base des fournisseurs LLM

    Chaque implémentation fournit l'initialisation du client
    et la génération de texte. La génération JSON est dérivée du texte
    sauf si le fournisseur sait produire du JSON nativement.
    """

    def __init__(self, config: LLMProviderConfig):
        self.config = config
        self._initialized = False

    @property
    @abstractmethod
    def provider_type(self) -> ProviderType:
        """Type du fournisseur"""
        pass

    @abstractmethod
    async def initialize(self) -> None:
        """
        Initialisation du fournisseur
        Vérifie les identifiants et crée le client HTTP
        """
        pass

    @abstractmethod
    async def generate_text(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> LLMResponse:
        """
        Génération de texte

        Args:
            messages: messages de chat [{"role": "...", "content": "..."}]
            temperature: température (valeur de config si absente)
            max_tokens: nombre maximal de tokens

        Returns:
            LLMResponse contenant le texte généré
        """
        pass

    async def generate_json(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Génération d'un objet JSON

        L'implémentation par défaut extrait le JSON du texte généré.

        Raises:
            ValueError: aucun objet JSON exploitable dans la réponse
        """
        response = await self.generate_text(messages, temperature, max_tokens)
        result = extract_json_from_text(response.content)
        if result is None:
            raise ValueError(f"Failed to extract JSON from response: {response.content[:200]}...")
        return result

    def is_reasoning_model(self) -> bool:
        """
        Le modèle courant est-il un modèle de raisonnement ?

        Ces modèles ne supportent ni le mode JSON ni la température.
        """
        reasoning_patterns = [
            r"(^|/)o1",
            r"(^|/)gpt-5",
            r"reasoning",
        ]
        for pattern in reasoning_patterns:
            if re.search(pattern, self.config.model, re.IGNORECASE):
                return True
        return False


def extract_json_from_text(text: str) -> Optional[Dict[str, Any]]:
    """
    Extrait un objet JSON d'une réponse texte

    Les modèles renvoient parfois le JSON dans un bloc de code
    ou entouré d'explications.
    """
    try:
        parsed = json.loads(text.strip())
        if isinstance(parsed, dict):
            return parsed
    except json.JSONDecodeError:
        pass

    json_patterns = [
        r"```json\s*([\s\S]*?)\s*```",  # ```json ... ```
        r"```\s*([\s\S]*?)\s*```",       # ``` ... ```
        r"\{[\s\S]*\}",                   # { ... } (objet le plus externe)
    ]

    for pattern in json_patterns:
        for match in re.findall(pattern, text):
            try:
                parsed = json.loads(match.strip())
            except json.JSONDecodeError:
                continue
            if isinstance(parsed, dict):
                return parsed

    return None
