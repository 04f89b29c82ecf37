"""
GBAIRAI - Core Configuration
Gestion centralisée des paramètres de l'application
"""
import json
from functools import lru_cache
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Configuration LLM par défaut (routeur de modèles compatible OpenAI)
DEFAULT_LLM_CONFIG_MODERATION = {
    "provider": "openrouter",
    "model": "openai/gpt-4o-mini",
    "temperature": 0.1,
    "max_tokens": 200,
}
DEFAULT_LLM_CONFIG_EMOTION = {
    "provider": "openrouter",
    "model": "openai/gpt-4o-mini",
    "temperature": 0.1,
    "max_tokens": 300,
}

DEFAULT_OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


class Settings(BaseSettings):
    """Paramètres de l'application"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Gbairai"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # API
    api_prefix: str = "/api"

    # Routeur de modèles (OpenRouter)
    # L'ancienne variable OPENROUTER_CHECK_WORD est toujours acceptée
    openrouter_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "openrouter_api_key",
            "openrouter_check_word",
            "openai_api_key",
        ),
    )
    openrouter_base_url: str = DEFAULT_OPENROUTER_BASE_URL
    openrouter_referer: str = "https://gbairai.app"
    openrouter_title: str = "Gbairai"

    # Configuration LLM par usage (JSON)
    # Ex: LLM_CONFIG_MODERATION='{"provider": "openrouter", "model": "openai/gpt-4o-mini"}'
    llm_config_moderation: str = Field(
        default=json.dumps(DEFAULT_LLM_CONFIG_MODERATION),
        description="MODERATION LLM config (JSON string)",
    )
    llm_config_emotion: str = Field(
        default=json.dumps(DEFAULT_LLM_CONFIG_EMOTION),
        description="EMOTION LLM config (JSON string)",
    )
    llm_timeout_seconds: float = 10.0

    # Modération
    # True: en cas de panne du service IA le contenu est approuvé
    moderation_fail_open: bool = True

    # Analyse d'émotion
    emotion_confidence_threshold: float = 0.6

    # CORS
    backend_cors_origins: List[str] = ["http://localhost:5000", "http://localhost:5173"]

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Any) -> List[str]:
        if isinstance(v, str):
            # Liste JSON: '["http://localhost:5000", "https://gbairai.app"]'
            if v.startswith("["):
                try:
                    parsed = json.loads(v)
                    if isinstance(parsed, list):
                        return [str(item).strip().rstrip("/") for item in parsed]
                except json.JSONDecodeError:
                    pass
            # Sinon séparée par des virgules: "http://localhost:5000,https://gbairai.app"
            return [origin.strip().rstrip("/") for origin in v.split(",") if origin.strip()]
        if isinstance(v, list):
            return [str(item).strip().rstrip("/") for item in v]
        return v

    # Logging
    log_level: str = "INFO"

    def get_llm_config(self, role: str) -> Dict[str, Any]:
        """
        Configuration LLM pour un usage donné

        Args:
            role: "moderation" ou "emotion"

        Returns:
            {"provider": "openrouter"|"openai", "model": "...", ...}
        """
        config_map = {
            "moderation": self.llm_config_moderation,
            "emotion": self.llm_config_emotion,
        }
        defaults = {
            "moderation": DEFAULT_LLM_CONFIG_MODERATION,
            "emotion": DEFAULT_LLM_CONFIG_EMOTION,
        }

        config_str = config_map.get(role, self.llm_config_moderation)

        default = dict(defaults.get(role, DEFAULT_LLM_CONFIG_MODERATION))

        try:
            config = json.loads(config_str)
        except json.JSONDecodeError:
            # JSON invalide: on revient à la configuration par défaut
            return default

        # JSON valide mais pas un objet (liste, nombre...)
        if not isinstance(config, dict):
            return default

        return config

    def is_llm_available(self) -> bool:
        """Le routeur de modèles est-il configuré ?"""
        return bool(self.openrouter_api_key)


@lru_cache
def get_settings() -> Settings:
    """Instance de configuration mise en cache"""
    return Settings()


settings = get_settings()
