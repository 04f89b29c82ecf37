"""
GBAIRAI - LLM Providers
Implémentations des fournisseurs LLM
"""
from gbairai.core.providers.openai import OpenAIProvider

__all__ = [
    "OpenAIProvider",
]
