"""
GBAIRAI - Emotion Services
Dictionnaire ivoirien + analyse d'émotion
"""
from gbairai.services.emotion.dictionary import EmotionDefinition, IvorianDictionary
from gbairai.services.emotion.emotion_analysis import EmotionAnalysisService

__all__ = [
    "EmotionAnalysisService",
    "EmotionDefinition",
    "IvorianDictionary",
]
