"""
GBAIRAI - Emotion Analysis Service
Classification de l'émotion d'un gbairai

Le LLM est interrogé en premier lorsqu'un fournisseur est configuré.
Si sa confiance ne dépasse pas le seuil, ou en cas d'erreur (réseau, JSON
invalide), l'analyse locale par dictionnaire prend le relais. Aucune erreur
n'est propagée à l'appelant.
"""
import unicodedata
from typing import Any, Dict, List, Optional

from gbairai.core.llm_provider import LLMProvider
from gbairai.core.logger import get_traced_logger, trace_execution
from gbairai.schemas.emotion import EmotionAnalysisResult, EmotionSuggestion
from gbairai.services.emotion.dictionary import DEFAULT_EMOTION, IvorianDictionary

logger = get_traced_logger("EmotionAnalysis")

DEFAULT_LANGUAGE = "fr-ci"
MAX_LOCAL_SUGGESTIONS = 3

SYSTEM_PROMPT = (
    "Tu es un expert en analyse d'émotions pour le contexte ivoirien. "
    "Analyse les textes en français et en nouchi (argot ivoirien)."
)

ANALYSIS_PROMPT = """
Analyse l'émotion principale de ce texte en tenant compte du contexte ivoirien et des expressions nouchi.
Langue du texte : {language}

"{text}"

Émotions possibles (utilise exactement ces noms) :
- enjaillé : joie, fête, bonne humeur
- nerveux : colère, énervement
- goumin : tristesse, chagrin
- trop fan : amour, affection
- Mais Ahy? : surprise, suspens, incompréhension
- Légé : calme, sérénité
- inclassable : aucune des émotions ci-dessus

Réponds au format JSON :
{{
  "emotion": "emotion_detectee",
  "confidence": 0.85,
  "reasoning": "explication courte",
  "localTerms": ["termes", "nouchi", "detectes"],
  "suggestions": [
    {{"emotion": "enjaillé", "confidence": 0.85, "reasoning": "Présence de termes positifs"}},
    {{"emotion": "Légé", "confidence": 0.3, "reasoning": "Ton posé du message"}}
  ]
}}

Prends en compte les expressions ivoiriennes typiques :
- "Même pas fatigue" = confiance, joie
- "Ça va aller" = espoir, calme
- "Ça me chauffe" = colère, énervement
- "J'ai le cœur serré" = tristesse
- "Mon dja" = amour, affection
- "Gbagba" = problème, suspens
"""

# Libellés génériques que le modèle renvoie parfois
_EMOTION_ALIASES = {
    "joie": "enjaillé",
    "colere": "nerveux",
    "tristesse": "goumin",
    "amour": "trop fan",
    "suspens": "Mais Ahy?",
    "surprise": "Mais Ahy?",
    "calme": "Légé",
}


def _fold(label: str) -> str:
    """Minuscules sans accents"""
    decomposed = unicodedata.normalize("NFKD", label.strip().lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


class EmotionAnalysisService:
    """
    Emotion Analysis Service

    Construit explicitement avec son fournisseur LLM (optionnel)
    et son dictionnaire; ne conserve aucun état entre deux appels.
    """

    def __init__(
        self,
        provider: Optional[LLMProvider] = None,
        dictionary: Optional[IvorianDictionary] = None,
        confidence_threshold: float = 0.6,
    ):
        self._provider = provider
        self._dictionary = dictionary or IvorianDictionary()
        self._confidence_threshold = confidence_threshold
        self._labels = {_fold(emotion.name): emotion.name for emotion in self._dictionary.get_emotions()}

    @trace_execution("EmotionAnalysis", "analyze_emotion")
    async def analyze_emotion(self, text: str, language: str = DEFAULT_LANGUAGE) -> EmotionAnalysisResult:
        """
        Analyse l'émotion d'un texte

        Returns:
            EmotionAnalysisResult (LLM si confiance > seuil, sinon analyse locale)
        """
        if self._provider is not None:
            try:
                ai_result = await self._analyze_with_llm(text, language)
                if ai_result.confidence > self._confidence_threshold:
                    return ai_result
                logger.info(
                    "LLM confidence below threshold, using local analysis",
                    metadata={
                        "confidence": ai_result.confidence,
                        "threshold": self._confidence_threshold,
                    },
                )
            except Exception as e:
                logger.warning(
                    "LLM emotion analysis failed, using local analysis",
                    metadata={"error": str(e), "error_type": type(e).__name__},
                )

        return self.analyze_locally(text, language)

    async def _analyze_with_llm(self, text: str, language: str) -> EmotionAnalysisResult:
        await self._provider.initialize()
        result = await self._provider.generate_json(
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": ANALYSIS_PROMPT.format(text=text, language=language)},
            ],
            temperature=0.1,
        )
        return self._parse_llm_result(result)

    def _parse_llm_result(self, result: Dict[str, Any]) -> EmotionAnalysisResult:
        """Normalise la réponse JSON du LLM"""
        emotion = result.get("emotion")
        if not isinstance(emotion, str) or not emotion.strip():
            raise ValueError("LLM response has no emotion")

        local_terms = [
            term.strip()
            for term in (result.get("localTerms") or [])
            if isinstance(term, str) and term.strip()
        ]

        suggestions: List[EmotionSuggestion] = []
        for item in result.get("suggestions") or []:
            if not isinstance(item, dict) or not isinstance(item.get("emotion"), str):
                continue
            suggestions.append(
                EmotionSuggestion(
                    emotion=self.normalize_emotion(item["emotion"]),
                    confidence=self._clamp_confidence(item.get("confidence")),
                    reasoning=str(item.get("reasoning") or ""),
                )
            )
        suggestions.sort(key=lambda s: s.confidence, reverse=True)

        return EmotionAnalysisResult(
            emotion=self.normalize_emotion(emotion),
            confidence=self._clamp_confidence(result.get("confidence")),
            local_terms=local_terms,
            suggestions=suggestions,
        )

    def normalize_emotion(self, label: str) -> str:
        """Ramène un libellé à la taxonomie Gbairai (inclassable si inconnu)"""
        folded = _fold(label)
        if folded in self._labels:
            return self._labels[folded]
        alias = _EMOTION_ALIASES.get(folded)
        if alias and self._dictionary.get_emotion_by_name(alias):
            return alias
        return DEFAULT_EMOTION

    @staticmethod
    def _clamp_confidence(value: Any) -> float:
        """Confiance ramenée à [0, 1]; 0.5 si ce n'est pas un nombre"""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0.5
        return max(0.0, min(1.0, float(value)))

    def analyze_locally(self, text: str, language: str = DEFAULT_LANGUAGE) -> EmotionAnalysisResult:
        """Analyse par dictionnaire, pure et synchrone"""
        best = self._dictionary.analyze_text(text)
        ranked = self._dictionary.rank_emotions(text)

        suggestions = [
            EmotionSuggestion(
                emotion=match.emotion,
                confidence=round(match.confidence, 4),
                reasoning=f"Mots détectés: {', '.join(match.matched_terms)}",
            )
            for match in ranked[:MAX_LOCAL_SUGGESTIONS]
        ]

        return EmotionAnalysisResult(
            emotion=best.emotion,
            confidence=round(best.confidence, 4),
            local_terms=list(best.matched_terms),
            suggestions=suggestions,
        )
