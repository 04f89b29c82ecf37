"""
GBAIRAI - Ivorian Emotion Dictionary
Dictionnaire des expressions françaises et nouchi associées aux 7 émotions

Sert d'analyseur local quand le LLM est indisponible ou peu sûr.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

NOUCHI_BONUS = 1.5
MIN_CONFIDENCE = 0.1
DEFAULT_EMOTION = "inclassable"
DEFAULT_CONFIDENCE = 0.5


@dataclass(frozen=True)
class EmotionDefinition:
    """Émotion de la taxonomie Gbairai"""
    name: str
    triggers: Tuple[str, ...]
    nouchi_expressions: Tuple[str, ...]
    weight: float


@dataclass(frozen=True)
class LocalEmotionMatch:
    """Score d'une émotion pour un texte"""
    emotion: str
    confidence: float
    matched_terms: Tuple[str, ...]


EMOTIONS: Tuple[EmotionDefinition, ...] = (
    EmotionDefinition(
        name="enjaillé",
        triggers=("content", "heureux", "joie", "bonheur", "réussi", "gagné", "fête", "bien", "super", "génial"),
        nouchi_expressions=(
            "même pas fatigue",
            "c'est chaud",
            "ça gâte pas",
            "on est ensemble",
            "ça va aller",
            "c'est bon",
            "top niveau",
            "ça me fait plaisir",
            "c'est sweet",
            "ça déchire",
            "on est là",
        ),
        weight=0.8,
    ),
    EmotionDefinition(
        name="nerveux",
        triggers=("énervé", "furieux", "colère", "marre", "agacé", "insulte", "chauffe", "énerve"),
        nouchi_expressions=(
            "ça me chauffe",
            "j'ai chaud",
            "ça m'énerve",
            "c'est fort",
            "tu me cherches",
            "ça gâte",
            "je suis vexé",
            "ça me saoule",
            "c'est trop là",
            "ça va chauffer",
            "je suis hot",
        ),
        weight=0.9,
    ),
    EmotionDefinition(
        name="goumin",
        triggers=("triste", "pleure", "déprimé", "malheureux", "difficile", "problème", "mort", "serré"),
        nouchi_expressions=(
            "j'ai le cœur serré",
            "c'est dur",
            "ça fait mal",
            "je pleure",
            "c'est difficile",
            "ça me touche",
            "je suis down",
            "c'est triste",
            "ça me fait mal",
            "je suis pas bien",
            "c'est compliqué",
        ),
        weight=0.8,
    ),
    EmotionDefinition(
        name="trop fan",
        triggers=("amour", "aime", "chéri", "cœur", "romantique", "couple", "manque"),
        nouchi_expressions=(
            "mon dja",
            "ma go",
            "mon bébé",
            "je t'aime",
            "mon cœur",
            "ma chérie",
            "mon amour",
            "tu me manques",
            "ma doudou",
            "on est ensemble",
            "je suis gâté",
            "tu me fais craquer",
        ),
        weight=0.7,
    ),
    EmotionDefinition(
        name="Mais Ahy?",
        triggers=("étrange", "bizarre", "suspens", "mystère", "comprends pas", "quoi", "comment", "pourquoi"),
        nouchi_expressions=(
            "mais ahy?",
            "c'est comment?",
            "je comprends pas",
            "c'est bizarre",
            "qu'est-ce qui se passe?",
            "c'est quoi ça?",
            "j'ai pas compris",
            "c'est étrange",
            "mais comment?",
            "qu'est-ce que c'est?",
        ),
        weight=0.6,
    ),
    EmotionDefinition(
        name="Légé",
        triggers=("calme", "tranquille", "serein", "paisible", "cool", "relax", "zen", "posé"),
        nouchi_expressions=(
            "légé légé",
            "c'est cool",
            "on est tranquille",
            "pas de stress",
            "c'est posé",
            "on gère",
            "c'est zen",
            "tout va bien",
            "on est relax",
            "c'est soft",
        ),
        weight=0.5,
    ),
    EmotionDefinition(
        name="inclassable",
        triggers=("autre", "différent", "spécial", "unique", "personnalisé"),
        nouchi_expressions=(
            "c'est spécial",
            "c'est unique",
            "c'est différent",
            "c'est particulier",
            "c'est mon truc",
            "c'est personnel",
        ),
        weight=0.3,
    ),
)


def _normalize(text: str) -> str:
    # apostrophe typographique → apostrophe droite
    return text.lower().replace("’", "'")


class IvorianDictionary:
    """
    Dictionnaire ivoirien

    Score d'une émotion: chaque déclencheur trouvé ajoute weight,
    chaque expression nouchi ajoute weight × 1.5.
    confiance = min(score / (nb_termes × 2), 1).
    """

    def __init__(self, emotions: Tuple[EmotionDefinition, ...] = EMOTIONS):
        self._emotions = emotions

    def get_emotions(self) -> Tuple[EmotionDefinition, ...]:
        return self._emotions

    def get_emotion_by_name(self, name: str) -> Optional[EmotionDefinition]:
        for emotion in self._emotions:
            if emotion.name == name:
                return emotion
        return None

    def get_nouchi_terms(self) -> List[str]:
        """Expressions nouchi triées et dédoublonnées"""
        return sorted({expr for emotion in self._emotions for expr in emotion.nouchi_expressions})

    def score_emotion(self, text: str, emotion: EmotionDefinition) -> LocalEmotionMatch:
        normalized = _normalize(text)
        score = 0.0
        match_count = 0
        matched_terms: List[str] = []

        for trigger in emotion.triggers:
            if trigger in normalized:
                score += emotion.weight
                match_count += 1
                matched_terms.append(trigger)

        for expression in emotion.nouchi_expressions:
            if expression.lower() in normalized:
                score += emotion.weight * NOUCHI_BONUS
                match_count += 1
                matched_terms.append(expression)

        confidence = min(score / (match_count * 2), 1.0) if match_count > 0 else 0.0
        return LocalEmotionMatch(
            emotion=emotion.name,
            confidence=confidence,
            matched_terms=tuple(matched_terms),
        )

    def rank_emotions(self, text: str) -> List[LocalEmotionMatch]:
        """Émotions au-dessus du seuil, par confiance décroissante"""
        results = [
            match
            for match in (self.score_emotion(text, emotion) for emotion in self._emotions)
            if match.confidence > MIN_CONFIDENCE
        ]
        # tri stable: à égalité, l'ordre du dictionnaire est conservé
        results.sort(key=lambda match: match.confidence, reverse=True)
        return results

    def analyze_text(self, text: str) -> LocalEmotionMatch:
        """Meilleure émotion, ou inclassable à 0.5 si rien ne correspond"""
        ranked = self.rank_emotions(text)
        if ranked:
            return ranked[0]
        return LocalEmotionMatch(
            emotion=DEFAULT_EMOTION,
            confidence=DEFAULT_CONFIDENCE,
            matched_terms=(),
        )
