"""
GBAIRAI - Rejection Message Policy
Choix du message de refus affiché à l'utilisateur
"""
import random
from typing import Callable, Sequence

# Messages de refus dans le style ivoirien
DEFAULT_REJECTION_MESSAGES = (
    "Yako, ce message est trop chaud pour Gbairai 😅 !",
    "Gbairai c'est pas pour les palabres ! Reviens quand t'es calmé 😎",
    "Eh non ami, on dit pas ça sur Gbairai ! Change ton message 🙏",
    "Frère, ce gbairai là est pas bon ! Trouve autre chose à dire 💭",
    "Ton message est trop fort ! Gbairai c'est pour les bonnes vibes seulement ✨",
    "Ça va pas marcher comme ça ! Écris quelque chose de bien 📝",
    "On peut pas publier ça sur Gbairai ! Essaie avec des mots plus doux 🌸",
)

MessageSelector = Callable[[Sequence[str]], str]


class RejectionMessagePolicy:
    """
    Liste ordonnée de messages + stratégie de sélection

    Par défaut la sélection est aléatoire; les tests injectent
    un sélecteur déterministe (ex: lambda messages: messages[0]).
    """

    def __init__(
        self,
        messages: Sequence[str] = DEFAULT_REJECTION_MESSAGES,
        selector: MessageSelector = random.choice,
    ):
        if not messages:
            raise ValueError("At least one rejection message is required")
        self._messages = tuple(messages)
        self._selector = selector

    @property
    def messages(self) -> Sequence[str]:
        return self._messages

    def pick(self) -> str:
        return self._selector(self._messages)

    @classmethod
    def seeded(cls, seed: int, messages: Sequence[str] = DEFAULT_REJECTION_MESSAGES) -> "RejectionMessagePolicy":
        """Politique reproductible à partir d'une graine"""
        rng = random.Random(seed)
        return cls(messages=messages, selector=rng.choice)
