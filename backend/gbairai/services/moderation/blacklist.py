"""
GBAIRAI - Blacklist Filter
Filtre local de mots interdits (première étape de la modération)

La recherche est une inclusion de sous-chaîne insensible à la casse, pas une
recherche par mot entier: un mot interdit contenu dans un mot anodin
déclenche quand même le filtre. La liste d'autorisation ne s'applique qu'à un
mot interdit strictement égal à un mot autorisé.
"""
import re
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Sequence, Tuple

# Mots réellement offensants (niveau critique)
SEVERE_BANNED_WORDS: Tuple[str, ...] = (
    # Grossièretés françaises
    "merde", "putain", "connard", "connasse", "salope", "pute", "enculé", "enculée",
    "con", "conne", "batard", "batarde", "fdp", "ntm", "ta mère", "tamère",
    "nique", "niquer", "baise", "baiser", "suce", "sucer", "chatte", "bite",
    "couille", "couilles", "cul", "chier", "chiasse", "salaud",
    "bordel", "salopard", "saloparde", "encule", "niquez",
    "catin", "trainée", "garce", "ordure", "fumier", "raclure", "vermine",

    # Variantes accentuées
    "pétasse", "pédale", "tapette", "enfoiré", "enfoirée", "crétin", "crétine",
    "débile", "abruti", "abrutie", "dégueulasse", "dégueu",

    # Termes sexuels explicites
    "porn", "porno", "xxx", "nichons", "tétons", "vagin", "pénis", "phallus",
    "masturbation", "masturber", "orgasme", "éjaculation", "sodomie", "fellation",
    "cunnilingus", "coït", "fornication",

    # Injures racistes et discriminatoires
    "nègre", "négro", "bamboula", "bounty", "bougnoule", "bicot", "raton",
    "youpin", "youpine", "feuj", "ritale", "macaroni", "polak", "schleu",
    "rosbif", "ricain", "amerlock", "métèque", "pédé", "gouine",

    # Violence
    "tuer", "crever", "buter", "flinguer", "descendre", "assassiner",
    "violer", "viol", "tabasser", "défonce", "défoncer",
    "massacre", "massacrer", "torturer", "torture", "mutiler", "mutilation",

    # Drogues
    "drogue", "cannabis", "haschisch", "marijuana", "cocaïne", "héroïne",
    "ecstasy", "lsd", "speed", "amphétamine", "crack", "méthamphétamine",
    "dealer", "dealeuse", "pusher", "came", "shit", "beuh", "weed",

    # Extrémisme
    "terroriste", "attentat", "bombe", "explosif", "kamikaze", "djihad",
    "nazi", "fasciste", "antisémite", "raciste", "xénophobe", "homophobe",

    # Argot offensant
    "tepu", "teub", "tebé",

    # Anglicismes
    "fuck", "fucking", "shit", "bitch", "asshole", "bastard",
    "dickhead", "motherfucker", "cocksucker", "whore", "slut", "cunt",
    "pussy", "dick", "cock", "balls", "tits", "boobs", "ass", "butt",

    # Caractères de remplacement
    "f*ck", "f**k", "sh*t", "sh**", "b*tch", "a**hole",
    "m*rde", "p*tain", "c*n", "s*lope", "enc*lé", "b*tard",

    # Leetspeak
    "m3rd3", "put41n", "c0n", "s4l0p3", "3nculé", "b4t4rd",
    "fck", "sht", "btch", "4ssh0l3",

    # Termes médicaux détournés
    "mongol", "attardé", "autiste", "psychopathe",

    # Termes politiques offensants
    "facho", "facha",
)

# Mots acceptables selon le contexte (jamais bloqués)
ALLOWED_WORDS: FrozenSet[str] = frozenset({
    "bête", "moche", "fou", "folle", "dingue", "malade", "idiot", "idiote",
    "stupide", "imbécile", "affreux", "hideux", "crade", "cracra",
    "porc", "cochon", "chienne", "damn", "hell", "frapper", "cogner",
    "sexe", "seins", "wesh", "wallah", "zarma", "chelou", "relou", "ouf",
    "meuf", "keuf", "keum", "reuf", "reubeu", "rebeu", "feumeu", "tipar",
    "tise", "picole", "cuite", "bourré", "pété", "défoncé", "pourri", "pourrie",
    "pathologie", "maladie", "infection", "virus", "cancer", "sida",
    "handicapé", "handicapée", "invalide", "gaucho", "gauchiste", "droitard",
    "communiste", "capitaliste", "bourgeois", "prolétaire", "révolution", "anarchiste",
    "charogne", "beurk", "pouah", "berk", "répugnant", "écœurant", "nauséabond",
})


class WordCategory(str, Enum):
    """Catégories pour une modération plus fine"""
    PROFANITY = "PROFANITY"
    SEXUAL = "SEXUAL"
    VIOLENCE = "VIOLENCE"
    DRUGS = "DRUGS"
    DISCRIMINATION = "DISCRIMINATION"
    MILD = "MILD"


WORD_CATEGORIES: Dict[WordCategory, Tuple[str, ...]] = {
    WordCategory.PROFANITY: ("merde", "putain", "connard", "salope", "pute", "enculé"),
    WordCategory.SEXUAL: ("sexe", "porn", "porno", "xxx", "masturbation", "orgasme"),
    WordCategory.VIOLENCE: ("tuer", "crever", "buter", "violer", "tabasser", "massacre"),
    WordCategory.DRUGS: ("drogue", "cannabis", "cocaïne", "héroïne", "dealer", "came"),
    WordCategory.DISCRIMINATION: ("nègre", "bougnoule", "youpin", "pédé", "gouine"),
    WordCategory.MILD: ("débile", "idiot", "stupide", "crétin", "imbécile"),
}


def _unique(words: Iterable[str]) -> Tuple[str, ...]:
    """Dédoublonne en conservant l'ordre de première apparition"""
    return tuple(dict.fromkeys(word for word in words if word))


class BlacklistFilter:
    """
    Filtre de mots interdits

    Tables immuables, fonctions pures: deux appels sur le même texte
    donnent toujours le même résultat.
    """

    def __init__(
        self,
        banned_words: Sequence[str] = SEVERE_BANNED_WORDS,
        allowed_words: Iterable[str] = ALLOWED_WORDS,
        categories: Dict[WordCategory, Tuple[str, ...]] = WORD_CATEGORIES,
    ):
        self._banned_words = _unique(banned_words)
        self._allowed_words = frozenset(word.lower() for word in allowed_words)
        self._categories = dict(categories)

    @property
    def banned_words(self) -> Tuple[str, ...]:
        return self._banned_words

    def is_allowed(self, word: str) -> bool:
        """Le mot figure-t-il dans la liste d'autorisation ?"""
        return word.lower() in self._allowed_words

    def _candidates(self, custom_words: Iterable[str]) -> Tuple[str, ...]:
        return _unique((*self._banned_words, *custom_words))

    def get_found_banned_words(self, text: str, custom_words: Iterable[str] = ()) -> List[str]:
        """Mots interdits présents dans le texte, dans l'ordre de la liste"""
        lower_text = text.lower()
        return [
            word
            for word in self._candidates(custom_words)
            if word.lower() in lower_text and not self.is_allowed(word)
        ]

    def contains_banned_words(self, text: str, custom_words: Iterable[str] = ()) -> bool:
        """Le texte contient-il au moins un mot interdit ?"""
        lower_text = text.lower()
        for word in self._candidates(custom_words):
            if word.lower() in lower_text and not self.is_allowed(word):
                return True
        return False

    def censor_text(self, text: str, replacement: str = "***") -> str:
        """Remplace chaque occurrence d'un mot interdit"""
        censored = text
        # les mots longs d'abord pour ne pas laisser de fragments
        for word in sorted(self._banned_words, key=len, reverse=True):
            if self.is_allowed(word):
                continue
            censored = re.sub(re.escape(word), replacement, censored, flags=re.IGNORECASE)
        return censored

    def check_by_category(self, text: str, category: WordCategory) -> bool:
        """Le texte contient-il un mot de la catégorie ?"""
        lower_text = text.lower()
        return any(word.lower() in lower_text for word in self._categories.get(category, ()))


default_blacklist = BlacklistFilter()


def contains_banned_words(text: str, custom_words: Iterable[str] = ()) -> bool:
    return default_blacklist.contains_banned_words(text, custom_words)


def get_found_banned_words(text: str, custom_words: Iterable[str] = ()) -> List[str]:
    return default_blacklist.get_found_banned_words(text, custom_words)


def censor_text(text: str, replacement: str = "***") -> str:
    return default_blacklist.censor_text(text, replacement)


def check_by_category(text: str, category: WordCategory) -> bool:
    return default_blacklist.check_by_category(text, category)
