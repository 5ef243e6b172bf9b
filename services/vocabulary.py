# services/vocabulary.py
# =====================================================
# Référentiel CENTRALISÉ du vocabulaire padel
# Source unique de vérité : terme de la feuille (ES) → terme canonique (EN)
# =====================================================
#
# Convention :
# - clé = terme de la feuille, en MAJUSCULES (la feuille est mise en
#   majuscules avant traduction)
# - valeur = terme canonique envoyé à l'API
# - terme inconnu → renvoyé tel quel (jamais supprimé)

from enum import Enum
from types import MappingProxyType
from typing import Iterable, List


class VocabularyCategory(str, Enum):
    TYPOLOGY = "typology"
    LEVEL = "level"
    OBJECTIVE = "objective"
    SHOT = "shot"
    PRACTICE_FOCUS = "practice_focus"
    EQUIPMENT = "equipment"


# =================================================
# 👥 TYPOLOGIE DE JOUEUR
# =================================================
TYPOLOGY = MappingProxyType({
    "INICIACIÓN NIÑOS": "beginner_kids",
    "INICIACIÓN ADULTOS": "beginner_adult",
    "PERFECCIONAMIENTO": "improvement",
    "COMPETICIÓN": "competition",
    "PRECOMPETICIÓN": "precompetition",
})

# =================================================
# 📶 NIVEAU
# =================================================
LEVEL = MappingProxyType({
    "FÁCIL": "easy",
    "MEDIO": "medium",
    "DIFÍCIL": "difficult",
})

# =================================================
# 🎯 OBJECTIF (MODÈLE)
# =================================================
OBJECTIVE = MappingProxyType({
    "TÉCNICA": "technique",
    "TÁCTICA": "tactic",
    "SOCIAL": "social",
    "FÍSICA": "physical",
})

# =================================================
# 🎾 COUPS (sortie en MAJUSCULES)
# =================================================
SHOT = MappingProxyType({
    "DERECHA": "forehand",
    "REVÉS": "backhand",
    "VOLEA DE DERECHA": "forehand_volley",
    "VOLEA DE REVÉS": "backhand_volley",
    "BANDEJA": "bandeja",
    "VÍBORA": "vibora",
    "REMATE": "smash",
    "GLOBO": "lob",
    "SAQUE": "serve",
    "RESTO": "return",
    "DEJADA": "drop_shot",
    "SALIDA DE PARED": "wall_exit",
    "CONTRAPARED": "back_wall_boast",
})

# =================================================
# 🦵 PARTIE À TRAVAILLER (sortie en MAJUSCULES)
# =================================================
PRACTICE_FOCUS = MappingProxyType({
    "DESPLAZAMIENTO": "footwork",
    "GOLPEO": "hitting",
    "POSICIONAMIENTO": "positioning",
    "COORDINACIÓN": "coordination",
    "EMPUÑADURA": "grip",
    "PREPARACIÓN": "preparation",
})

# =================================================
# 🧰 MATÉRIEL (sortie en MAJUSCULES)
# =================================================
EQUIPMENT = MappingProxyType({
    "PELOTAS": "balls",
    "CONOS": "cones",
    "RAQUETA": "racket",
    "ESCALERA": "agility_ladder",
    "AROS": "hoops",
    "CESTO": "basket",
    "VALLAS": "hurdles",
    "PICAS": "poles",
    "DIANAS": "targets",
})


TABLES = MappingProxyType({
    VocabularyCategory.TYPOLOGY: TYPOLOGY,
    VocabularyCategory.LEVEL: LEVEL,
    VocabularyCategory.OBJECTIVE: OBJECTIVE,
    VocabularyCategory.SHOT: SHOT,
    VocabularyCategory.PRACTICE_FOCUS: PRACTICE_FOCUS,
    VocabularyCategory.EQUIPMENT: EQUIPMENT,
})

# Catégories dont la valeur canonique est renvoyée en majuscules
UPPERCASE_OUTPUT = frozenset({
    VocabularyCategory.SHOT,
    VocabularyCategory.PRACTICE_FOCUS,
    VocabularyCategory.EQUIPMENT,
})


def translate_token(category: VocabularyCategory, token: str) -> str:
    """Traduit un terme ; terme inconnu → renvoyé inchangé."""
    category = VocabularyCategory(category)
    canonical = TABLES[category].get(token.strip().upper())
    if canonical is None:
        return token
    if category in UPPERCASE_OUTPUT:
        return canonical.upper()
    return canonical


def translate(category: VocabularyCategory, tokens: Iterable[str]) -> List[str]:
    """
    Traduction terme à terme : même ordre, même longueur.
    Aucun filtrage, aucune erreur sur un terme inconnu.
    """
    return [translate_token(category, token) for token in tokens]
