# =====================================================================
# utils/normalizers.py
# Petits parseurs pour les cellules "texte libre" de la feuille
# (durées, nombre de joueurs, code de coup, listes séparées par virgules)
# =====================================================================

import re
from typing import Iterable, List, Optional

# Marqueur minutes utilisé dans la feuille : 10' → 10m
MINUTE_MARKER = "'"
MINUTE_UNIT = "m"

_PARENS = re.compile(r"[()]")

# Entier ASCII strict : pas de "1_000", pas de chiffres non latins
_INT = re.compile(r"[+-]?[0-9]+")


def split_csv(raw: str) -> List[str]:
    """
    "a, b ,c" → ["a", "b", "c"]
    Les morceaux vides sont conservés : "" → [""].
    """
    return [piece.strip() for piece in raw.split(",")]


def _first_int(raw: str) -> Optional[int]:
    words = raw.split()
    if not words or not _INT.fullmatch(words[0]):
        return None
    return int(words[0])


def parse_shot_code(raw: str) -> Optional[int]:
    """
    "3 FOREHAND" → 3
    "N/A" → None (l'appelant met 0 par défaut)
    """
    return _first_int(raw)


def normalize_player_counts(tokens: Iterable[str]) -> List[int]:
    """
    ["4 PLAYERS", "X", "2"] → [4, 2]
    Les valeurs sans entier en tête sont ignorées.
    """
    counts = []
    for token in tokens:
        value = _first_int(token)
        if value is not None:
            counts.append(value)
    return counts


def normalize_duration(raw: str) -> str:
    """
    "10'(5'/pair)" → "10m - 5m/pair"
    "15'" → "15m"
    """
    cleaned = raw.replace("\r", "").replace("\n", "")
    parts = _PARENS.split(cleaned)

    if len(parts) == 3:
        main = parts[0].replace(MINUTE_MARKER, MINUTE_UNIT).strip()
        sub = parts[1].replace(MINUTE_MARKER, MINUTE_UNIT).strip()
        return f"{main} - {sub}"

    return cleaned.replace(MINUTE_MARKER, MINUTE_UNIT).strip()
