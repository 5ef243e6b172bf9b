# scenarios/extractors.py
# Extraction d'une ligne Excel → Content / Activity
#
# Colonnes communes à toute la ligne (indépendantes de la sous-section) :
#   0 = code coup, 1 = nb joueurs, 2 = typologie, 3 = niveau
# Colonnes relatives à start_index (10 colonnes par sous-section) :
#   +0 id, +1 objectif, +2 coups, +3 partie à travailler, +4 matériel, +5 durée

from typing import Any, Dict, List, Optional, Sequence

from models.activity import Activity, Phase
from models.content import Content
from services.spreadsheet_service import cell_to_text
from services.vocabulary import VocabularyCategory, translate
from utils.normalizers import (
    normalize_duration,
    normalize_player_counts,
    parse_shot_code,
    split_csv,
)

CONTENT_LOCALE = "ES"

COL_SHOT_CODE = 0
COL_PLAYER_COUNTS = 1
COL_TYPOLOGY = 2
COL_LEVEL = 3

# Nombre de colonnes d'une sous-section (id → durée + réserve)
ACTIVITY_WIDTH = 10
CONTENT_WIDTH = 3


def _text(row: Sequence[Any], index: int) -> str:
    return cell_to_text(row[index])


def _upper_list(row: Sequence[Any], index: int) -> List[str]:
    return split_csv(_text(row, index).upper())


def _vocab(row: Sequence[Any], index: int, category: VocabularyCategory) -> List[str]:
    return translate(category, _upper_list(row, index))


def extract_content(row: Sequence[Any], start_index: int) -> Dict[str, Content]:
    """
    Bloc de contenu (titre, objectif, script) de la sous-section.
    Ligne trop courte → dict vide (pas une erreur).
    """
    content = {}
    if len(row) > start_index + CONTENT_WIDTH - 1:
        content[CONTENT_LOCALE] = Content(
            title=_text(row, start_index),
            objective_text=_text(row, start_index + 1),
            script=_text(row, start_index + 2),
        )
    # Autres langues ("EN", "IT"...) : ajouter une entrée par bloc de colonnes
    return content


def extract_activity(
    row: Sequence[Any],
    start_index: int,
    content: Dict[str, Content],
    phase: Phase,
) -> Optional[Activity]:
    """
    Construit l'activité de la sous-section commençant à start_index.
    Retourne None si la ligne n'a pas assez de colonnes.
    """
    if len(row) <= start_index + ACTIVITY_WIDTH - 1:
        return None

    shot_code = parse_shot_code(_text(row, COL_SHOT_CODE))

    return Activity(
        id=_text(row, start_index),
        shot_code=shot_code if shot_code is not None else 0,
        phase=phase,
        player_counts=normalize_player_counts(_upper_list(row, COL_PLAYER_COUNTS)),
        typology=_vocab(row, COL_TYPOLOGY, VocabularyCategory.TYPOLOGY),
        level=_vocab(row, COL_LEVEL, VocabularyCategory.LEVEL),
        objective=_vocab(row, start_index + 1, VocabularyCategory.OBJECTIVE),
        shot_types=_vocab(row, start_index + 2, VocabularyCategory.SHOT),
        practice_focus=_vocab(row, start_index + 3, VocabularyCategory.PRACTICE_FOCUS),
        equipment=_vocab(row, start_index + 4, VocabularyCategory.EQUIPMENT),
        duration=normalize_duration(_text(row, start_index + 5)),
        content=content,
    )
