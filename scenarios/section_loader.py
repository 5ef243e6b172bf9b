# ============================================================
# section_loader.py : Feuille Excel → Section
# Une ligne = jusqu'à 4 activités (échauffement, exercice 1,
# exercice 2, partie finale), chacune dans son bloc de colonnes.
# ============================================================

from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Tuple

from core.utils.logger import get_logger
from models.activity import Phase
from models.section import GROUP_NAMES, Section
from scenarios.extractors import extract_activity, extract_content
from services.spreadsheet_service import SpreadsheetService

logger = get_logger("SectionLoader")

# Lignes d'en-tête de la feuille
HEADER_ROWS = 3

# En dessous : ligne ignorée entièrement
MIN_ROW_WIDTH = 68


@dataclass(frozen=True)
class Subsection:
    name: str               # nom du groupe dans Section
    start_index: int        # colonne de l'id
    content_index: int      # colonne du titre (ES)
    phase: Phase


SUBSECTIONS: Tuple[Subsection, ...] = (
    Subsection("warm_up", 4, 11, Phase.WARM_UP),
    Subsection("exercise_1", 20, 27, Phase.MAIN_EXERCISE),
    Subsection("exercise_2", 36, 43, Phase.MAIN_EXERCISE),
    Subsection("final_part", 52, 59, Phase.FINAL_PART),
)


def build_section(
    rows: Iterable[Sequence[Any]],
    subsections: Sequence[Subsection] = SUBSECTIONS,
) -> Section:
    """
    Parcourt les lignes de données (après l'en-tête) et range chaque
    activité extraite dans son groupe, dans l'ordre des lignes.
    """
    unknown = [sub.name for sub in subsections if sub.name not in GROUP_NAMES]
    if unknown:
        raise ValueError(f"Sous-sections inconnues : {unknown}")

    groups = {sub.name: [] for sub in subsections}

    for row_number, row in enumerate(rows, start=1):
        if row_number <= HEADER_ROWS:
            continue

        if len(row) < MIN_ROW_WIDTH:
            logger.debug(f"Ligne {row_number} ignorée : {len(row)} colonnes (< {MIN_ROW_WIDTH})")
            continue

        for sub in subsections:
            content = extract_content(row, sub.content_index)
            activity = extract_activity(row, sub.start_index, content, sub.phase)
            if activity is None:
                logger.debug(f"Ligne {row_number} : pas d'activité '{sub.name}' (ligne trop courte)")
                continue
            groups[sub.name].append(activity)

    return Section(**groups)


def load_section(path, sheet_name: str) -> Section:
    """
    Point d'entrée : classeur + nom de feuille → Section.
    Lève WorkbookNotFoundError / SheetNotFoundError / SheetUnreadableError.
    """
    rows = SpreadsheetService(path).read_rows(sheet_name)
    section = build_section(rows)

    logger.info(
        f"Feuille '{sheet_name}' → "
        + ", ".join(f"{name}={len(acts)}" for name, acts in section.groups())
    )
    return section
