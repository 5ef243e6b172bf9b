# services/spreadsheet_service.py

import datetime
import zipfile
from pathlib import Path
from typing import Any, List, Tuple

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from core.errors import SheetNotFoundError, SheetUnreadableError, WorkbookNotFoundError
from core.utils.logger import log_info


def cell_to_text(value: Any) -> str:
    """
    Convertit une cellule openpyxl en texte d'affichage.
    None → "", 3.0 → "3", True → "true", date → ISO.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)


class SpreadsheetService:
    """
    Lecture simple d'un classeur Excel (.xlsx), lecture seule.
    """

    def __init__(self, path):
        self.path = Path(path)

    # ----------------------------------------------------
    # Ouverture
    # ----------------------------------------------------
    def _open(self):
        if not self.path.exists():
            raise WorkbookNotFoundError(str(self.path))
        try:
            return load_workbook(self.path, read_only=True, data_only=True)
        except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
            raise SheetUnreadableError("*", reason=f"classeur illisible : {e}") from e

    def sheet_names(self) -> List[str]:
        wb = self._open()
        try:
            return list(wb.sheetnames)
        finally:
            wb.close()

    # ----------------------------------------------------
    # Lecture de TOUTES les lignes d'une feuille
    # ----------------------------------------------------
    def read_rows(self, sheet_name: str) -> List[Tuple[Any, ...]]:
        """
        Retourne toutes les lignes (valeurs brutes) de la feuille.
        La feuille est lue entièrement avant fermeture du classeur.
        """
        wb = self._open()
        try:
            if sheet_name not in wb.sheetnames:
                raise SheetNotFoundError(sheet_name, available=wb.sheetnames)

            ws = wb[sheet_name]
            if not hasattr(ws, "iter_rows"):
                raise SheetUnreadableError(sheet_name, reason="pas une feuille de données")

            # <dimension> absent ou faux (ex: ref="A1") → on relit toute la feuille
            ws.reset_dimensions()

            try:
                rows = [tuple(row) for row in ws.iter_rows(values_only=True)]
            except (ValueError, KeyError, TypeError, zipfile.BadZipFile) as e:
                raise SheetUnreadableError(sheet_name, reason=str(e)) from e
        finally:
            wb.close()

        # Toutes les lignes à la largeur de la plus longue (cellules vides en fin de ligne)
        width = max((len(row) for row in rows), default=0)
        rows = [row + (None,) * (width - len(row)) for row in rows]

        log_info(
            f"{len(rows)} lignes lues depuis '{sheet_name}' ({self.path.name})",
            module="SpreadsheetService",
        )
        return rows
