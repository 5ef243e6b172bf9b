# core/errors.py
# =====================================================
# Erreurs PadelCoach
# Erreurs STRUCTURELLES uniquement (fichier, feuille, envoi, config).
# Une ligne incomplète n'est PAS une erreur : elle est ignorée.
# =====================================================

from typing import Any, Dict, Optional


class PadelCoachError(Exception):
    """
    Erreur de base PadelCoach.
    Toutes les erreurs du projet héritent de cette classe.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(PadelCoachError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code="CONFIG_INVALID", details=details)


# -----------------------------------------------------
# Classeur / feuille
# -----------------------------------------------------

class WorkbookNotFoundError(PadelCoachError, FileNotFoundError):
    """Le fichier Excel n'existe pas."""

    def __init__(self, path: str):
        self.path = str(path)
        super().__init__(
            f"Fichier introuvable : {self.path}",
            error_code="FILE_NOT_FOUND",
            details={"path": self.path},
        )


class SheetNotFoundError(PadelCoachError):
    """La feuille demandée n'existe pas dans le classeur."""

    def __init__(self, sheet_name: str, available=None):
        self.sheet_name = sheet_name
        self.available = list(available or [])
        super().__init__(
            f"Feuille introuvable : '{sheet_name}'",
            error_code="SHEET_NOT_FOUND",
            details={"sheet_name": sheet_name, "available": self.available},
        )


class SheetUnreadableError(PadelCoachError):
    """Le classeur ou la feuille existe mais ne peut pas être lu(e)."""

    def __init__(self, sheet_name: str, reason: str = ""):
        self.sheet_name = sheet_name
        super().__init__(
            f"Feuille illisible : '{sheet_name}' ({reason})" if reason
            else f"Feuille illisible : '{sheet_name}'",
            error_code="SHEET_UNREADABLE",
            details={"sheet_name": sheet_name, "reason": reason},
        )


# -----------------------------------------------------
# Envoi HTTP
# -----------------------------------------------------

class TransmissionError(PadelCoachError):
    """Échec d'envoi d'une activité (statut non 2xx ou erreur réseau)."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 activity_id: Optional[str] = None):
        self.status_code = status_code
        self.activity_id = activity_id
        super().__init__(
            message,
            error_code="TRANSMISSION_FAILED",
            details={"status_code": status_code, "activity_id": activity_id},
        )
