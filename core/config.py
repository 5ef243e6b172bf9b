import os
from pathlib import Path
from dotenv import load_dotenv

from core.errors import ConfigurationError

# Charge .env à la racine
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(
            f"[CONFIG] Valeur numérique invalide pour {name} : {raw!r}",
            details={"variable": name, "value": raw},
        )


class Config:
    """Configuration centrale PadelCoach."""

    def __init__(self):
        # Environnement actif : dev / prod
        self.env = os.getenv("ENV_MODE", "dev").lower()

        # Fichier Excel de programmation + feuille par défaut
        self.workbook_path = os.getenv("PADEL_WORKBOOK_PATH", "programming-table-2.xlsx")
        self.sheet_name = os.getenv("PADEL_SHEET_NAME", "1. DERECHA PLANA")

        # Endpoint dépendant de l'environnement
        self.endpoint = os.getenv(f"PADEL_ENDPOINT_URL_{self.env.upper()}")

        # Si l'endpoint n'est pas trouvé → fallback pour compatibilité
        if not self.endpoint:
            self.endpoint = os.getenv("PADEL_ENDPOINT_URL", "")

        # Pause entre deux envois + timeout HTTP (secondes)
        self.send_delay = _get_float("PADEL_SEND_DELAY_SEC", 1.0)
        self.http_timeout = _get_float("PADEL_HTTP_TIMEOUT_SEC", 10.0)

        # Debug mode
        self.debug = os.getenv("DEBUG_MODE", "0") in ("1", "true", "True")


config = Config()
