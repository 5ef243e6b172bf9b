# models/activity.py
from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict

from models.content import Content


class Phase(str, Enum):
    """Moment de la séance où se place l'activité."""
    WARM_UP = "WARM_UP"
    MAIN_EXERCISE = "MAIN_EXERCISE"
    FINAL_PART = "FINAL_PART"


class Activity(BaseModel):
    """
    Une activité (exercice) extraite d'une ligne du tableau de programmation.
    Les noms de champs sont ceux attendus par l'API de réception.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    shot_code: int = 0
    phase: Phase

    player_counts: List[int] = []
    typology: List[str] = []
    level: List[str] = []
    objective: List[str] = []
    shot_types: List[str] = []
    practice_focus: List[str] = []
    equipment: List[str] = []

    duration: str = ""

    # Clé = code langue ("ES", plus tard "EN", "IT"...)
    content: Dict[str, Content] = {}

    def to_payload(self) -> dict:
        """Dict prêt pour json.dumps (phase en texte)."""
        return self.model_dump(mode="json")
