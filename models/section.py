# models/section.py
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict

from models.activity import Activity

# Ordre des groupes = ordre des blocs de colonnes dans la feuille
GROUP_NAMES = ("warm_up", "exercise_1", "exercise_2", "final_part")


class Section(BaseModel):
    """
    Contenu d'une feuille : quatre listes d'activités, une par sous-section.
    Construite une seule fois par chargement, jamais modifiée ensuite.
    """
    model_config = ConfigDict(frozen=True)

    warm_up: List[Activity] = []
    exercise_1: List[Activity] = []
    exercise_2: List[Activity] = []
    final_part: List[Activity] = []

    def group(self, name: str) -> List[Activity]:
        if name not in GROUP_NAMES:
            raise ValueError(f"Groupe inconnu : {name!r} (attendu : {', '.join(GROUP_NAMES)})")
        return getattr(self, name)

    def groups(self) -> List[Tuple[str, List[Activity]]]:
        return [(name, getattr(self, name)) for name in GROUP_NAMES]

    def total(self) -> int:
        return sum(len(acts) for _, acts in self.groups())
