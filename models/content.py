# models/content.py
from pydantic import BaseModel, ConfigDict


class Content(BaseModel):
    """
    Bloc de contenu d'une activité pour UNE langue
    (titre, objectif rédigé, script du coach).
    """
    model_config = ConfigDict(frozen=True)

    title: str = ""
    objective_text: str = ""
    script: str = ""
