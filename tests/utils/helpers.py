"""
Construction de lignes Excel synthétiques (usage tests uniquement)
"""

from scenarios.section_loader import SUBSECTIONS

ROW_WIDTH = 68


def make_row(tag: str = "A", width: int = ROW_WIDTH, shot="3 DERECHA", players="4 JUGADORES, 2",
             typology="Competición, Perfeccionamiento", level="Medio"):
    """
    Ligne complète : colonnes communes + les 4 sous-sections remplies.
    Les ids sont "<tag>-<nom du groupe>".
    """
    row = [""] * max(width, ROW_WIDTH)
    row[0] = shot
    row[1] = players
    row[2] = typology
    row[3] = level

    for sub in SUBSECTIONS:
        start = sub.start_index
        row[start] = f"{tag}-{sub.name}"
        row[start + 1] = "Técnica, Táctica"
        row[start + 2] = "Derecha, Revés"
        row[start + 3] = "Desplazamiento"
        row[start + 4] = "Pelotas, Conos"
        row[start + 5] = "10'(5'/pareja)"

        content = sub.content_index
        row[content] = f"Título {tag} {sub.name}"
        row[content + 1] = "Mejorar la derecha"
        row[content + 2] = "Explicación del ejercicio"

    return row[:width]


def header_rows(count: int = 3):
    return [["HEADER"] * ROW_WIDTH for _ in range(count)]
