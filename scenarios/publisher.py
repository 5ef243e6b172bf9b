# scenarios/publisher.py
# Envoi séquentiel des activités d'une Section vers l'API.
# Un échec d'envoi n'arrête PAS le traitement des activités suivantes.

import time
from typing import Callable, List, Optional, Sequence

from core.errors import TransmissionError
from core.internal_result import InternalResult
from core.utils.logger import get_logger
from models.section import GROUP_NAMES, Section

logger = get_logger("Publisher")


def publish_section(
    section: Section,
    sender,
    groups: Optional[Sequence[str]] = None,
    delay: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
) -> List[InternalResult]:
    """
    Envoie chaque activité des groupes demandés (tous par défaut),
    dans l'ordre de la feuille. Pause de `delay` secondes entre deux envois.
    """
    selected = list(groups) if groups else list(GROUP_NAMES)
    queue = [(name, act) for name in selected for act in section.group(name)]

    results = []
    for position, (name, activity) in enumerate(queue):
        logger.info(f"Envoi activité : {activity.id} ({name})")

        try:
            response = sender.send(activity)
        except TransmissionError as e:
            logger.error(f"Erreur envoi activité '{activity.id}' [{activity.phase.value}] : {e.message}")
            results.append(InternalResult.error(
                message=e.message,
                data={"id": activity.id, "status_code": e.status_code},
                source=name,
            ))
        else:
            logger.info(f"Activité envoyée : {activity.id} → {response}")
            results.append(InternalResult.ok(
                message=response,
                data={"id": activity.id},
                source=name,
            ))

        if delay > 0 and position < len(queue) - 1:
            sleep(delay)

    return results


def summarize(results: List[InternalResult]) -> dict:
    sent = sum(1 for r in results if r.success)
    return {"total": len(results), "sent": sent, "failed": len(results) - sent}
