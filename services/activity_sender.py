# services/activity_sender.py

import json

import requests

from core.errors import ConfigurationError, TransmissionError
from core.utils.logger import log_debug
from models.activity import Activity


class ActivitySender:
    """
    Envoi HTTP d'une activité (POST JSON) vers l'API de réception.
    Pas de retry : un échec est remonté à l'appelant.
    """

    HEADERS = {"Content-Type": "application/json"}

    def __init__(self, endpoint: str, timeout: float = 10.0, session=None):
        if not endpoint:
            raise ConfigurationError("Endpoint d'envoi manquant (PADEL_ENDPOINT_URL)")

        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(self, activity: Activity) -> str:
        """
        POST de l'activité. Retourne le corps de la réponse si 2xx,
        sinon lève TransmissionError avec le code HTTP.
        """
        body = json.dumps(activity.to_payload(), ensure_ascii=False)
        log_debug(f"POST {self.endpoint} ← {body}", module="ActivitySender")

        try:
            response = self.session.post(
                self.endpoint,
                data=body.encode("utf-8"),
                headers=self.HEADERS,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransmissionError(
                f"Erreur réseau lors de l'envoi de l'activité '{activity.id}' : {e}",
                activity_id=activity.id,
            ) from e

        if 200 <= response.status_code < 300:
            return response.text

        raise TransmissionError(
            f"Erreur lors de l'envoi de l'activité '{activity.id}' : HTTP {response.status_code}",
            status_code=response.status_code,
            activity_id=activity.id,
        )
