# =====================================================================
#  InternalResult - PadelCoach
#  Objet standardisé pour transporter : statut, message, data, source
#  Utilisé pour le résultat d'envoi de chaque activité
# =====================================================================

class InternalResult:
    """
    Format standardisé du résultat d'une opération PadelCoach.
    """
    def __init__(self, status="ok", message=None, data=None, source=None):
        self.status = status                # "ok" ou "error"
        self.message = message              # message informatif
        self.data = data or {}              # données utiles
        self.source = source                # groupe / module d'origine
        self.success = (status == "ok")     # bool simplifié

    # -----------------------------------------------------------------
    #    ✓ SUCCESS
    # -----------------------------------------------------------------
    @classmethod
    def ok(cls, message=None, data=None, source=None):
        return cls(status="ok", message=message, data=data, source=source)

    # -----------------------------------------------------------------
    #    ✗ ERROR
    # -----------------------------------------------------------------
    @classmethod
    def error(cls, message=None, data=None, source=None):
        return cls(status="error", message=message, data=data, source=source)

    # -----------------------------------------------------------------
    #   Helper
    # -----------------------------------------------------------------
    def __repr__(self):
        return f"InternalResult(status={self.status}, message={self.message}, data={self.data})"
