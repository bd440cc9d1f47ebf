from stable_api.db.models.owner import Owner
from stable_api.db.models.horse import Horse

__all__ = ["Owner", "Horse"]
