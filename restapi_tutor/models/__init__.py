from restapi_tutor.models.user import User
from restapi_tutor.models.progress import Progress

__all__ = ["User", "Progress"]
