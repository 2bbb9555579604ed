from restapi_tutor.services.accounts import AccountService
from restapi_tutor.services.catalog import get_level, list_levels
from restapi_tutor.services.progress import ProgressService

__all__ = ["AccountService", "ProgressService", "get_level", "list_levels"]
