from restapi_tutor.schemas.auth import AuthOutSchema, LoginSchema, RegisterSchema, UserOutSchema
from restapi_tutor.schemas.level import LevelOutSchema, LevelSummarySchema
from restapi_tutor.schemas.progress import ProgressOutSchema, ProgressUpdateSchema

__all__ = [
    "AuthOutSchema",
    "LevelOutSchema",
    "LevelSummarySchema",
    "LoginSchema",
    "ProgressOutSchema",
    "ProgressUpdateSchema",
    "RegisterSchema",
    "UserOutSchema",
]
