"""SQLAlchemy declarative base and model imports for Alembic."""
from restapi_tutor.db.session import Base

# Import all models so Alembic can see them
from restapi_tutor.models.progress import Progress  # noqa: F401
from restapi_tutor.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Progress"]
