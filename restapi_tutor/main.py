"""REST API Tutor - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from restapi_tutor.core.config import DEFAULT_SECRET_KEY, Settings, get_settings
from restapi_tutor.core.errors import register_exception_handlers
from restapi_tutor.core.logging import configure_logging
from restapi_tutor.core.security import PasswordHasher, SessionIssuer
from restapi_tutor.db.base import Base
from restapi_tutor.db.session import build_engine, build_session_factory
from restapi_tutor.routers import auth, levels, progress

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    if app.state.settings.create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app; every setting (database, hashing, tokens, CORS) comes from `settings`."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    if settings.secret_key == DEFAULT_SECRET_KEY:
        logger.warning("SECRET_KEY is the built-in default; set it in the environment")

    app = FastAPI(
        title=settings.app_name,
        description="Accounts and lesson progress for the REST API tutorial",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url, echo=settings.debug)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.session_issuer = SessionIssuer(
        settings.secret_key,
        algorithm=settings.algorithm,
        expires_in=timedelta(minutes=settings.access_token_expire_minutes),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(auth.router)
    app.include_router(progress.router)
    app.include_router(levels.router)

    @app.get("/health")
    async def health():
        return {"status": "OK"}

    return app


app = create_app()
