import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from aquamonitor.api import router
from aquamonitor.core import Base, Settings, settings as default_settings
from aquamonitor.core.database import create_engine_from_settings, create_session_factory
from aquamonitor.core.errors import register_exception_handlers
from aquamonitor.core.middleware import install_middleware
from aquamonitor.core.security import make_dummy_hash
from aquamonitor.models import Alert, Configuration, Reading, User  # noqa: F401
from aquamonitor.utils import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The pool exists before the first request and is disposed at shutdown.
    settings: Settings = app.state.settings
    engine = create_engine_from_settings(settings)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.dummy_password_hash = make_dummy_hash(settings.bcrypt_rounds)

    if settings.create_schema:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    logger.info("API listening on %s:%s (%s)", settings.host, settings.port, settings.environment)
    yield

    await engine.dispose()
    logger.info("Connection pool closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(
        title="Aquaponics Monitor API",
        version="0.1.0",
        description="Authentication and sensor monitoring data for the aquaponics dashboard.",
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)
    install_middleware(app, settings)
    app.include_router(router)
    return app


app = create_app()
