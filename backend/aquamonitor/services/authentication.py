import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from aquamonitor.core.config import Settings
from aquamonitor.core.errors import InvalidCredentials, ServerMisconfigured, ValidationError
from aquamonitor.core.security import create_access_token, verify_password
from aquamonitor.crud import user_crud

logger = logging.getLogger(__name__)


async def authenticate(
    db: AsyncSession,
    settings: Settings,
    dummy_hash: str,
    email: str | None,
    password: str | None,
) -> str:
    """Exchange an email/password pair for a signed access token.

    Unknown emails and wrong passwords take the same path and raise the same
    InvalidCredentials, so callers cannot tell which one happened.
    """
    if not email or not password:
        raise ValidationError("Faltan email o contraseña")

    credentials = await user_crud.get_credentials(db, email)
    stored_hash = credentials.contrasena if credentials else None

    # bcrypt is CPU bound; keep it off the event loop.
    password_ok = await run_in_threadpool(verify_password, password, stored_hash, dummy_hash)
    if not password_ok or credentials is None:
        raise InvalidCredentials()

    if not settings.jwt_secret:
        logger.error("JWT_SECRET is not configured; refusing to issue tokens")
        raise ServerMisconfigured()

    return create_access_token(credentials.id, settings.jwt_secret, issuer=settings.jwt_issuer)
