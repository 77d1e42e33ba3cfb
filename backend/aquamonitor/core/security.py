from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import jwt

TOKEN_TYPE = "access"
TOKEN_ALGORITHM = "HS256"
ACCESS_TOKEN_TTL = timedelta(minutes=15)


def hash_password(password: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def make_dummy_hash(rounds: int) -> str:
    """Hash checked when there is no usable stored hash, so every failed login costs one bcrypt check.

    Built once at startup with the same cost as the stored hashes.
    """
    return hash_password("aquamonitor-dummy-password", rounds=rounds)


def verify_password(password: str, stored_hash: str | None, dummy_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    Missing or malformed hashes verify as False, after a check against
    `dummy_hash` so they take as long as a wrong password.
    """
    candidate = password.encode("utf-8")
    if stored_hash:
        try:
            return bcrypt.checkpw(candidate, stored_hash.encode("utf-8"))
        except ValueError:
            pass
    try:
        bcrypt.checkpw(candidate, dummy_hash.encode("utf-8"))
    except ValueError:
        pass
    return False


def create_access_token(subject: Any, secret: str, issuer: str = "", now: datetime | None = None) -> str:
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(subject),
        "typ": TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + ACCESS_TOKEN_TTL,
        "iss": issuer or "",
    }
    return jwt.encode(payload, secret, algorithm=TOKEN_ALGORITHM)


def decode_access_token(token: str, secret: str) -> dict[str, Any]:
    """Verify signature, expiry and token type; raises jwt.InvalidTokenError otherwise."""
    claims = jwt.decode(
        token,
        secret,
        algorithms=[TOKEN_ALGORITHM],
        options={"require": ["sub", "exp", "iat"]},
    )
    if claims.get("typ") != TOKEN_TYPE:
        raise jwt.InvalidTokenError("unexpected token type")
    return claims
