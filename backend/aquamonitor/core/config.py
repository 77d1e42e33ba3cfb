import os
from dataclasses import dataclass

from dotenv import load_dotenv
from fastapi import Request
from sqlalchemy.engine import URL

load_dotenv()


def _default_database_url() -> str:
    explicit = os.getenv("DATABASE_URL")
    if explicit:
        return explicit
    url = URL.create(
        "mysql+aiomysql",
        username=os.getenv("DB_USER", "root"),
        password=os.getenv("DB_PASS") or None,
        host=os.getenv("DB_HOST", "localhost"),
        database=os.getenv("DB_NAME", "acuaponia"),
    )
    return url.render_as_string(hide_password=False)


@dataclass(frozen=True)
class Settings:
    environment: str = os.getenv("ENVIRONMENT", "development")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    database_url: str = _default_database_url()
    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "10"))
    create_schema: bool = os.getenv("DB_CREATE_SCHEMA", "false").lower() == "true"
    jwt_secret: str = os.getenv("JWT_SECRET", "")
    jwt_issuer: str = os.getenv("JWT_ISSUER", "")
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))
    cors_origins_raw: str = os.getenv("CORS_ORIGINS", "*")
    rate_limit_per_minute: int = int(os.getenv("RATE_LIMIT_PER_MINUTE", "1000"))
    max_body_bytes: int = int(os.getenv("MAX_BODY_BYTES", "102400"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    @property
    def cors_origins(self) -> list[str]:
        return [item.strip() for item in self.cors_origins_raw.split(",") if item.strip()]


settings = Settings()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
