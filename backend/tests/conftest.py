from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from aquamonitor.core import Base, Settings
from aquamonitor.core.security import hash_password
from aquamonitor.main import create_app
from aquamonitor.models import Configuration, User

TEST_SECRET = "test-secret"
TEST_ISSUER = "aquamonitor-tests"


def make_settings(db_path, **overrides) -> Settings:
    values = {
        "database_url": f"sqlite+aiosqlite:///{db_path}",
        "jwt_secret": TEST_SECRET,
        "jwt_issuer": TEST_ISSUER,
        "rate_limit_per_minute": 1000,
        "bcrypt_rounds": 4,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "aquamonitor.db"


@pytest.fixture
def seed_engine(db_path):
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(seed_engine):
    with Session(seed_engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def settings(db_path):
    return make_settings(db_path)


@pytest.fixture
def client(settings, seed_engine):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def user(db_session):
    row = User(
        nombre="Ana Torres",
        correo="ana@example.com",
        contrasena=hash_password("s3creta", rounds=4),
        fecha_creacion=datetime(2024, 5, 1, 9, 30),
        rol="admin",
    )
    db_session.add(row)
    db_session.commit()
    return row


@pytest.fixture
def configuration(db_session):
    row = Configuration(
        id=1,
        ph_min=6.0,
        ph_max=7.5,
        temperatura_min=18.0,
        temperatura_max=26.0,
        agitacion_recomendada=3.0,
        intervalo=60,
    )
    db_session.add(row)
    db_session.commit()
    return row
