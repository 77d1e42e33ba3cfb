from fastapi.testclient import TestClient

from aquamonitor.core.middleware import RateLimiter
from aquamonitor.main import create_app

from conftest import make_settings


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_rate_limiter_resets_each_window():
    clock = FakeClock()
    limiter = RateLimiter(limit=2, window_seconds=60, clock=clock)

    assert limiter.hit("10.0.0.1")
    assert limiter.hit("10.0.0.1")
    assert not limiter.hit("10.0.0.1")
    assert limiter.hit("10.0.0.2")

    clock.now = 60.0
    assert limiter.hit("10.0.0.1")


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_requests_over_limit_get_429_until_next_window(db_path, seed_engine):
    settings = make_settings(db_path, rate_limit_per_minute=2)
    app = create_app(settings)
    clock = FakeClock()
    app.state.rate_limiter.clock = clock

    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
        assert client.get("/health").status_code == 200
        limited = client.get("/health")

        clock.now = 60.0
        after_window = client.get("/health")

    assert limited.status_code == 429
    assert "error" in limited.json()
    assert after_window.status_code == 200


def test_oversized_body_is_rejected(db_path, seed_engine):
    settings = make_settings(db_path, max_body_bytes=64)

    with TestClient(create_app(settings)) as client:
        response = client.post("/api/login", json={"email": "a" * 100 + "@example.com", "password": "x"})

    assert response.status_code == 413


def test_cors_headers(client):
    response = client.get("/health", headers={"Origin": "http://dashboard.local"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_oversized_chunked_body_is_rejected(db_path, seed_engine):
    settings = make_settings(db_path, max_body_bytes=64)
    chunks = [b'{"email": "', b"a" * 100, b'@example.com", "password": "x"}']

    with TestClient(create_app(settings)) as client:
        response = client.post("/api/login", content=iter(chunks), headers={"content-type": "application/json"})

    assert response.status_code == 413


def test_small_chunked_body_reaches_the_route(client, user):
    chunks = [b'{"email": "ana@example.com", ', b'"password": "s3creta"}']

    response = client.post("/api/login", content=iter(chunks), headers={"content-type": "application/json"})

    assert response.status_code == 200
    assert "token" in response.json()
