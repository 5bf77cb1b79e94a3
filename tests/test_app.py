"""
Tests for application wiring: health check and rate limiter client keys
"""

from fastapi import FastAPI, status
from fastapi.testclient import TestClient
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from starlette.requests import Request

from campuscoffee.services.rate_limiter import get_client_ip, rate_limit_exceeded_handler


def make_request(headers: dict[str, str]) -> Request:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/",
        "headers": [(k.lower().encode(), v.encode()) for k, v in headers.items()],
        "client": ("10.0.0.9", 12345),
    }
    return Request(scope)


def test_health_check(client: TestClient):
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "healthy"
    assert data["approval_min_count"] == 2
    assert data["rate_limiting"]["enabled"] is False


class TestClientIp:
    def test_forwarded_for_uses_first_address(self):
        request = make_request({"X-Forwarded-For": "203.0.113.5, 10.0.0.1"})

        assert get_client_ip(request) == "203.0.113.5"

    def test_real_ip(self):
        assert get_client_ip(make_request({"X-Real-IP": " 198.51.100.7 "})) == "198.51.100.7"

    def test_falls_back_to_peer_address(self):
        assert get_client_ip(make_request({})) == "10.0.0.9"


def make_limited_client(limit: str) -> TestClient:
    """App with a single route behind an enabled limiter (the shared one is off in tests)."""
    limiter = Limiter(key_func=get_client_ip, enabled=True)
    app = FastAPI()
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.get("/ping")
    @limiter.limit(limit)
    def ping(request: Request) -> dict:
        return {"pong": True}

    return TestClient(app)


class TestRateLimitExceeded:
    def test_retry_after_follows_minute_window(self):
        client = make_limited_client("1/minute")

        assert client.get("/ping").status_code == status.HTTP_200_OK
        response = client.get("/ping")

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert response.headers["Retry-After"] == "60"
        assert response.json()["error"] == "rate_limit_exceeded"

    def test_retry_after_follows_hour_window(self):
        client = make_limited_client("1/hour")

        client.get("/ping")
        response = client.get("/ping")

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        assert response.headers["Retry-After"] == "3600"
        assert response.json()["retry_after"] == 3600
