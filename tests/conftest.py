from dataclasses import dataclass, field

import pytest
from fastapi import FastAPI, Response
from httpx import ASGITransport, AsyncClient

BASE_URL = "http://api.example.com"

MEDIA_TYPES = {"json": "application/json", "xml": "application/xml"}


@dataclass
class StubEndpoint:
    """Canned answer for /by-author, plus a record of what was asked."""

    body: str = "[]"
    status: int = 200
    requests: list[dict] = field(default_factory=list)


def create_stub_app(endpoint: StubEndpoint) -> FastAPI:
    app = FastAPI()

    @app.get("/by-author")
    async def by_author(q: str, limit: int = 10, format: str = "json"):
        endpoint.requests.append({"q": q, "limit": limit, "format": format})
        return Response(
            content=endpoint.body,
            status_code=endpoint.status,
            media_type=MEDIA_TYPES.get(format, "text/plain"),
        )

    return app


@pytest.fixture
def endpoint():
    return StubEndpoint()


@pytest.fixture
async def http(endpoint):
    transport = ASGITransport(app=create_stub_app(endpoint))
    async with AsyncClient(transport=transport, base_url=BASE_URL) as c:
        yield c
