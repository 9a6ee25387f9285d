from unittest.mock import Mock

import httpx
import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from api.dependencies import rate_limits
from api.routes.system import router as system_router


def test_get_limiter_returns_shared_instance():
    assert rate_limits.get_limiter() is rate_limits.limiter


def test_setup_rate_limiter_registers_state_and_handler():
    app = FastAPI()

    rate_limits.setup_rate_limiter(app)

    assert app.state.limiter is rate_limits.limiter
    assert RateLimitExceeded in app.exception_handlers


@pytest.mark.asyncio
async def test_rate_limit_handler():
    mock_request = Mock(spec=Request)
    mock_exception = Mock(spec=RateLimitExceeded)

    response = await rate_limits.rate_limit_handler(mock_request, mock_exception)

    assert isinstance(response, JSONResponse)
    assert response.status_code == 429
    assert response.body.decode("utf-8") == '{"message":"Rate limit exceeded"}'


@pytest.mark.asyncio
async def test_system_endpoint_rate_limiting():
    """The /version route rejects the 51st request within a minute."""
    app = FastAPI()
    rate_limits.setup_rate_limiter(app)
    app.include_router(system_router)

    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        for _ in range(50):
            response = await client.get("/version")
            assert response.status_code == 200

        response = await client.get("/version")
        assert response.status_code == 429
        assert response.json() == {"message": "Rate limit exceeded"}
