import logging

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.main import create_app


@pytest.mark.asyncio
async def test_unexpected_error_returns_envelope(client: AsyncClient, runner) -> None:
    runner.raise_on(["docker"], RuntimeError("docker exploded"))

    response = await client.get("/deployments")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Internal server error",
        "details": "RuntimeError",
    }


@pytest.mark.asyncio
async def test_unknown_route_returns_envelope(client: AsyncClient) -> None:
    response = await client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}


@pytest.mark.asyncio
async def test_wrong_method_returns_envelope(client: AsyncClient, runner) -> None:
    response = await client.get("/deploy")

    assert response.status_code == 405
    assert response.json() == {"success": False, "error": "Method Not Allowed"}
    assert runner.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("log_level, expect_details", [("DEBUG", True), ("INFO", False)])
async def test_request_details_logged_at_debug_level(
    tmp_path, runner, caplog, log_level, expect_details
) -> None:
    caplog.set_level(logging.DEBUG, logger="app.middleware.logging")
    settings = Settings(_env_file=None, LOG_LEVEL=log_level, STATIC_DIR=str(tmp_path / "none"))
    app = create_app(settings, command_runner=runner)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        await client.get("/health", headers={"Authorization": "Bearer secret-token"})

    assert ("Request details" in caplog.text) is expect_details
    assert "secret-token" not in caplog.text
