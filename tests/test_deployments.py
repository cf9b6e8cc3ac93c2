"""Tests for listing running deployments."""

import pytest
from httpx import AsyncClient

from app.domain.services.deploy_service import parse_deployments


def _url(branch: str) -> str:
    return f"http://deploy.example.com:3001/{branch}/"


def test_parse_deployment_with_published_port() -> None:
    deployments = parse_deployments("app1_main|0.0.0.0:4001->80/tcp|Up 2 hours\n", "app1_", _url)
    assert len(deployments) == 1
    assert deployments[0].model_dump() == {
        "branch": "main",
        "container": "app1_main",
        "port": "4001",
        "status": "Up 2 hours",
        "url": "http://deploy.example.com:3001/main/",
    }


def test_parse_deployment_without_published_port() -> None:
    deployments = parse_deployments("app1_dev|80/tcp|Up 5 minutes", "app1_", _url)
    assert deployments[0].port == "N/A"


def test_parse_deployment_uses_first_published_port() -> None:
    line = "app1_dev|0.0.0.0:4002->80/tcp, :::4002->80/tcp, 0.0.0.0:4003->443/tcp|Up 1 second"
    assert parse_deployments(line, "app1_", _url)[0].port == "4002"


def test_parse_deployments_skips_blank_lines() -> None:
    output = "app1_a||Up 1 hour\n\napp1_b||Exited (0)\n"
    branches = [d.branch for d in parse_deployments(output, "app1_", _url)]
    assert branches == ["a", "b"]


def test_parse_deployments_empty_output() -> None:
    assert parse_deployments("", "app1_", _url) == []


def test_parse_deployment_missing_fields() -> None:
    deployment = parse_deployments("app1_lonely", "app1_", _url)[0]
    assert deployment.port == "N/A"
    assert deployment.status == ""


@pytest.mark.asyncio
async def test_list_deployments(client: AsyncClient, runner) -> None:
    runner.respond(
        ["docker", "ps"],
        stdout="app1_main|0.0.0.0:4001->80/tcp|Up 2 hours\napp1_feature-x||Up 3 minutes\n",
    )

    response = await client.get("/deployments")

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["deployments"] == [
        {
            "branch": "main",
            "container": "app1_main",
            "port": "4001",
            "status": "Up 2 hours",
            "url": "http://deploy.example.com:3001/main/",
        },
        {
            "branch": "feature-x",
            "container": "app1_feature-x",
            "port": "N/A",
            "status": "Up 3 minutes",
            "url": "http://deploy.example.com:3001/feature-x/",
        },
    ]


@pytest.mark.asyncio
async def test_list_deployments_filters_by_prefix(client: AsyncClient, runner) -> None:
    await client.get("/deployments")
    argv = runner.argvs[0]
    assert argv[:2] == ["docker", "ps"]
    assert "name=app1_" in argv
    assert "{{.Names}}|{{.Ports}}|{{.Status}}" in argv


@pytest.mark.asyncio
async def test_list_deployments_command_failure(client: AsyncClient, runner) -> None:
    runner.fail(
        ["docker", "ps"],
        message="Command failed: docker ps",
        stderr="Cannot connect to the Docker daemon",
    )

    response = await client.get("/deployments")

    assert response.status_code == 500
    data = response.json()
    assert data["success"] is False
    assert data["error"] == "Failed to fetch deployments"
    assert data["details"] == "Command failed: docker ps"
    assert data["stderr"] == "Cannot connect to the Docker daemon"
