"""Tests for listing remote branches."""

import pytest
from httpx import AsyncClient

from app.domain.services.branch_service import parse_remote_branches


def test_parse_remote_branches() -> None:
    output = "  origin/main\n  origin/HEAD -> origin/main\n  origin/dev\n"
    assert parse_remote_branches(output) == ["main", "dev"]


def test_parse_remote_branches_empty() -> None:
    assert parse_remote_branches("") == []


def test_parse_remote_branches_other_remote() -> None:
    output = "  upstream/main\n  upstream/release-1\n"
    assert parse_remote_branches(output, remote="upstream") == ["main", "release-1"]


@pytest.mark.asyncio
async def test_list_branches_fetches_first(client: AsyncClient, runner) -> None:
    runner.respond(["git", "branch", "-r"], stdout="  origin/main\n  origin/HEAD -> origin/main\n  origin/dev\n")

    response = await client.get("/branches")

    assert response.status_code == 200
    assert response.json() == {"success": True, "branches": ["main", "dev"]}
    assert runner.calls == [
        (["git", "fetch", "origin"], "/srv/repos/app1"),
        (["git", "branch", "-r"], "/srv/repos/app1"),
    ]


@pytest.mark.asyncio
async def test_list_branches_fetch_failure(client: AsyncClient, runner) -> None:
    runner.fail(
        ["git", "fetch"],
        message="Command failed: git fetch origin",
        stderr="fatal: could not read from remote repository",
        returncode=128,
    )

    response = await client.get("/branches")

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Failed to fetch branches"
    assert data["stderr"] == "fatal: could not read from remote repository"
    # Listing is not attempted after a failed fetch
    assert runner.argvs == [["git", "fetch", "origin"]]
