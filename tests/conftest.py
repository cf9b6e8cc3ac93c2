"""Shared fixtures: an app wired to a fake command runner."""

from typing import Dict, List, Optional, Sequence, Tuple

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.domain.entities.command_result import CommandResult
from app.domain.errors import CommandError
from app.main import create_app


class FakeCommandRunner:
    """
    Stands in for CommandRunner. Records every call and answers with canned
    results keyed by argv prefix (the longest matching prefix wins).
    """

    def __init__(self):
        self.calls: List[Tuple[List[str], Optional[str]]] = []
        self._responses: Dict[Tuple[str, ...], object] = {}

    def respond(self, prefix: Sequence[str], stdout: str = "", stderr: str = "") -> None:
        self._responses[tuple(prefix)] = CommandResult(stdout=stdout, stderr=stderr)

    def fail(
        self,
        prefix: Sequence[str],
        message: str = "Command failed",
        stdout: str = "",
        stderr: str = "",
        returncode: int = 1,
    ) -> None:
        self._responses[tuple(prefix)] = CommandError(
            message, stdout=stdout, stderr=stderr, returncode=returncode
        )

    def raise_on(self, prefix: Sequence[str], exc: Exception) -> None:
        self._responses[tuple(prefix)] = exc

    @property
    def argvs(self) -> List[List[str]]:
        return [argv for argv, _ in self.calls]

    async def run(self, argv: Sequence[str], cwd: Optional[str] = None) -> CommandResult:
        argv = list(argv)
        self.calls.append((argv, cwd))

        matches = [p for p in self._responses if tuple(argv[: len(p)]) == p]
        if not matches:
            return CommandResult()
        response = self._responses[max(matches, key=len)]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        SCRIPTS_DIR="/srv/scripts",
        REPO_DIR="/srv/repos/app1",
        CONTAINER_PREFIX="app1_",
        PUBLIC_BASE_URL="http://deploy.example.com:3001",
        PROXY_ADMIN_URL="http://127.0.0.1:2020",
        STATIC_DIR=str(tmp_path / "no-static"),
    )


@pytest.fixture
def runner() -> FakeCommandRunner:
    return FakeCommandRunner()


@pytest.fixture
def app(settings, runner):
    return create_app(settings, command_runner=runner)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
