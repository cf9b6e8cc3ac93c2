import logging
import re
from typing import Callable, List

from app.domain.entities.command_result import CommandResult
from app.domain.entities.deployment import Deployment
from app.infrastructure.docker.docker_client import DockerClient
from app.infrastructure.scripts.script_client import ScriptClient
from app.utils.branch import validate_branch

logger = logging.getLogger(__name__)

PUBLISHED_PORT_PATTERN = re.compile(r"0\.0\.0\.0:(\d+)->")
NO_PORT = "N/A"


def parse_deployments(
    output: str, container_prefix: str, url_for: Callable[[str], str]
) -> List[Deployment]:
    """
    Turn `docker ps` output formatted as `name|ports|status` lines into deployments.

    The branch is the container name without its prefix; the port is the
    first host port published on 0.0.0.0, or "N/A" when nothing is published.
    """
    deployments = []
    for line in output.strip().split("\n"):
        if not line:
            continue
        fields = line.split("|")
        name = fields[0]
        ports = fields[1] if len(fields) > 1 else ""
        status = fields[2] if len(fields) > 2 else ""

        branch = name.replace(container_prefix, "", 1)
        port_match = PUBLISHED_PORT_PATTERN.search(ports)

        deployments.append(
            Deployment(
                branch=branch,
                container=name,
                port=port_match.group(1) if port_match else NO_PORT,
                status=status,
                url=url_for(branch),
            )
        )
    return deployments


class DeployService:
    def __init__(
        self,
        docker: DockerClient,
        scripts: ScriptClient,
        container_prefix: str,
        url_for: Callable[[str], str],
    ):
        self.docker = docker
        self.scripts = scripts
        self.container_prefix = container_prefix
        self.url_for = url_for

    async def list_deployments(self) -> List[Deployment]:
        output = await self.docker.list_containers(self.container_prefix)
        return parse_deployments(output, self.container_prefix, self.url_for)

    async def deploy(self, branch: str) -> CommandResult:
        branch = validate_branch(branch)
        logger.info(f"🚀 Deploying branch: {branch}")
        result = await self.scripts.deploy(branch)
        logger.info(f"✅ Deployed branch: {branch}")
        return result

    async def cleanup(self, branch: str) -> CommandResult:
        branch = validate_branch(branch)
        logger.info(f"🧹 Cleaning up branch: {branch}")
        result = await self.scripts.cleanup(branch)
        logger.info(f"✅ Cleaned up branch: {branch}")
        return result
