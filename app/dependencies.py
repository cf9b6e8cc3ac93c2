from fastapi import Depends, Request

from app.config import Settings
from app.domain.services.branch_service import BranchService
from app.domain.services.deploy_service import DeployService
from app.domain.services.route_service import RouteService
from app.infrastructure.docker.docker_client import DockerClient
from app.infrastructure.git.git_client import GitClient
from app.infrastructure.proxy.caddy_client import CaddyClient
from app.infrastructure.scripts.script_client import ScriptClient
from app.infrastructure.shell.command_runner import CommandRunner


# Settings and the runner are built once by create_app() and live on app.state.
def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_command_runner(request: Request) -> CommandRunner:
    return request.app.state.command_runner


def get_deploy_service(
    settings: Settings = Depends(get_settings),
    runner: CommandRunner = Depends(get_command_runner),
) -> DeployService:
    return DeployService(
        DockerClient(runner),
        ScriptClient(
            runner,
            scripts_dir=settings.SCRIPTS_DIR,
            deploy_script=settings.DEPLOY_SCRIPT,
            cleanup_script=settings.CLEANUP_SCRIPT,
        ),
        container_prefix=settings.CONTAINER_PREFIX,
        url_for=settings.deployment_url,
    )


def get_branch_service(
    settings: Settings = Depends(get_settings),
    runner: CommandRunner = Depends(get_command_runner),
) -> BranchService:
    return BranchService(GitClient(runner, repo_dir=settings.REPO_DIR, remote=settings.GIT_REMOTE))


def get_route_service(
    settings: Settings = Depends(get_settings),
    runner: CommandRunner = Depends(get_command_runner),
) -> RouteService:
    return RouteService(CaddyClient(runner, routes_url=settings.routes_url))
