from app.domain.entities.command_result import CommandResult
from app.infrastructure.shell.command_runner import CommandRunner


class ScriptClient:
    """Runs the externally maintained deploy/cleanup scripts."""

    def __init__(
        self,
        runner: CommandRunner,
        scripts_dir: str,
        deploy_script: str = "deploy.sh",
        cleanup_script: str = "cleanup.sh",
    ):
        self.runner = runner
        self.scripts_dir = scripts_dir
        self.deploy_script = deploy_script
        self.cleanup_script = cleanup_script

    async def deploy(self, branch: str) -> CommandResult:
        return await self.runner.run(["bash", self.deploy_script, branch], cwd=self.scripts_dir)

    async def cleanup(self, branch: str) -> CommandResult:
        return await self.runner.run(["bash", self.cleanup_script, branch], cwd=self.scripts_dir)
