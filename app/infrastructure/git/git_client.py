from app.infrastructure.shell.command_runner import CommandRunner


class GitClient:
    def __init__(self, runner: CommandRunner, repo_dir: str, remote: str = "origin"):
        self.runner = runner
        self.repo_dir = repo_dir
        self.remote = remote

    async def fetch(self) -> None:
        await self.runner.run(["git", "fetch", self.remote], cwd=self.repo_dir)

    async def list_remote_branches(self) -> str:
        """Fetch the remote, then return raw `git branch -r` output."""
        await self.fetch()
        result = await self.runner.run(["git", "branch", "-r"], cwd=self.repo_dir)
        return result.stdout
