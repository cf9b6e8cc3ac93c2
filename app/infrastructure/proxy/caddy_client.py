from app.infrastructure.shell.command_runner import CommandRunner


class CaddyClient:
    """Reads configuration from the reverse proxy's local admin API."""

    def __init__(self, runner: CommandRunner, routes_url: str):
        self.runner = runner
        self.routes_url = routes_url

    async def get_routes_config(self) -> str:
        result = await self.runner.run(["curl", "-s", self.routes_url])
        return result.stdout
