from app.infrastructure.shell.command_runner import CommandRunner

# Fields are joined with "|" so a line splits back into name, ports, status.
PS_FORMAT = "{{.Names}}|{{.Ports}}|{{.Status}}"


class DockerClient:
    def __init__(self, runner: CommandRunner):
        self.runner = runner

    async def list_containers(self, name_filter: str) -> str:
        """Raw `docker ps` output for running containers whose name matches the filter."""
        result = await self.runner.run(
            ["docker", "ps", "--filter", f"name={name_filter}", "--format", PS_FORMAT]
        )
        return result.stdout
