from typing import List

from app.infrastructure.git.git_client import GitClient


def parse_remote_branches(output: str, remote: str = "origin") -> List[str]:
    """Branch names from `git branch -r` output, without the remote prefix or HEAD pointer."""
    branches = []
    for line in output.strip().split("\n"):
        name = line.strip().replace(f"{remote}/", "", 1)
        if name and "HEAD" not in name:
            branches.append(name)
    return branches


class BranchService:
    def __init__(self, git: GitClient):
        self.git = git

    async def list_branches(self) -> List[str]:
        output = await self.git.list_remote_branches()
        return parse_remote_branches(output, self.git.remote)
