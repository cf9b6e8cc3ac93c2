from typing import Optional


class CommandError(Exception):
    """An external process exited non-zero or could not be spawned.

    Carries whatever output was captured before the failure so callers can
    surface it in the HTTP response.
    """

    def __init__(
        self,
        message: str,
        stdout: str = "",
        stderr: str = "",
        returncode: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode

    @property
    def details(self) -> str:
        return self.stdout or self.message


class BranchValidationError(ValueError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RouteConfigParseError(ValueError):
    """Route configuration returned by the proxy admin API was not usable."""
