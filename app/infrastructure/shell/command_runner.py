import asyncio
import logging
import shlex
from typing import Optional, Sequence

from app.domain.entities.command_result import CommandResult
from app.domain.errors import CommandError

logger = logging.getLogger(__name__)

DEFAULT_MAX_OUTPUT_BYTES = 10 * 1024 * 1024
_READ_CHUNK_SIZE = 64 * 1024


class _OutputLimitExceeded(Exception):
    def __init__(self, stream_name: str):
        super().__init__(stream_name)
        self.stream_name = stream_name


def _decode(buffer: bytearray) -> str:
    return bytes(buffer).decode("utf-8", errors="replace")


class CommandRunner:
    """
    Runs external commands and captures their output.

    Commands are always executed from an argument vector, never through a
    shell, so user supplied values cannot change the command line.
    """

    def __init__(
        self,
        default_cwd: str,
        max_output_bytes: int = DEFAULT_MAX_OUTPUT_BYTES,
        max_concurrent: int = 0,
    ):
        """
        Args:
            default_cwd: Working directory used when a call does not pass one
            max_output_bytes: Capture limit applied to stdout and stderr separately
            max_concurrent: Upper bound on simultaneously running commands (0 = unbounded)
        """
        self.default_cwd = default_cwd
        self.max_output_bytes = max_output_bytes
        self._semaphore = asyncio.Semaphore(max_concurrent) if max_concurrent > 0 else None

    async def run(self, argv: Sequence[str], cwd: Optional[str] = None) -> CommandResult:
        """
        Run a command and wait for it to exit.

        Raises:
            CommandError: the command could not be spawned, exited non-zero,
                or produced more output than allowed
        """
        argv = [str(arg) for arg in argv]
        if not argv:
            raise CommandError("No command given")

        # A client disconnect cancels the request, not the process.
        task = asyncio.ensure_future(self._run_bounded(argv, cwd or self.default_cwd))
        task.add_done_callback(self._collect_result)
        return await asyncio.shield(task)

    @staticmethod
    def _collect_result(task: asyncio.Future) -> None:
        # Retrieves the outcome even when the awaiting request was cancelled.
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.debug(f"📋 Command task finished with error: {exc}")

    async def _run_bounded(self, argv: list[str], cwd: str) -> CommandResult:
        if self._semaphore is None:
            return await self._execute(argv, cwd)
        async with self._semaphore:
            return await self._execute(argv, cwd)

    async def _execute(self, argv: list[str], cwd: str) -> CommandResult:
        command = shlex.join(argv)
        logger.info(f"🔧 Running: {command} (cwd={cwd})")

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                cwd=cwd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.error(f"❌ Could not start {command}: {e}")
            raise CommandError(f"spawn {argv[0]} failed: {e}") from e

        stdout = bytearray()
        stderr = bytearray()
        try:
            await asyncio.gather(
                self._drain(process.stdout, stdout, "stdout"),
                self._drain(process.stderr, stderr, "stderr"),
            )
        except _OutputLimitExceeded as e:
            process.kill()
            returncode = await process.wait()
            logger.error(f"❌ {command}: {e.stream_name} exceeded {self.max_output_bytes} bytes")
            raise CommandError(
                f"{e.stream_name} maxBuffer length exceeded",
                stdout=_decode(stdout),
                stderr=_decode(stderr),
                returncode=returncode,
            )

        returncode = await process.wait()
        stdout_text = _decode(stdout)
        stderr_text = _decode(stderr)

        if returncode != 0:
            logger.error(f"❌ {command} exited with code {returncode}")
            raise CommandError(
                f"Command failed: {command}\n{stderr_text}",
                stdout=stdout_text,
                stderr=stderr_text,
                returncode=returncode,
            )

        return CommandResult(stdout=stdout_text, stderr=stderr_text)

    async def _drain(
        self, stream: asyncio.StreamReader, buffer: bytearray, stream_name: str
    ) -> None:
        while True:
            chunk = await stream.read(_READ_CHUNK_SIZE)
            if not chunk:
                return
            remaining = self.max_output_bytes - len(buffer)
            if len(chunk) > remaining:
                buffer.extend(chunk[:remaining])
                raise _OutputLimitExceeded(stream_name)
            buffer.extend(chunk)
