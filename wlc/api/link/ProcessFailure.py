"""Raised when the checker process cannot be spawned or exits non-zero."""

from .LinkCheckError import LinkCheckError


class ProcessFailure(LinkCheckError):
    """The external tool failed.

    Attributes:
        command: Command that was run
        exit_code: Exit code of the process, None when it could not be spawned
        stderr: Captured standard error, empty when the process never started
    """

    def __init__(self, command: str, exit_code: int | None, stderr: str = "", reason: str = ""):
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        if exit_code is None:
            message = f"Failed to run '{command}': {reason or 'could not start process'}"
        else:
            message = f"Failed to run '{command}', exit code {exit_code}"
        super().__init__(message)
