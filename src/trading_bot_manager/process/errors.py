"""Errors raised by the process layer."""
from typing import Optional, Sequence


class ProcessInvocationError(RuntimeError):
    """An external invocation did not complete successfully."""

    def __init__(self, command: Sequence[str], returncode: Optional[int],
                 stdout: str = "", stderr: str = "", reason: Optional[str] = None):
        self.command = list(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.reason = reason
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        message = f'The command "{" ".join(self.command)}" failed.'
        if self.reason:
            message += f"\n\n{self.reason}"
        message += f"\n\nExit Code: {self.returncode}"
        message += f"\n\nOutput:\n================\n{self.stdout}"
        message += f"\n\nError Output:\n================\n{self.stderr}"
        return message
