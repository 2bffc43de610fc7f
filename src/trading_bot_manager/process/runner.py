"""Synchronous execution of external commands."""
import subprocess
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .errors import ProcessInvocationError
from ..core.logging.structured_logger import get_logger


logger = get_logger(__name__)


@dataclass
class ProcessResult:
    """Outcome of one finished invocation."""
    command: List[str]
    returncode: Optional[int]
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = field(default=False)

    @property
    def successful(self) -> bool:
        return self.returncode == 0

    def check(self, reason: Optional[str] = None) -> "ProcessResult":
        """Return self when successful, raise ProcessInvocationError otherwise."""
        if not self.successful:
            raise self.to_error(reason)
        return self

    def to_error(self, reason: Optional[str] = None) -> ProcessInvocationError:
        return ProcessInvocationError(
            self.command, self.returncode, self.stdout, self.stderr, reason
        )


class ProcessRunner:
    """Runs an argument vector to completion and captures its output.

    Spawn errors and timeouts are reported as unsuccessful results so the
    calling operation applies its own failure policy.
    """

    def __init__(self, timeout: Optional[float] = None, cwd: Optional[str] = None,
                 env: Optional[Dict[str, str]] = None):
        self.timeout = timeout
        self.cwd = cwd
        self.env = env

    def run(self, command: Sequence[str]) -> ProcessResult:
        argv = [str(part) for part in command]
        try:
            proc = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                cwd=self.cwd,
                env=self.env,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            logger.warning("Invocation timed out", {"command": " ".join(argv), "timeout": self.timeout})
            return ProcessResult(
                command=argv,
                returncode=None,
                stdout=_decode(e.stdout),
                stderr=f"Timed out after {self.timeout} seconds",
                timed_out=True,
            )
        except OSError as e:
            logger.warning("Invocation could not be started", {"command": " ".join(argv), "error": str(e)})
            return ProcessResult(command=argv, returncode=None, stderr=str(e))

        return ProcessResult(
            command=argv,
            returncode=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )


def _decode(output) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode(errors="replace")
    return output
