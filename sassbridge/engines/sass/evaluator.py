"""
Evaluators run a generated Ruby script and return the value of `result`.

RubyEvaluator starts a fresh interpreter per call, so no state survives
between evaluations. Optional SASS_EXEC_TIMEOUT bounds one evaluation.
"""

import logging
import subprocess
from typing import Any, Protocol

from sassbridge.core.config import settings

from .script import RESULT_VARIABLE

_log = logging.getLogger(__name__)


class EvaluationError(RuntimeError):
    """Raised when the evaluator rejects or fails to run a script."""

    pass


class EvaluationTimeoutError(EvaluationError):
    """Raised when an evaluation exceeds SASS_EXEC_TIMEOUT."""

    pass


class Evaluator(Protocol):
    def evaluate(self, script: str) -> Any:
        """Run script; return the value it assigned to `result`. Raise EvaluationError on failure."""
        ...


class RubyEvaluator:
    """
    Pipe the script into `ruby` on stdin and read `result` back from stdout.
    """

    def __init__(
        self,
        *,
        binary: str | None = None,
        timeout: int | None = None,
    ) -> None:
        self.binary = binary or settings.SASS_RUBY_BINARY
        self.timeout = settings.SASS_EXEC_TIMEOUT if timeout is None else timeout

    def _program(self, script: str) -> bytes:
        return (script + f"$stdout.write({RESULT_VARIABLE}.to_s)\n").encode("utf-8")

    def evaluate(self, script: str) -> str:
        timeout = self.timeout if self.timeout and self.timeout > 0 else None
        try:
            program = self._program(script)
        except UnicodeError as e:
            raise EvaluationError(f"Script is not encodable as UTF-8: {e}") from e
        try:
            proc = subprocess.run(
                [self.binary, "-E", "UTF-8:UTF-8", "-"],
                input=program,
                capture_output=True,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise EvaluationTimeoutError(
                f"Sass evaluation timed out after {timeout}s"
            ) from e
        except OSError as e:
            raise EvaluationError(f"Cannot start {self.binary}: {e}") from e
        if proc.returncode != 0:
            stderr = proc.stderr.decode("utf-8", errors="replace").strip()
            _log.debug("ruby exited with %s: %s", proc.returncode, stderr)
            raise EvaluationError(stderr or f"{self.binary} exited with status {proc.returncode}")
        try:
            return proc.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EvaluationError(f"{self.binary} wrote invalid UTF-8: {e}") from e
