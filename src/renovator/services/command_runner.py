"""Subprocess execution service for Renovator."""

import io
import subprocess
import sys
from typing import Callable, List, Optional

from renovator.errors import RenovatorError
from renovator.errors_catalog import actionable_error


class CommandRunner:
    """Runs the container engine, relaying its output as it arrives."""

    def __init__(self, logger, subprocess_module=subprocess):
        self.logger = logger
        self.subprocess = subprocess_module

    def stream(
        self,
        cmd: List[str],
        line_filter: Optional[Callable[[str], str]] = None,
        output=None,
    ) -> int:
        """Run ``cmd`` and copy its stdout to ``output``, one line at a time.

        Carriage returns are kept as line terminators so progress redraws
        pass through unchanged, and undecodable bytes are replaced rather
        than aborting the relay. The returned status follows shell
        conventions: a child killed by signal N yields 128 + N.
        """
        cmd_str = " ".join(cmd)
        self.logger.debug("Executing: %s", cmd_str)

        out = output if output is not None else sys.stdout

        try:
            process = self.subprocess.Popen(cmd, stdout=self.subprocess.PIPE)
        except FileNotFoundError as exc:
            raise RenovatorError(actionable_error("engine_not_found", engine=cmd[0])) from exc
        except OSError as exc:
            raise RenovatorError(
                actionable_error("engine_failed", engine=cmd[0], reason=str(exc))
            ) from exc

        with process:
            lines = io.TextIOWrapper(process.stdout, encoding="utf-8", errors="replace", newline="")
            for line in lines:
                if line_filter is not None:
                    line = line_filter(line)
                out.write(line)
                out.flush()
            returncode = process.wait()

        if returncode < 0:
            self.logger.debug("Command terminated by signal %s: %s", -returncode, cmd_str)
            returncode = 128 - returncode
        elif returncode != 0:
            self.logger.debug("Command failed (%s): %s", returncode, cmd_str)
        return returncode
