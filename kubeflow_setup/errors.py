from __future__ import annotations

import shlex
from typing import Sequence


class SetupError(Exception):
    """Base class for errors raised by the setup tool itself."""


class StaleStateError(SetupError):
    """The progress marker names a step that is not in the step sequence."""

    def __init__(self, marker: str, known_steps: Sequence[str]):
        self.marker = marker
        self.known_steps = list(known_steps)
        super().__init__(
            f"Progress marker {marker!r} does not match any known step "
            f"(known: {', '.join(self.known_steps)})"
        )


class CommandError(SetupError):
    """An external command exited non-zero."""

    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = ""):
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        cmd = " ".join(shlex.quote(a) for a in self.argv)
        msg = f"Command failed ({returncode}): {cmd}"
        if stderr and stderr.strip():
            msg += f"\n{stderr.strip()}"
        super().__init__(msg)


class PauseRequested(Exception):
    """Raised by a step that needs the operator to act before it can be retried.

    Not an error: the sequencer stops cleanly and leaves the marker on the
    previous step.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
