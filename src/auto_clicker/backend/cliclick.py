from __future__ import annotations

import re
import subprocess
from typing import List, Optional

from ..geometry import Coordinate

POSITION = "p:."
CLICK = "c:."

_INT = re.compile(r"-?[0-9]+")


class BackendError(Exception):
    pass


class BackendUnavailable(BackendError):
    def __init__(self, executable: str, reason: Optional[str] = None):
        self.executable = executable
        self.reason = reason
        if reason:
            msg = f"'{executable}' could not be started: {reason}"
        else:
            msg = (
                f"'{executable}' command not found. Please install it "
                f"(e.g., `brew install cliclick`) and ensure it's in your PATH."
            )
        super().__init__(msg)


class BackendCommandFailed(BackendError):
    def __init__(self, command: List[str], returncode: int, stderr: str):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"{' '.join(command)} failed with code {returncode}: {stderr}")


class PermissionDenied(BackendCommandFailed):
    def __str__(self) -> str:
        return f"{super().__str__()}\n{grant_permissions_hint()}"


class MalformedOutput(BackendError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Invalid coordinate format received: {raw!r}")


def grant_permissions_hint() -> str:
    return (
        "On macOS, grant Accessibility permissions to Terminal/iTerm:\n"
        "System Settings > Privacy & Security > Accessibility > enable for your terminal."
    )


def parse_position(output: str) -> Coordinate:
    """Parse ``"x,y"`` as printed by ``cliclick p:.``."""
    parts = output.strip().split(",")
    if len(parts) != 2 or not all(_INT.fullmatch(p) for p in parts):
        raise MalformedOutput(output)
    return Coordinate(int(parts[0]), int(parts[1]))


class Cliclick:
    """Thin wrapper over the cliclick executable.

    Every call waits for the child process to exit; there is no timeout.
    """

    def __init__(self, executable: str = "cliclick"):
        self.executable = executable

    def run_backend(self, mode: str) -> str:
        args = [self.executable, mode]
        try:
            proc = subprocess.run(args, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise BackendUnavailable(self.executable) from e
        except OSError as e:
            raise BackendUnavailable(self.executable, e.strerror or str(e)) from e
        if proc.returncode != 0:
            err = (proc.stderr or "").strip()
            # Matching on the message text is locale dependent.
            if "permission" in err.lower():
                raise PermissionDenied(args, proc.returncode, err)
            raise BackendCommandFailed(args, proc.returncode, err)
        return (proc.stdout or "").strip()

    def position(self) -> Coordinate:
        return parse_position(self.run_backend(POSITION))

    def click(self) -> None:
        self.run_backend(CLICK)

    def __repr__(self) -> str:
        return f"Cliclick({self.executable!r})"
