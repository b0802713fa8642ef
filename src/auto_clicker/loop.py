from __future__ import annotations

import enum
import threading
from dataclasses import dataclass, replace
from typing import Optional

from .backend import BackendError
from .console import Console
from .geometry import Coordinate, exceeds_tolerance


class Phase(enum.Enum):
    INITIALIZING = "initializing"
    RUNNING = "running"
    STOPPED = "stopped"
    FAILED = "failed"


INTERRUPTED = "interrupted"
MOVED = "moved"


@dataclass(frozen=True)
class LoopState:
    phase: Phase = Phase.INITIALIZING
    last: Optional[Coordinate] = None
    clicks: int = 0
    reason: str = ""

    @property
    def done(self) -> bool:
        return self.phase in (Phase.STOPPED, Phase.FAILED)

    @property
    def exit_code(self) -> Optional[int]:
        if self.phase is Phase.STOPPED:
            return 0
        if self.phase is Phase.FAILED:
            return 1
        return None


class AutoClickLoop:
    """Clicks at the pointer every `interval_ms` until the pointer moves.

    The backend needs ``position() -> Coordinate`` and ``click()``, raising
    BackendError on failure. ``request_stop`` may be called from a signal
    handler at any point; it only ever moves the loop toward STOPPED.
    """

    def __init__(self, backend, interval_ms: int = 100, tolerance: int = 10, console: Optional[Console] = None):
        self.backend = backend
        self.interval_ms = interval_ms
        self.tolerance = tolerance
        self.console = console or Console()
        self._stop = threading.Event()

    def request_stop(self) -> None:
        self._stop.set()

    @property
    def stop_requested(self) -> bool:
        return self._stop.is_set()

    def banner(self) -> None:
        self.console.info(f"Auto Clicker started (stops if mouse moves more than {self.tolerance} pixels).")
        self.console.info(f"Click interval: {self.interval_ms} ms")
        self.console.info("Press Ctrl + C to stop manually.")
        self.console.info("-" * 50)

    def _fail(self, state: LoopState, what: str, err: BackendError) -> LoopState:
        # A terminal Ctrl+C also kills the running cliclick child.
        if self.stop_requested:
            return self._interrupted(state)
        self.console.error(f"Error: {what}: {err}")
        return replace(state, phase=Phase.FAILED, reason=str(err))

    def _interrupted(self, state: LoopState) -> LoopState:
        return replace(state, phase=Phase.STOPPED, reason=INTERRUPTED)

    def initialize(self) -> LoopState:
        state = LoopState()
        if self.stop_requested:
            return self._interrupted(state)
        try:
            first = self.backend.position()
        except BackendError as e:
            return self._fail(state, "Could not get initial coordinates", e)
        self.console.info(f"Initial click coordinates: {first}")
        if self.stop_requested:
            return self._interrupted(state)
        try:
            self.backend.click()
        except BackendError as e:
            return self._fail(state, "Failed to perform initial click", e)
        return LoopState(phase=Phase.RUNNING, last=first, clicks=1)

    def tick(self, state: LoopState) -> LoopState:
        if state.done:
            return state
        if self.stop_requested:
            return self._interrupted(state)
        try:
            current = self.backend.position()
        except BackendError as e:
            return self._fail(state, "Failed to get current coordinates", e)

        if exceeds_tolerance(state.last, current, self.tolerance):
            self.console.info("\nMouse moved significantly.")
            self.console.info(f"  Previous coordinates: {state.last}")
            self.console.info(f"  Current coordinates: {current}")
            self.console.info("Stopping auto clicker.")
            return replace(state, phase=Phase.STOPPED, reason=MOVED)

        # An interrupt during the probe must not be followed by a click.
        if self.stop_requested:
            return self._interrupted(state)
        self.console.info(f"Clicking at {current}...")
        try:
            self.backend.click()
        except BackendError as e:
            return self._fail(state, "Failed to perform click", e)
        return replace(state, last=current, clicks=state.clicks + 1)

    def run(self) -> LoopState:
        self.banner()
        state = self.initialize()
        interval = self.interval_ms / 1000.0
        while not state.done:
            # The next wait starts only after the previous tick returned.
            if self._stop.wait(interval):
                state = self._interrupted(state)
                break
            state = self.tick(state)
        if state.reason == INTERRUPTED:
            self.console.info("\nCtrl+C detected. Stopping auto clicker.")
        return state
