from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Optional, TextIO


class Console:
    """Status lines on stdout, errors on stderr, optionally mirrored to a log file."""

    def __init__(self, log_file: Optional[Path] = None, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.log_file = log_file
        self.out = out
        self.err = err
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def info(self, msg: str) -> None:
        print(msg, file=self.out or sys.stdout, flush=True)
        self._log(msg)

    def error(self, msg: str) -> None:
        print(msg, file=self.err or sys.stderr, flush=True)
        self._log(f"ERROR {msg}")

    def _log(self, msg: str) -> None:
        if not self.log_file:
            return
        try:
            ts = time.strftime('%Y-%m-%d %H:%M:%S')
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(f'[{ts}] {msg.strip()}\n')
        except OSError:
            pass
