from __future__ import annotations

import argparse
import signal
import sys
from pathlib import Path
from typing import Optional

from .backend import Cliclick
from .config import AppConfig, default_paths
from .console import Console
from .loop import AutoClickLoop


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Auto clicker that stops when the mouse moves")
    parser.add_argument("--config", type=Path, default=None, help="JSON config file (default: config.json in project root)")
    parser.add_argument("--interval", type=int, default=None, help="Click interval (ms)")
    parser.add_argument("--tolerance", type=int, default=None, help="Allowed movement per axis between clicks (px)")
    parser.add_argument("--backend", type=str, default=None, help="cliclick executable name or path")
    parser.add_argument("--log-file", type=str, default=None, help="Append status lines to this file")
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    path = args.config or default_paths()["config"]
    cfg = AppConfig.load(path)
    if args.interval is not None:
        cfg.clicker.interval_ms = args.interval
    if args.tolerance is not None:
        cfg.clicker.tolerance = args.tolerance
    if args.backend is not None:
        cfg.clicker.backend = args.backend
    if args.log_file is not None:
        cfg.logging.log_file = args.log_file
    return cfg.validate()


def main(argv=None, backend=None) -> int:
    """Run the clicker and return the process exit code.

    `backend` replaces the cliclick wrapper; tests pass a scripted fake.
    """
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args)
    except ValueError as e:
        Console().error(f"Error: {e}")
        return 1

    console = Console(Path(cfg.logging.log_file) if cfg.logging.log_file else None)
    loop = AutoClickLoop(
        backend or Cliclick(cfg.clicker.backend),
        interval_ms=cfg.clicker.interval_ms,
        tolerance=cfg.clicker.tolerance,
        console=console,
    )

    previous = signal.signal(signal.SIGINT, lambda signum, frame: loop.request_stop())
    try:
        state = loop.run()
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)
    console.info("Auto clicker finished.")
    return state.exit_code


def run(argv: Optional[list] = None) -> None:
    sys.exit(main(argv))


if __name__ == "__main__":
    run(sys.argv[1:])
