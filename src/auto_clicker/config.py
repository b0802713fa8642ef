from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Dict, Optional


@dataclasses.dataclass
class ClickerConfig:
    interval_ms: int = 100
    tolerance: int = 10
    backend: str = "cliclick"


@dataclasses.dataclass
class LoggingConfig:
    log_file: str = ""


@dataclasses.dataclass
class AppConfig:
    clicker: ClickerConfig = dataclasses.field(default_factory=ClickerConfig)
    logging: LoggingConfig = dataclasses.field(default_factory=LoggingConfig)

    @staticmethod
    def load(path: Path) -> "AppConfig":
        if not path.exists():
            return AppConfig()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            return AppConfig(
                clicker=ClickerConfig(**data.get("clicker", {})),
                logging=LoggingConfig(**data.get("logging", {})),
            )
        except (OSError, ValueError, TypeError, AttributeError) as e:
            raise ValueError(f"invalid config file {path}: {e}") from e

    def validate(self) -> "AppConfig":
        for name in ("interval_ms", "tolerance"):
            value = getattr(self.clicker, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.clicker.backend, str):
            raise ValueError(f"backend must be a string, got {self.clicker.backend!r}")
        if not isinstance(self.logging.log_file, str):
            raise ValueError(f"log_file must be a string, got {self.logging.log_file!r}")
        if self.clicker.interval_ms < 0:
            raise ValueError(f"interval must be >= 0 ms, got {self.clicker.interval_ms}")
        if self.clicker.tolerance < 0:
            raise ValueError(f"tolerance must be >= 0, got {self.clicker.tolerance}")
        if not self.clicker.backend.strip():
            raise ValueError("backend executable must not be empty")
        return self


def default_paths(base: Optional[Path] = None) -> Dict[str, Path]:
    if base is None:
        base = Path(__file__).resolve().parents[2]
    return {
        "base": base,
        "config": base / "config.json",
    }
