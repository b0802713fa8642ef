from .cliclick import (
    BackendCommandFailed,
    BackendError,
    BackendUnavailable,
    Cliclick,
    MalformedOutput,
    PermissionDenied,
)

__all__ = [
    "BackendCommandFailed",
    "BackendError",
    "BackendUnavailable",
    "Cliclick",
    "MalformedOutput",
    "PermissionDenied",
]
