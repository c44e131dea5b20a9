"""Exceptions raised by ghmirror."""

from __future__ import annotations

from .types import FetchCause, SyncPhase


class GhMirrorError(RuntimeError):
    pass


class ConfigError(GhMirrorError):
    """Required configuration is missing or unusable."""


class FetchError(GhMirrorError):
    """Listing the account's repositories failed; the whole listing is discarded."""

    def __init__(self, cause: FetchCause, message: str, status: int | None = None) -> None:
        self.cause = cause
        self.status = status
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.status is not None:
            return f"{self.cause.value} ({self.status}): {self.message}"
        return f"{self.cause.value}: {self.message}"


class SyncError(GhMirrorError):
    """Reconciling one repository failed."""

    def __init__(self, phase: SyncPhase, repo: str, cause: str) -> None:
        self.phase = phase
        self.repo = repo
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.phase.value} failed for {self.repo}: {self.cause}"
