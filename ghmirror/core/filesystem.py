"""Local filesystem access used by the reconciler."""

from __future__ import annotations

import os
from typing import Protocol

from .constants import DESCRIPTION_FILE


class MirrorFileSystem(Protocol):
    def mirror_exists(self, path: str) -> bool: ...

    def write_description(self, path: str, description: str) -> None: ...


class LocalFileSystem:
    def mirror_exists(self, path: str) -> bool:
        return os.path.exists(path)

    def write_description(self, path: str, description: str) -> None:
        """Overwrite <path>/description with exactly `description`. Raises OSError."""
        with open(os.path.join(path, DESCRIPTION_FILE), "w", encoding="utf-8", newline="") as fh:
            fh.write(description)
