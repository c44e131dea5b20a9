"""Small helpers for running Git commands against local mirrors."""

from __future__ import annotations

import os
import subprocess
from typing import Protocol

MIRROR_REFSPECS = ("+refs/heads/*:refs/heads/*", "+refs/tags/*:refs/tags/*")


class VersionControl(Protocol):
    def initialize_mirror(self, remote_url: str, path: str, *, bare: bool) -> tuple[bool, str | None]: ...

    def refresh_mirror(self, path: str, *, bare: bool) -> tuple[bool, str | None]: ...


class GitClient:
    # ---------- process helpers ----------
    @staticmethod
    def _run(cmd: list[str], cwd: str | None = None) -> tuple[bool, str | None]:
        env = os.environ.copy()
        # never block on a credential prompt
        env["GIT_TERMINAL_PROMPT"] = "0"
        try:
            subprocess.check_call(cmd, cwd=cwd, env=env)
            return True, None
        except subprocess.CalledProcessError as e:
            return False, f"{e}"
        except FileNotFoundError:
            return False, "git not found on PATH"

    # ---------- mirror ops ----------
    def initialize_mirror(self, remote_url: str, path: str, *, bare: bool = True) -> tuple[bool, str | None]:
        cmd = ["git", "clone"]
        if bare:
            cmd.append("--bare")
        cmd += [remote_url, path]
        return self._run(cmd)

    def refresh_mirror(self, path: str, *, bare: bool = True) -> tuple[bool, str | None]:
        if bare:
            # clone --bare sets no fetch refspec; name one so local branches and tags move
            return self._run(["git", "--git-dir", path, "fetch", "origin", *MIRROR_REFSPECS])
        return self._run(["git", "fetch", "--all"], cwd=path)
