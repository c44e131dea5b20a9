"""Bring one local mirror in line with its remote repository."""

from __future__ import annotations

import logging
import os

from .constants import BARE_SUFFIX
from .errors import SyncError
from .filesystem import LocalFileSystem, MirrorFileSystem
from .git_client import GitClient, VersionControl
from .types import RepositoryDescriptor, SyncAction, SyncPhase

logger = logging.getLogger(__name__)


class MirrorReconciler:
    """Clone a repository that has no local mirror yet, fetch into one that does.

    Bare mirrors also carry a `description` file that is rewritten after every
    successful clone or fetch. Working copies have no such file.
    """

    def __init__(
        self,
        git: VersionControl | None = None,
        fs: MirrorFileSystem | None = None,
        *,
        bare: bool = True,
    ) -> None:
        self.git = git or GitClient()
        self.fs = fs or LocalFileSystem()
        self.bare = bare

    def mirror_path(self, name: str, target_dir: str) -> str:
        return os.path.join(target_dir, name + (BARE_SUFFIX if self.bare else ""))

    def reconcile(self, repo: RepositoryDescriptor, target_dir: str) -> SyncAction:
        path = self.mirror_path(repo.name, target_dir)

        # An existing path is trusted as a complete mirror.
        if not self.fs.mirror_exists(path):
            logger.info("[clone] %s -> %s", repo.name, path)
            ok, err = self.git.initialize_mirror(repo.remote_url, path, bare=self.bare)
            if not ok:
                raise SyncError(SyncPhase.clone, repo.name, err or "git clone failed")
            action = SyncAction.initialize
        else:
            logger.info("[fetch] %s", repo.name)
            ok, err = self.git.refresh_mirror(path, bare=self.bare)
            if not ok:
                raise SyncError(SyncPhase.fetch, repo.name, err or "git fetch failed")
            action = SyncAction.update

        if self.bare:
            try:
                self.fs.write_description(path, repo.description)
            except OSError as e:
                raise SyncError(SyncPhase.describe, repo.name, str(e)) from e
        return action
