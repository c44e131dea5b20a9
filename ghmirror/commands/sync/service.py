"""Services for the sync command."""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, field

from ...core.errors import ConfigError, SyncError
from ...core.github_client import GitHubClient
from ...core.reconciler import MirrorReconciler

logger = logging.getLogger(__name__)


@dataclass
class SyncSummary:
    total: int = 0
    succeeded: int = 0
    failed: list[str] = field(default_factory=list)


def sync_all(client: GitHubClient, reconciler: MirrorReconciler, dest: str) -> SyncSummary:
    """Mirror every repository of the account into dest.

    A FetchError from the listing propagates before anything touches disk.
    A SyncError for one repository is logged and the next one is attempted.
    """
    repos = client.list_user_repos()
    try:
        os.makedirs(dest, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"cannot create target directory {dest!r}: {e}") from e
    summary = SyncSummary(total=len(repos))
    if not repos:
        logger.info("No repositories found (check username / permissions).")
        return summary

    logger.info("Found %d repositories. Mirroring to '%s'...", len(repos), dest)
    start = time.time()
    for r in repos:
        try:
            action = reconciler.reconcile(r, dest)
        except SyncError as e:
            logger.error("[fail] %s: %s", r.name, e)
            summary.failed.append(r.name)
            continue
        logger.info("[ok] %s (%s)", r.name, action.value)
        summary.succeeded += 1
    secs = time.time() - start
    logger.info("Done. %d/%d succeeded in %.1fs.", summary.succeeded, summary.total, secs)
    return summary
