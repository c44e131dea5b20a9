"""Services for the list command."""

from __future__ import annotations

import json

from ...core.github_client import GitHubClient
from ...core.types import RepositoryDescriptor

# one repository per line, so control characters in a description are escaped
_TSV_ESCAPES = str.maketrans({"\\": "\\\\", "\t": "\\t", "\n": "\\n", "\r": "\\r"})


def list_repos(client: GitHubClient) -> list[RepositoryDescriptor]:
    return client.list_user_repos()


def format_repos(repos: list[RepositoryDescriptor], as_json: bool = False) -> str:
    if as_json:
        return json.dumps([r.model_dump() for r in repos], indent=2)
    return "\n".join(
        f"{r.name}\t{r.remote_url}\t{r.description.translate(_TSV_ESCAPES)}".rstrip() for r in repos
    )
