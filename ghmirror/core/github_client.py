"""GitHub API operations: enumerate every repository an account owns."""

from __future__ import annotations

import base64
import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .constants import API_BASE, GITHUB_API_ACCEPT, HTTP_TIMEOUT_SEC, PER_PAGE, USER_AGENT
from .errors import FetchError
from .types import FetchCause, RepositoryDescriptor

logger = logging.getLogger(__name__)

_PAGE = TypeAdapter(list[RepositoryDescriptor])


class GitHubClient:
    def __init__(
        self,
        username: str,
        token: str,
        *,
        api_base: str = API_BASE,
        per_page: int = PER_PAGE,
    ) -> None:
        self.username = username
        self.token = token
        self.api_base = api_base.rstrip("/")
        self.per_page = per_page

    # ---------- low-level HTTP ----------
    def _auth_header(self) -> str:
        raw = f"{self.username}:{self.token}".encode("utf-8")
        return "Basic " + base64.b64encode(raw).decode("ascii")

    def _request_json(self, url: str) -> Any:
        req = urllib.request.Request(url)
        req.add_header("Accept", GITHUB_API_ACCEPT)
        req.add_header("User-Agent", USER_AGENT)
        req.add_header("Authorization", self._auth_header())
        # HTTPError subclasses URLError, so it has to be caught first
        try:
            with urllib.request.urlopen(req, timeout=HTTP_TIMEOUT_SEC) as resp:
                body = resp.read()
        except urllib.error.HTTPError as e:
            raise FetchError(FetchCause.http_status, f"GET {url}: {e.reason}", status=e.code) from e
        except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
            raise FetchError(FetchCause.transport, f"GET {url}: {e}") from e
        try:
            return json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise FetchError(FetchCause.decode, f"GET {url}: invalid JSON: {e}") from e

    def _page_url(self, page: int) -> str:
        return f"{self.api_base}/users/{self.username}/repos?page={page}&per_page={self.per_page}"

    # ---------- public API ----------
    def fetch_page(self, page: int) -> list[RepositoryDescriptor]:
        url = self._page_url(page)
        data = self._request_json(url)
        try:
            return _PAGE.validate_python(data)
        except ValidationError as e:
            raise FetchError(FetchCause.decode, f"GET {url}: unexpected payload: {e}") from e

    def list_user_repos(self) -> list[RepositoryDescriptor]:
        """Return every repository of the account, in API order.

        Pages are requested until one comes back empty. Any failing page aborts
        the whole listing with FetchError; nothing partial is returned.
        """
        repos: list[RepositoryDescriptor] = []
        seen: set[str] = set()
        page = 1
        while True:
            data = self.fetch_page(page)
            logger.debug("[list] page %d: %d repositories", page, len(data))
            if not data:
                break
            for r in data:
                if r.name in seen:
                    logger.debug("[list] duplicate %s on page %d, skipping", r.name, page)
                    continue
                seen.add(r.name)
                repos.append(r)
            page += 1
        return repos
