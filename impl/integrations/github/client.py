from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from base_models import APICommit, APIRepository, APIUser, APIUserSearchResult, Credential
from impl.config import settings
from impl.integrations.github.transport import RequestsTransport, RestTransport


logger = logging.getLogger("ghclient.api")


class GitHubAPI:
    """An object for making authenticated requests to the GitHub API."""

    def __init__(self, credential: Credential, transport: Optional[RestTransport] = None):
        self.credential = credential
        self.transport = transport or RequestsTransport(credential.token, credential.endpoint)

    def _first_page_params(self) -> Optional[Dict[str, Any]]:
        if settings.per_page is None:
            return None
        return {"per_page": settings.per_page}

    def fetch_repos(self) -> List[APIRepository]:
        """Load all repositories accessible to the current user.

        Covers public and private repositories across all organizations as
        well as the user account, in the order the pages come back. Any
        failed page fails the whole call.
        """
        results: List[APIRepository] = []
        next_path: Optional[str] = "/user/repos"
        params = self._first_page_params()
        while next_path:
            page = self.transport.fetch_page(next_path, APIRepository, params=params)
            results.extend(page.items)
            next_path = page.next_path
            # next links already carry the query string
            params = None
        return results

    def fetch_repository(self, owner: str, name: str) -> APIRepository:
        """Fetch a repo by its owner and name."""
        return self.transport.fetch(f"/repos/{owner}/{name}", APIRepository)

    def fetch_commit(self, owner: str, name: str, sha: str) -> Optional[APICommit]:
        """Fetch a commit from the repository, or None if it can't be loaded."""
        try:
            return self.transport.fetch(f"/repos/{owner}/{name}/commits/{sha}", APICommit)
        except Exception as e:
            logger.debug("fetch_commit failed owner=%s name=%s sha=%s error=%s", owner, name, sha, e)
            return None

    def search_for_user_with_email(self, email: str) -> Optional[APIUser]:
        """Search for a user with the given public email."""
        try:
            result = self.transport.fetch(
                "/search/users",
                APIUserSearchResult,
                params={"q": f"{email} in:email type:user"},
            )
        except Exception as e:
            logger.debug("user search failed email=%s error=%s", email, e)
            return None

        # results are sorted by score, best first
        return result.items[0] if result.items else None

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "GitHubAPI":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
