from __future__ import annotations

import logging
from typing import Callable, List, Optional

from base_models import APIRepository, APIUser, Credential
from impl.credential_store.factory import get_credential_store
from impl.credential_store.interfaces import CredentialStore
from impl.integrations.github.client import GitHubAPI
from impl.integrations.github.endpoints import get_html_url, get_user_for_endpoint
from impl.integrations.github.transport import RestTransport


logger = logging.getLogger("ghclient.service")


class GithubNotConfiguredError(LookupError):
    def __init__(self, endpoint: str):
        super().__init__(f"No GitHub credential stored for endpoint {endpoint}")
        self.endpoint = endpoint


class GithubService:
    PROVIDER = "github"

    def __init__(
        self,
        store: Optional[CredentialStore] = None,
        transport_factory: Optional[Callable[[Credential], RestTransport]] = None,
    ):
        self.store = store or get_credential_store()
        self.transport_factory = transport_factory

    def credential_for(self, endpoint: str) -> Optional[Credential]:
        return get_user_for_endpoint(self.store.list_credentials(), endpoint)

    def api_for(self, endpoint: str) -> GitHubAPI:
        credential = self.credential_for(endpoint)
        if credential is None:
            raise GithubNotConfiguredError(endpoint)
        transport = self.transport_factory(credential) if self.transport_factory else None
        return GitHubAPI(credential, transport=transport)

    def list_repos(self, *, endpoint: str) -> List[APIRepository]:
        with self.api_for(endpoint) as api:
            repos = api.fetch_repos()
        logger.info("endpoint=%s repos=%d", endpoint, len(repos))
        return repos

    def find_user_by_email(self, *, endpoint: str, email: str) -> Optional[APIUser]:
        with self.api_for(endpoint) as api:
            return api.search_for_user_with_email(email)

    def html_url_for(self, endpoint: str) -> str:
        return get_html_url(endpoint)
