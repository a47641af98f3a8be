from __future__ import annotations

from base_models import Credential
from impl.config import settings
from impl.credential_store.interfaces import CredentialStore
from impl.credential_store.memory_store import InMemoryCredentialStore


def get_credential_store() -> CredentialStore:
    store = InMemoryCredentialStore()
    if settings.github_token:
        store.add(Credential(token=settings.github_token, endpoint=settings.github_api_endpoint))
    return store
