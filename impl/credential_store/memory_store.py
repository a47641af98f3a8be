from __future__ import annotations

from typing import Iterable, List, Optional

from base_models import Credential
from impl.credential_store.interfaces import CredentialStore


class InMemoryCredentialStore(CredentialStore):
    def __init__(self, credentials: Optional[Iterable[Credential]] = None):
        self._credentials: List[Credential] = list(credentials or [])

    def add(self, credential: Credential) -> None:
        self._credentials.append(credential)

    def list_credentials(self) -> List[Credential]:
        return list(self._credentials)
