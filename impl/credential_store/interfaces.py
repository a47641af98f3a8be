from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from base_models import Credential


class CredentialStore(ABC):
    @abstractmethod
    def list_credentials(self) -> List[Credential]:
        """Returns every stored credential, in storage order."""
        raise NotImplementedError
