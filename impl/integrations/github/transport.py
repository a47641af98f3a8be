from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel

from impl.config import settings


logger = logging.getLogger("ghclient.transport")

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    # absolute URL or path of the following page; None on the last page
    next_path: Optional[str] = None


class RestTransport(ABC):
    """Authenticated access to one REST deployment."""

    @abstractmethod
    def get_json(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> Any:
        """Performs an authenticated GET and returns the decoded JSON body."""
        raise NotImplementedError

    @abstractmethod
    def get_page(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> Page[Any]:
        """Fetches one page of a paginated collection (raw JSON items)."""
        raise NotImplementedError

    def fetch(self, path: str, model: Type[M], *, params: Optional[Dict[str, Any]] = None) -> M:
        return model.model_validate(self.get_json(path, params=params))

    def fetch_page(self, path: str, model: Type[M], *, params: Optional[Dict[str, Any]] = None) -> Page[M]:
        page = self.get_page(path, params=params)
        return Page(items=[model.model_validate(i) for i in page.items], next_path=page.next_path)

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def parse_next_link(link: str) -> Optional[str]:
    # Link: <https://api.github.com/user/repos?page=2>; rel="next", <...>; rel="last"
    for part in (link or "").split(","):
        segment = part.strip()
        if 'rel="next"' in segment:
            return segment.split(";")[0].strip().strip("<>").strip() or None
    return None


class RequestsTransport(RestTransport):
    def __init__(
        self,
        token: str,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": settings.github_api_version,
            "User-Agent": settings.user_agent,
        })

    def _url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _get(self, path: str, params: Optional[Dict[str, Any]]) -> requests.Response:
        url = self._url(path)
        r = self.session.get(url, params=params, timeout=self.timeout)
        logger.debug("method=GET url=%s status=%s", url, r.status_code)
        r.raise_for_status()
        return r

    def get_json(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._get(path, params).json()

    def get_page(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> Page[Any]:
        r = self._get(path, params)
        items = r.json()
        if not isinstance(items, list):
            raise ValueError(f"Expected a JSON array from {r.url}, got {type(items).__name__}")
        return Page(items=items, next_path=parse_next_link(r.headers.get("Link", "")))

    def close(self) -> None:
        self.session.close()
