from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _APIModel(BaseModel):
    # REST payloads carry far more keys than we project
    model_config = ConfigDict(frozen=True, extra="ignore")


# ---------- Credentials ----------
class Credential(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str = Field(min_length=1, max_length=4096)
    endpoint: str = Field(min_length=1, description="API base URL, e.g. https://api.github.com")
    login: Optional[str] = None


# ---------- GitHub ----------
class APIUser(_APIModel):
    """Information about a user or organization as returned by the GitHub API."""

    type: Literal["user", "org"]
    login: str
    avatar_url: str
    email: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, v: object) -> str:
        # remote sends "User" | "Organization" | "Bot"
        s = str(v or "").strip().lower()
        if s in ("org", "organization"):
            return "org"
        return "user"


class APIRepository(_APIModel):
    """Information about a repository as returned by the GitHub API."""

    clone_url: str
    html_url: str
    name: str
    owner: APIUser
    private: bool
    fork: bool
    stargazers_count: int


class APICommit(_APIModel):
    """Information about a commit as returned by the GitHub API."""

    sha: str
    author: Optional[APIUser] = None


class APIUserSearchResult(_APIModel):
    total_count: int = 0
    items: List[APIUser] = Field(default_factory=list)
