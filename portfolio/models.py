from datetime import datetime
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CACHE_VERSION = 1


class Repo(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str
    description: str | None = None
    html_url: str
    homepage: str | None = None
    language: str | None = None
    stargazers_count: int = 0
    forks_count: int = 0
    updated_at: datetime
    topics: List[str] = Field(default_factory=list)
    fork: bool = False


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    excerpt: str
    content: str
    date: datetime
    author: str
    image: str | None = None
    tags: List[str] = Field(default_factory=list)
    read_time: int  # minutes
    slug: str


class CacheEnvelope(BaseModel):
    data: List[Repo]
    timestamp: int  # epoch ms
    version: int = 0


class Fetched(BaseModel):
    kind: Literal["fetched"] = "fetched"
    items: List[Repo]
    from_cache: bool = False


class Fallback(BaseModel):
    kind: Literal["fallback"] = "fallback"
    items: List[Repo]
    reason: str

    @property
    def warning(self) -> str:
        return f"Showing demo data, GitHub API unavailable: {self.reason}"


FetchResult = Union[Fetched, Fallback]


class ContactIn(BaseModel):
    name: str = ""
    email: str = ""
    message: str = ""


class Section(BaseModel):
    id: str
    top: float
    height: float


class SpyRequest(BaseModel):
    scroll_y: float
    sections: List[Section]
    current: Optional[str] = None
    seq: int = 0


class RepoFilter(BaseModel):
    items: List[Repo]
    language: str = "all"


class PostFilter(BaseModel):
    items: List[Post]
    tag: str = "all"
