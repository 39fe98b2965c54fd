import json
from fnmatch import fnmatch
from pathlib import Path
from typing import List
from urllib.parse import urlparse

from pydantic import BaseModel, Field

CONFIG_FILE = Path("portfolio.config.json")


class ImageHost(BaseModel):
    protocol: str = "https"
    hostname: str = "**"


class Settings(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000
    github_username: str = "Kr0n4k"
    repos_per_page: int = 10
    cache_timeout_minutes: int = 30
    request_timeout: float = 10
    submit_delay: float = 1.5
    reset_delay: float = 3.0
    posts_delay: float = 1.0
    store_path: Path = Path("local_storage.json")
    # dev only: "**" lets every https host through
    image_hosts: List[ImageHost] = Field(default_factory=lambda: [ImageHost()])

    @property
    def cache_timeout_ms(self) -> int:
        return self.cache_timeout_minutes * 60 * 1000

    def is_allowed_image(self, url: str) -> bool:
        parsed = urlparse(url)
        host = (parsed.hostname or "").lower()
        if not host:
            return False
        for pattern in self.image_hosts:
            if parsed.scheme != pattern.protocol:
                continue
            if pattern.hostname == "**" or fnmatch(host, pattern.hostname):
                return True
        return False


def load_settings(path: Path = CONFIG_FILE) -> Settings:
    if not path.exists():
        return Settings()
    with open(path, "r") as f:
        data = json.load(f)
    return Settings.model_validate(data)
