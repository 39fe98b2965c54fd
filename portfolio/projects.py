"""
Projects gallery data: repositories of the site owner, read through a
time-boxed cache in the local store and replaced by demo data when GitHub
cannot be reached.
"""

import json
import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .config import Settings
from .filters import category_options
from .github import RemoteUnavailable, list_repos
from .models import CACHE_VERSION, CacheEnvelope, Fallback, Fetched, FetchResult, Repo
from .storage import LocalStore

logger = logging.getLogger(__name__)

MAX_TOPICS_DISPLAY = 3

LANGUAGE_ICONS = {
    "JavaScript": "📜",
    "TypeScript": "🔷",
    "HTML": "🌐",
    "CSS": "🎨",
    "Python": "🐍",
    "Java": "☕",
    "Ruby": "💎",
    "PHP": "🐘",
}
DEFAULT_ICON = "💻"


def _mock_repos() -> List[Repo]:
    now = datetime.now(timezone.utc)
    return [
        Repo(
            id=1,
            name="Sample project",
            description="A sample project for demonstration",
            html_url="https://github.com/username/repo",
            homepage="https://example.com",
            language="JavaScript",
            stargazers_count=15,
            forks_count=3,
            updated_at=now,
            topics=["react", "typescript", "demo"],
        ),
        Repo(
            id=2,
            name="Web application",
            description="A modern web application built on a current stack",
            html_url="https://github.com/username/web-app",
            homepage="",
            language="TypeScript",
            stargazers_count=8,
            forks_count=2,
            updated_at=now - timedelta(days=1),
            topics=["nextjs", "tailwind", "api"],
        ),
    ]


MOCK_REPOS = _mock_repos()


def cache_key(username: str) -> str:
    return f"github_repos_{username}"


def now_ms() -> int:
    return int(time.time() * 1000)


def read_cache(store: LocalStore, key: str) -> Optional[CacheEnvelope]:
    raw = store.get_item(key)
    if raw is None:
        return None
    try:
        return CacheEnvelope.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError):
        logger.warning("Ignoring unreadable cache entry %s", key)
        return None


def is_fresh(envelope: CacheEnvelope, timeout_ms: int, now: int) -> bool:
    if envelope.version != CACHE_VERSION:
        return False
    return now - envelope.timestamp < timeout_ms


def write_cache(store: LocalStore, key: str, items: List[Repo], now: int):
    envelope = CacheEnvelope(data=items, timestamp=now, version=CACHE_VERSION)
    try:
        store.set_item(key, envelope.model_dump_json())
    except OSError as exc:
        logger.warning("Could not write cache entry %s: %s", key, exc)


def fetch_projects(store: LocalStore, settings: Settings, now: Optional[int] = None) -> FetchResult:
    """
    Return the owner's non-fork repositories.

    A cache entry younger than the configured timeout is served without a
    network call. Otherwise GitHub is queried once and the result cached.
    Any remote failure yields Fallback(MOCK_REPOS, reason); this never raises.
    """
    if now is None:
        now = now_ms()
    key = cache_key(settings.github_username)

    envelope = read_cache(store, key)
    if envelope is not None and is_fresh(envelope, settings.cache_timeout_ms, now):
        logger.debug("Serving %d repos from cache", len(envelope.data))
        return Fetched(items=envelope.data, from_cache=True)

    try:
        repos = list_repos(
            settings.github_username,
            per_page=settings.repos_per_page,
            timeout=settings.request_timeout,
        )
    except RemoteUnavailable as exc:
        logger.warning("GitHub API unavailable, using demo data: %s", exc)
        return Fallback(items=MOCK_REPOS, reason=str(exc))

    own = [r for r in repos if not r.fork]
    write_cache(store, key, own, now)
    logger.info("Fetched %d repos for %s", len(own), settings.github_username)
    return Fetched(items=own, from_cache=False)


def language_options(items: List[Repo]) -> List[str]:
    return category_options(r.language for r in items)


def language_icon(language: str | None) -> str:
    if not language:
        return DEFAULT_ICON
    return LANGUAGE_ICONS.get(language, DEFAULT_ICON)


def repo_card(repo: Repo) -> Dict[str, Any]:
    card = repo.model_dump(mode="json")
    card["icon"] = language_icon(repo.language)
    card["topics_shown"] = repo.topics[:MAX_TOPICS_DISPLAY]
    card["topics_more"] = repo.topics[MAX_TOPICS_DISPLAY:]
    return card
