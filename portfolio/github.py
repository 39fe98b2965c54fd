from typing import List

import requests
from pydantic import TypeAdapter, ValidationError

from .models import Repo

API_ROOT = "https://api.github.com"
RATE_LIMIT_STATUS = 403

_repo_list = TypeAdapter(List[Repo])


class RemoteUnavailable(Exception):
    """GitHub could not be reached or answered with a non-success status."""


class RateLimited(RemoteUnavailable):
    pass


class MalformedResponse(RemoteUnavailable):
    pass


def repos_url(username: str) -> str:
    return f"{API_ROOT}/users/{username}/repos"


def profile_url(username: str) -> str:
    return f"https://github.com/{username}"


def list_repos(username: str, per_page: int = 10, timeout: float = 10) -> List[Repo]:
    """
    Fetch the most recently updated public repositories of `username`.
    One request, no retry. Raises RemoteUnavailable (or a subclass) on failure.
    """
    try:
        resp = requests.get(
            repos_url(username),
            params={"sort": "updated", "per_page": per_page},
            headers={"Accept": "application/vnd.github.v3+json"},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise RemoteUnavailable(f"Network error: {exc}") from exc

    if resp.status_code == RATE_LIMIT_STATUS:
        raise RateLimited("GitHub API rate limit exceeded")
    if not resp.ok:
        raise RemoteUnavailable(f"Error {resp.status_code}: could not load repositories")

    try:
        payload = resp.json()
    except ValueError as exc:
        raise MalformedResponse("Response is not valid JSON") from exc
    if not isinstance(payload, list):
        raise MalformedResponse("Expected a list of repositories")
    try:
        return _repo_list.validate_python(payload)
    except ValidationError as exc:
        raise MalformedResponse(f"Unexpected repository shape: {exc.error_count()} errors") from exc
