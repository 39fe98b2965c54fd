"""Integration tests for the HTTP routes."""

import time
from unittest.mock import patch

from portfolio.blog import mock_posts

from tests.helpers import make_response, repo_payload

GET = "portfolio.github.requests.get"


class TestProjectsRoute:
    """Tests for GET /api/projects and POST /api/projects/filter."""

    def test_lists_full_set(self, client):
        payload = [
            repo_payload(1, "api", language="Python"),
            repo_payload(2, "site", language="TypeScript"),
            repo_payload(3, "fork", language="Go", fork=True),
        ]
        with patch(GET, return_value=make_response(payload=payload)):
            res = client.get("/api/projects")
        body = res.json()
        assert res.status_code == 200
        assert [r["name"] for r in body["items"]] == ["api", "site"]
        assert body["languages"] == ["all", "Python", "TypeScript"]
        assert body["selected"] == "all"
        assert body["demo"] is False
        assert body["warning"] is None
        assert body["from_cache"] is False
        assert body["profile_url"] == "https://github.com/Kr0n4k"

    def test_reload_is_served_from_cache(self, client):
        with patch(GET, return_value=make_response(payload=[repo_payload(1, "api")])):
            client.get("/api/projects")
        with patch(GET) as mock_get:
            body = client.get("/api/projects").json()
        mock_get.assert_not_called()
        assert body["from_cache"] is True

    def test_fallback_banner(self, client):
        with patch(GET, return_value=make_response(403)):
            body = client.get("/api/projects").json()
        assert body["demo"] is True
        assert "rate limit" in body["warning"]
        assert [r["id"] for r in body["items"]] == [1, 2]

    def test_filter_change_after_failure_does_not_refetch(self, client):
        with patch(GET, return_value=make_response(500)) as mock_get:
            loaded = client.get("/api/projects").json()
            res = client.post(
                "/api/projects/filter",
                json={"items": loaded["items"], "language": "JavaScript"},
            )
        assert mock_get.call_count == 1
        body = res.json()
        assert body["selected"] == "JavaScript"
        assert [r["id"] for r in body["items"]] == [1]
        assert body["items"][0]["icon"] == "📜"

    def test_filter_all_is_identity(self, client):
        with patch(GET, return_value=make_response(500)):
            loaded = client.get("/api/projects").json()
        with patch(GET) as mock_get:
            body = client.post(
                "/api/projects/filter", json={"items": loaded["items"], "language": "all"}
            ).json()
        mock_get.assert_not_called()
        assert body["items"] == loaded["items"]

    def test_filter_unknown_language(self, client):
        items = [repo_payload(1, "api")]
        body = client.post("/api/projects/filter", json={"items": items, "language": "Rust"}).json()
        assert body["items"] == []

    def test_filter_blank_language(self, client):
        res = client.post("/api/projects/filter", json={"items": [], "language": " "})
        assert res.status_code == 400


class TestPostsRoute:
    """Tests for GET /api/posts and POST /api/posts/filter."""

    def test_all_posts(self, client):
        body = client.get("/api/posts").json()
        assert len(body["items"]) == 6
        assert body["selected"] == "all"
        assert "NestJS" in body["tags"]

    def test_filter_by_tag(self, client):
        items = client.get("/api/posts").json()["items"]
        body = client.post("/api/posts/filter", json={"items": items, "tag": "NestJS"}).json()
        assert [p["id"] for p in body["items"]] == [3, 6]
        assert body["selected"] == "NestJS"

    def test_filter_keeps_loaded_dates(self, client):
        items = client.get("/api/posts").json()["items"]
        body = client.post("/api/posts/filter", json={"items": items, "tag": "all"}).json()
        assert [p["date"] for p in body["items"]] == [p["date"] for p in items]

    def test_tag_change_pays_no_load_delay(self, client, settings):
        settings.posts_delay = 1.0
        items = [p.model_dump(mode="json") for p in mock_posts(settings)]
        started = time.monotonic()
        res = client.post("/api/posts/filter", json={"items": items, "tag": "React"})
        assert time.monotonic() - started < 0.5
        assert [p["id"] for p in res.json()["items"]] == [1, 2]

    def test_unknown_tag(self, client):
        items = client.get("/api/posts").json()["items"]
        body = client.post("/api/posts/filter", json={"items": items, "tag": "Rust"}).json()
        assert body["items"] == []

    def test_blank_tag(self, client):
        assert client.post("/api/posts/filter", json={"items": [], "tag": ""}).status_code == 400


class TestContactRoute:
    """Tests for POST /api/contact."""

    def test_valid_submission(self, client):
        res = client.post(
            "/api/contact",
            json={"name": "Ann", "email": "ann@example.com", "message": "Hello there!"},
        )
        assert res.status_code == 200
        assert res.json() == {"ok": True, "reset_after": 3.0}

    def test_invalid_submission(self, client):
        res = client.post("/api/contact", json={"name": "", "email": "a@b.c", "message": "1234567890"})
        assert res.status_code == 422
        body = res.json()
        assert body["ok"] is False
        assert list(body["errors"]) == ["name"]


class TestNavRoutes:
    """Tests for navigation routes."""

    SECTIONS = [{"id": "a", "top": 0, "height": 100}, {"id": "b", "top": 100, "height": 100}]

    def test_nav_items(self, client):
        body = client.get("/api/nav").json()
        assert [i["id"] for i in body["items"]] == ["about-me", "my-projects", "blog", "contact"]
        assert body["lookahead"] == 100

    def test_spy(self, client):
        res = client.post(
            "/api/nav/spy",
            json={"scroll_y": 50, "sections": self.SECTIONS, "current": "a", "seq": 7},
        )
        assert res.json() == {"active": "b", "scrolled": True, "seq": 7}

    def test_spy_echoes_each_sequence_number(self, client):
        # the page applies a response only if its seq is newer than the last applied one
        late = client.post("/api/nav/spy", json={"scroll_y": 0, "sections": self.SECTIONS, "seq": 1}).json()
        new = client.post("/api/nav/spy", json={"scroll_y": 50, "sections": self.SECTIONS, "seq": 2}).json()
        assert (late["seq"], late["active"]) == (1, "b")
        assert (new["seq"], new["active"]) == (2, "b")
        top = client.post(
            "/api/nav/spy",
            json={"scroll_y": -100, "sections": self.SECTIONS, "seq": 3},
        ).json()
        assert (top["seq"], top["active"]) == (3, "a")


class TestMiscRoutes:
    """Tests for the page, profile and config routes."""

    def test_index(self, client):
        res = client.get("/")
        assert res.status_code == 200
        assert "my-projects" in res.text

    def test_static_script(self, client):
        assert client.get("/static/app.js").status_code == 200

    def test_profile(self, client):
        body = client.get("/api/profile").json()
        assert body["name"]
        assert len(body["local_time"]) == 5

    def test_config(self, client):
        body = client.get("/api/config").json()
        assert body["github_username"] == "Kr0n4k"
        assert body["cache_timeout_minutes"] == 30
        assert body["port"] == 8000
