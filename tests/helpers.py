from unittest.mock import MagicMock


def make_response(status_code=200, payload=None, json_error=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 400
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


def repo_payload(id, name, language="Python", fork=False, **extra):
    data = {
        "id": id,
        "name": name,
        "description": f"{name} description",
        "html_url": f"https://github.com/Kr0n4k/{name}",
        "homepage": None,
        "language": language,
        "stargazers_count": 1,
        "forks_count": 0,
        "updated_at": "2024-05-01T12:00:00Z",
        "topics": [],
        "fork": fork,
        "owner": {"login": "Kr0n4k"},
    }
    data.update(extra)
    return data
