"""Shared fixtures for clippy-ai tests."""

import json

import pytest
import requests

from clippy_ai.models import CommandResult
from clippy_ai.runner import CommandRunner


class FakeGitRunner(CommandRunner):
    """Simulates git by returning canned results keyed on the subcommand."""

    def __init__(self, results=None):
        self.results = dict(results or {})
        self.calls = []

    def run(self, args, cwd):
        self.calls.append((list(args), cwd))
        key = " ".join(args[:2]) if args[:2] == ["status", "--porcelain"] else args[0]
        result = self.results.get(key, CommandResult.ok(""))
        if isinstance(result, list):
            return result.pop(0)
        return result

    @property
    def subcommands(self):
        return [args[0] for args, _ in self.calls]


def make_response(status=200, body=None, text=None, headers=None, reason="OK"):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    if body is not None:
        content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json; charset=utf-8"
    else:
        content = (text or "").encode("utf-8")
        response.headers["Content-Type"] = "text/html"
    if headers:
        response.headers.update(headers)
    response._content = content
    response.encoding = None
    return response


@pytest.fixture
def fake_git():
    return FakeGitRunner


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def workspace(tmp_path):
    path = tmp_path / "bookmarks.json"
    path.write_text("[]", encoding="utf-8")
    return str(path)


@pytest.fixture
def fixed_clock():
    # 2024-02-29 12:00:00 UTC
    return lambda: 1709208000
