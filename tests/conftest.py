import threading
from types import SimpleNamespace

import pytest
import requests

from batgpt.client.models import Account, Exercise


PROBLEM_PAGE = """
<html><body>
<div class="indent">
  <div class="max2">
    Given 3 int values, a b c, return their sum.
  </div>
  <form><div id="ace_div">
public int sum3(int a, int b, int c) {

}
  </div></form>
</div>
</body></html>
"""


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code


class FakeSession:
    """Stands in for requests.Session, recording every call."""

    def __init__(self, pages=None, fail_paths=(), events=None):
        self.pages = pages or {}
        self.fail_paths = set(fail_paths)
        self.events = events if events is not None else []
        self.calls = []
        self.closed = False
        self._lock = threading.Lock()

    def _record(self, method, url, data):
        with self._lock:
            self.calls.append((method, url, data))
            self.events.append((method, url, data))
        for path in self.fail_paths:
            if url.endswith(path):
                raise requests.ConnectionError(f"cannot reach {url}")

    def get(self, url, timeout=None, **kwargs):
        self._record("GET", url, None)
        for path, text in self.pages.items():
            if url.endswith(path):
                return FakeResponse(text)
        return FakeResponse("<html></html>", status_code=404)

    def post(self, url, data=None, timeout=None, **kwargs):
        self._record("POST", url, dict(data or {}))
        return FakeResponse("ok")

    def close(self):
        self.closed = True


class FakeCompletions:
    def __init__(self, reply, events):
        self.reply = reply
        self.events = events
        self.requests = []

    def create(self, **kwargs):
        self.requests.append(kwargs)
        self.events.append(("GENERATE", kwargs["model"], None))
        if isinstance(self.reply, Exception):
            raise self.reply
        if self.reply is None:
            return SimpleNamespace(choices=[])
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=self.reply))]
        )


class FakeOpenAI:
    def __init__(self, reply="public int sum3(int a, int b, int c){return a+b+c;}", events=None):
        self.completions = FakeCompletions(reply, events if events is not None else [])
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def events():
    return []


@pytest.fixture
def exercise():
    return Exercise(
        exercise_id="sum3",
        statement="Given 3 int values, a b c, return their sum.",
        starter_code="public int sum3(int a, int b, int c) {\n\n}",
    )


@pytest.fixture
def accounts():
    return [Account("alice", "p1"), Account("bob", "p2")]
