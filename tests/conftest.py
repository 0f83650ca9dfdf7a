import json

import pytest
import requests


class FakeServer:
    """Stands in for the API by patching `requests.Session.get`."""

    def __init__(self):
        self.status_code = 200
        self.body = ""
        self.error = None
        self.requests = []
        self.closed = 0

    def respond(self, payload, status_code: int = 200):
        self.body = payload if isinstance(payload, str) else json.dumps(payload)
        self.status_code = status_code

    def get(self, session, url, params=None, **kwargs):
        prepared = requests.Request("GET", url, params=params).prepare()
        self.requests.append({"url": prepared.url, "timeout": kwargs.get("timeout")})
        if self.error is not None:
            raise self.error
        resp = requests.Response()
        resp.status_code = self.status_code
        resp.reason = "OK" if self.status_code < 400 else "Error"
        resp.url = prepared.url
        resp.encoding = "utf-8"
        resp._content = self.body.encode("utf-8")
        return resp


@pytest.fixture
def server(monkeypatch):
    fake = FakeServer()
    original_close = requests.Session.close

    def close(session):
        fake.closed += 1
        original_close(session)

    monkeypatch.setattr(requests.Session, "get", lambda session, url, **kw: fake.get(session, url, **kw))
    monkeypatch.setattr(requests.Session, "close", close)
    return fake
