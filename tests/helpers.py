import json

import requests


def make_response(status_code=200, body=None, text=None):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(body if body is not None else {})
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    response.url = "https://generativelanguage.googleapis.com/v1beta/models/test:generateContent"
    return response


class FakePost:
    """Records outbound calls and replays a canned response (or raises)."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else make_response(200, {"foo": "bar"})
        self.error = error
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response
