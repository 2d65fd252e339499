"""Shared fixtures for the gerritrest test suite."""

import json

import requests
from requests.structures import CaseInsensitiveDict

BASE_URL = "https://review.example.org/r"
JSON_HEADERS = {"Content-Type": "application/json; charset=UTF-8"}


def gerrit_body(data) -> bytes:
    """Encode ``data`` the way Gerrit does, magic prefix included."""
    return b")]}'\n" + json.dumps(data).encode("utf-8")


def make_response(
    content: bytes = b"",
    headers: dict | None = None,
    status_code: int = 200,
    url: str = BASE_URL + "/",
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = content
    response.headers = CaseInsensitiveDict(headers or {})
    response.url = url
    return response
