"""
Decoding of Gerrit REST responses.

Gerrit prefixes every JSON body with a magic line to defeat
cross-site script inclusion:

    )]}'
    [... valid JSON ...]

The prefix has to be stripped before the rest of the body is handed
to a JSON parser.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import requests
from requests.structures import CaseInsensitiveDict

from .exceptions import GerritJSONDecodeError

MAGIC_JSON_PREFIX = b")]}'\n"
JSON_MEDIA_TYPE = "application/json"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentType:
    """Parsed ``Content-Type`` header."""

    media_type: str | None = None
    charset: str = "unknown"
    params: dict[str, str] = field(default_factory=dict)


def _first_header(headers: Mapping[str, Any], name: str) -> str | None:
    value = CaseInsensitiveDict(headers).get(name)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    return value


def parse_content_type(headers: Mapping[str, Any]) -> ContentType:
    """Split the first Content-Type header into media type and parameters."""
    value = _first_header(headers, "Content-Type")
    if value is None:
        return ContentType()

    segments = [segment.strip() for segment in value.split(";")]
    media_type = segments[0]
    params = {}
    for segment in segments[1:]:
        name, _, param_value = segment.partition("=")
        params[name.strip().lower()] = param_value.strip().lower()

    return ContentType(
        media_type=media_type,
        charset=params.get("charset", "unknown"),
        params=params,
    )


def parse_content_encoding(headers: Mapping[str, Any]) -> list[str]:
    """Return the codings listed in the first Content-Encoding header."""
    value = _first_header(headers, "Content-Encoding")
    if value is None:
        return []
    return [token.strip() for token in value.split(",")]


def strip_magic_prefix(body: bytes) -> bytes:
    """Remove Gerrit's XSSI prefix once, and only when it leads the body."""
    if body.startswith(MAGIC_JSON_PREFIX):
        return body[len(MAGIC_JSON_PREFIX) :]
    return body


def decode_response(
    response: requests.Response | None, log: logging.Logger | None = None
) -> Any:
    """
    Strip off Gerrit's magic prefix and decode a response.

    Returns the decoded JSON value when the media type is exactly
    ``application/json``, ``""`` for any other media type and ``{}``
    when there is no response at all.

    Raises GerritJSONDecodeError if the body claims to be JSON but is
    not; the raw body is available on the exception.
    """
    log = log or logger
    if response is None:
        return {}

    content_type = parse_content_type(response.headers)
    media_type = content_type.media_type or "no-media-type"
    log.debug(
        "status[%s] content_type[%s] encoding[%s]",
        response.status_code,
        media_type,
        content_type.charset,
    )

    raw = response.content or b""
    body = strip_magic_prefix(raw)
    if media_type != JSON_MEDIA_TYPE:
        return ""

    try:
        return json.loads(body)
    except ValueError as e:
        raise GerritJSONDecodeError(
            f"Could not decode JSON response from {response.url}: {e}",
            status_code=response.status_code,
            response_body=raw,
        ) from e
