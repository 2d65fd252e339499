"""
HTTP verb dispatch with the read-only safety gate.
"""

import logging
from collections.abc import Mapping
from typing import Any

import requests

from .config import ServerConfig
from .decoder import decode_response
from .entities import Entity
from .exceptions import GerritTransportError
from .urls import resolve_url

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Accept-Encoding": "gzip",
}


def build_session(config: ServerConfig) -> requests.Session:
    """Create a session carrying the default headers and Basic auth."""
    session = requests.Session()
    session.headers.update(DEFAULT_HEADERS)
    if config.auth:
        session.auth = config.auth
    return session


class RequestExecutor:
    """
    Issues GET/PUT/POST/DELETE requests against the configured server.

    Every call owns the response it receives. Only the status code of
    the most recent request is remembered, because a PUT skipped in
    (non-strict) read-only mode reports whether that request returned
    201. Every verb writes that status, so outside ``strict_read_only``
    an executor is not safe to share between threads.
    """

    def __init__(
        self,
        config: ServerConfig,
        session: requests.Session,
        logger: logging.Logger,
    ):
        self.config = config
        self.session = session
        self.logger = logger
        self.debug = config.debug
        self._last_status: int | None = None

    def _debug_hook(self, response: requests.Response, *args, **kwargs) -> None:
        self.logger.debug(
            "%s %s -> %s %s",
            response.request.method,
            response.url,
            response.status_code,
            dict(response.headers),
        )

    def _std_params(self) -> dict[str, Any]:
        """Options attached to every request."""
        params: dict[str, Any] = {"timeout": self.config.timeout}
        if self.debug:
            params["hooks"] = {"response": [self._debug_hook]}
        return params

    def _skip(self, method: str, endpoint: str) -> bool:
        """Whether the read-only gate suppresses this request."""
        if not self.config.read_only:
            return False
        if method == "DELETE" and not self.config.strict_read_only:
            return False
        self.logger.debug("skipping %s to %s", method, endpoint)
        return True

    def request(
        self, method: str, endpoint: str, **kwargs: Any
    ) -> requests.Response:
        url = resolve_url(self.config.url, endpoint).geturl()
        params = self._std_params()
        params.update(kwargs)
        try:
            response = self.session.request(method, url, **params)
        except requests.RequestException as e:
            raise GerritTransportError(f"{method} {url} failed: {e}") from e
        self._last_status = response.status_code
        return response

    def get(self, endpoint: str) -> Any:
        """Send GET and return the decoded body whatever the status code."""
        return decode_response(self.request("GET", endpoint), self.logger)

    def is_active(self, account_id: str | int) -> bool:
        response = self.request("GET", f"/a/accounts/{account_id}/active")
        return response.status_code == 200

    def delete(self, endpoint: str) -> bool:
        """Send DELETE; True iff the server answered 204."""
        if self._skip("DELETE", endpoint):
            return False
        return self.request("DELETE", endpoint).status_code == 204

    def put_entity(self, endpoint: str, body: Any = None) -> requests.Response | None:
        """Send PUT with a JSON body; None when read-only mode skips it."""
        if self._skip("PUT", endpoint):
            return None
        if isinstance(body, Entity):
            body = body.to_json()
        return self.request("PUT", endpoint, json=body)

    def put(self, endpoint: str, body: Any = None) -> bool:
        """
        Send PUT; True iff the server answered 201.

        In read-only mode the request is not sent. Unless
        ``strict_read_only`` is set, the result is then computed from
        the status of the previous request, as older callers expect.
        """
        response = self.put_entity(endpoint, body)
        if response is None:
            if self.config.strict_read_only:
                return False
            return self._last_status == 201
        return response.status_code == 201

    def post_entity(
        self, endpoint: str, params: Mapping[str, Any] | Entity | None = None
    ) -> requests.Response | None:
        """Send POST; None when read-only mode skips it."""
        if self._skip("POST", endpoint):
            return None
        if isinstance(params, Entity):
            return self.request("POST", endpoint, json=params.to_json())
        return self.request("POST", endpoint, data=params)

    def post(
        self, endpoint: str, params: Mapping[str, Any] | Entity | None = None
    ) -> Any:
        """
        Send POST and return the decoded body.

        Mappings are form-encoded, entities are sent as JSON. In
        read-only mode nothing is sent and ``{}`` is returned.
        """
        response = self.post_entity(endpoint, params)
        if response is None:
            return {}
        return decode_response(response, self.logger)
