#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
gerritrest - Talk to the Gerrit Code Review REST API
Branch management plus raw access to any REST endpoint
"""

from . import __version__

__license__ = "GPL-3.0"

import argparse
import json
import logging
import sys
from typing import Any
from urllib.parse import quote

import requests

from .config import ServerConfig
from .decoder import decode_response
from .entities import BranchInfo, BranchInput, DeleteBranchesInput
from .exceptions import GerritError, GerritRestError
from .executor import RequestExecutor, build_session

log = logging.getLogger(__name__)


def quote_component(value: str) -> str:
    """Percent-encode a project name or ref for use as one path segment."""
    return quote(value, safe="")


class GerritRestAPI:
    """
    Interface to the Gerrit REST API.

    ``url`` is the full URL of the server including the ``http(s)://``
    scheme. ``auth`` is an optional ``(username, password)`` pair sent as
    Basic auth on every request. Alternatively pass a prepared ``config``;
    it cannot be combined with ``url`` or ``auth``.
    """

    def __init__(
        self,
        url: str | None = None,
        auth: tuple[str, str] | None = None,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
        config: ServerConfig | None = None,
    ):
        if config is not None:
            if url is not None or auth is not None:
                raise ValueError("Pass either url/auth or config, not both")
        else:
            if url is None:
                raise ValueError("Either url or config is required")
            username, password = auth if auth else (None, None)
            config = ServerConfig(url=url, username=username, password=password)
        self._config = config
        self.logger = logger or log
        self._owns_session = session is None
        self.session = session if session is not None else build_session(config)
        self._executor = RequestExecutor(config, self.session, self.logger)

    def __enter__(self) -> "GerritRestAPI":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    @property
    def config(self) -> ServerConfig:
        return self._config

    @property
    def url(self) -> str:
        return self.config.url

    @property
    def read_only(self) -> bool:
        return self.config.read_only

    def set_read_only(self) -> None:
        """Stop sending mutating requests. There is no way back."""
        self.config.enable_read_only()

    def set_debug(self, debug: bool) -> None:
        """Log every request and response at debug level."""
        self._executor.debug = debug

    def set_logger(self, logger: logging.Logger) -> None:
        self.logger = logger
        self._executor.logger = logger

    # -- low level verbs ------------------------------------------------------
    def get(self, endpoint: str) -> Any:
        return self._executor.get(endpoint)

    def put(self, endpoint: str, body: Any = None) -> bool:
        return self._executor.put(endpoint, body)

    def post(self, endpoint: str, params: Any = None) -> Any:
        return self._executor.post(endpoint, params)

    def delete(self, endpoint: str) -> bool:
        return self._executor.delete(endpoint)

    def is_active(self, account_id: str | int) -> bool:
        """Whether the account is active; True iff the server answers 200."""
        return self._executor.is_active(account_id)

    # -- branches -------------------------------------------------------------
    def list_branches(self, project: str) -> dict[str, BranchInfo]:
        """Branches of ``project`` keyed by ref, in server order."""
        project = quote_component(project)
        return BranchInfo.decode_list(self.get(f"/a/projects/{project}/branches/"))

    get_project_branches = list_branches

    def get_branch(self, project: str, branch: str) -> BranchInfo | None:
        """
        Look up one branch by its exact ref.

        This lists all branches first, so the answer is only a snapshot.
        """
        return self.list_branches(project).get(branch)

    def create_branch(
        self, project: str, branch: BranchInput | str
    ) -> BranchInfo | None:
        """
        Create a branch from a BranchInput or a plain ref.

        Returns None when read-only mode skipped the request. Raises
        GerritRestError if the server does not answer 201.
        """
        if isinstance(branch, str):
            branch = BranchInput(ref=branch)
        if not branch.ref:
            raise ValueError("BranchInput.ref is required to create a branch")

        endpoint = (
            f"/a/projects/{quote_component(project)}"
            f"/branches/{quote_component(branch.ref)}"
        )
        response = self._executor.put_entity(endpoint, branch)
        if response is None:
            return None
        if response.status_code != 201:
            raise GerritRestError(
                f"Could not create {branch.ref} in {project} "
                f"(status {response.status_code})",
                status_code=response.status_code,
                response_body=response.content,
            )
        return BranchInfo.decode_one(decode_response(response, self.logger))

    def delete_branches(self, project: str, refs: list[str]) -> bool:
        """Delete several branches with one request; True iff 204."""
        endpoint = f"/a/projects/{quote_component(project)}/branches:delete"
        response = self._executor.post_entity(
            endpoint, DeleteBranchesInput(branches=list(refs))
        )
        return response is not None and response.status_code == 204

    def delete_one_branch(self, project: str, ref: str) -> bool:
        """Delete a single branch; True iff 204."""
        prefix = "/a" if self.config.authenticated_single_delete else ""
        return self.delete(
            f"{prefix}/projects/{quote_component(project)}"
            f"/branches/{quote_component(ref)}"
        )

    def delete_branch(self, project: str, branch: list[str] | str) -> bool:
        """Delete one branch (a ref) or several (a list of refs)."""
        if isinstance(branch, (list, tuple)):
            return self.delete_branches(project, list(branch))
        return self.delete_one_branch(project, branch)

    # -- commits --------------------------------------------------------------
    def list_files(self, project: str, commit: str) -> Any:
        """Files modified by ``commit``, as Gerrit's FileInfo mapping."""
        return self.get(
            f"/a/projects/{quote_component(project)}/commits/{commit}/files/"
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="gerritrest - Query the Gerrit Code Review REST API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --url https://gerrit.wikimedia.org/r "/changes/?q=status:open&n=5"
  %(prog)s --url https://review.example.org --username me --password secret /a/accounts/self
  %(prog)s --list-branches mediawiki/core

  GERRIT_URL, GERRIT_USERNAME, GERRIT_PASSWORD, GERRIT_READ_ONLY and
  GERRIT_DEBUG are used when the matching option is not given.
        """,
    )

    parser.add_argument(
        "endpoint", nargs="?", help="REST endpoint to GET, e.g. /changes/?q=owner:self"
    )
    parser.add_argument("--url", help="Gerrit server URL (default: $GERRIT_URL)")
    parser.add_argument("--username", help="HTTP username (default: $GERRIT_USERNAME)")
    parser.add_argument("--password", help="HTTP password (default: $GERRIT_PASSWORD)")
    parser.add_argument(
        "--list-branches", metavar="PROJECT", help="List the branches of a project"
    )
    parser.add_argument(
        "--read-only", action="store_true", help="Never send mutating requests"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Log every request and response"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--version", "-v", action="version", version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)

    if args.debug:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if not args.endpoint and not args.list_branches:
        print("Error: give an endpoint or --list-branches", file=sys.stderr)
        return 1

    # Flags left unset fall back to the GERRIT_* environment
    try:
        config = ServerConfig.from_env(
            url=args.url,
            username=args.username,
            password=args.password,
            read_only=args.read_only or None,
            debug=args.debug or None,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        with GerritRestAPI(config=config) as api:
            if args.list_branches:
                for ref, info in api.list_branches(args.list_branches).items():
                    print(f"{ref} {info.revision}")
            else:
                result = api.get(args.endpoint)
                print(json.dumps(result, indent=2))
    except GerritError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
