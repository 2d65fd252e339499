"""
gerritrest - Client library for the Gerrit Code Review REST API
"""

import logging

__version__ = "1.0.0"

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .config import GerritSettings, ServerConfig  # noqa: E402
from .decoder import (  # noqa: E402
    MAGIC_JSON_PREFIX,
    ContentType,
    decode_response,
    parse_content_encoding,
    parse_content_type,
)
from .entities import (  # noqa: E402
    BranchInfo,
    BranchInput,
    DeleteBranchesInput,
    Entity,
    WebLinkInfo,
)
from .exceptions import (  # noqa: E402
    EntityDecodeError,
    GerritError,
    GerritJSONDecodeError,
    GerritRestError,
    GerritTransportError,
)
from .executor import RequestExecutor  # noqa: E402
from .gerritrest import GerritRestAPI  # noqa: E402
from .urls import ResolvedUrl, resolve_url  # noqa: E402

__all__ = [
    "__version__",
    # Facade
    "GerritRestAPI",
    "RequestExecutor",
    "ServerConfig",
    "GerritSettings",
    # Pipeline
    "resolve_url",
    "ResolvedUrl",
    "decode_response",
    "parse_content_type",
    "parse_content_encoding",
    "ContentType",
    "MAGIC_JSON_PREFIX",
    # Entities
    "Entity",
    "BranchInfo",
    "BranchInput",
    "DeleteBranchesInput",
    "WebLinkInfo",
    # Errors
    "GerritError",
    "GerritTransportError",
    "GerritRestError",
    "GerritJSONDecodeError",
    "EntityDecodeError",
]
