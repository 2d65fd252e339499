"""
Branch entities of the Gerrit projects REST API.
"""

from typing import ClassVar

from pydantic import Field

from .base import Entity


class WebLinkInfo(Entity):
    name: str
    url: str
    image_url: str | None = None


class BranchInfo(Entity):
    """A branch as returned by ``GET /projects/{project}/branches/``."""

    key_field: ClassVar[str | None] = "ref"

    ref: str
    revision: str
    can_delete: bool | None = None
    web_links: list[WebLinkInfo] | None = None


class BranchInput(Entity):
    """Body of ``PUT /projects/{project}/branches/{ref}``."""

    ref: str | None = None
    revision: str | None = None


class DeleteBranchesInput(Entity):
    """Body of ``POST /projects/{project}/branches:delete``."""

    branches: list[str] = Field(default_factory=list)
