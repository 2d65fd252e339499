"""
Typed records for Gerrit REST payloads.

Each entity decodes from the JSON Gerrit returns (``decode_one`` /
``decode_list``) and encodes to the JSON Gerrit accepts (``to_json``).
"""

from .base import Entity
from .branch import BranchInfo, BranchInput, DeleteBranchesInput, WebLinkInfo

__all__ = [
    "Entity",
    "BranchInfo",
    "BranchInput",
    "DeleteBranchesInput",
    "WebLinkInfo",
]
