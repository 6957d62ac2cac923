"""
Filesystem node domain entities.
"""

from dataclasses import dataclass
from typing import Any, Literal, Optional

from pydantic import BaseModel, model_validator

ROOT_PATH = "/"

NodeType = Literal["file", "directory"]


class FileSystemNode(BaseModel):
    """
    A file or directory in the virtual filesystem tree.

    A directory exclusively owns its children, keyed by their local name.
    The serialized form of the root node is the persisted state of the
    whole filesystem.
    """

    name: str
    type: NodeType
    content: Optional[str] = None
    children: Optional[dict[str, "FileSystemNode"]] = None
    metadata: Optional[dict[str, Any]] = None

    @model_validator(mode="after")
    def _check_kind(self) -> "FileSystemNode":
        if self.type == "file" and self.children is not None:
            raise ValueError(f"File node '{self.name}' cannot have children")
        if self.type == "directory" and self.content is not None:
            raise ValueError(f"Directory node '{self.name}' cannot have content")
        return self

    @classmethod
    def directory(cls, name: str) -> "FileSystemNode":
        """Create an empty directory node."""
        return cls(name=name, type="directory", children={})

    @classmethod
    def file(cls, name: str, content: str = "") -> "FileSystemNode":
        """Create a file node holding the given content."""
        return cls(name=name, type="file", content=content)

    @property
    def is_dir(self) -> bool:
        return self.type == "directory"

    def to_info(self) -> "NodeInfo":
        return NodeInfo(name=self.name, type=self.type)

    def to_storage(self) -> dict[str, Any]:
        """
        Serialize the node and its subtree to plain JSON-compatible data.

        Returns:
            Dictionary with name, type and content/children (metadata if set)
        """
        return self.model_dump(exclude_none=True)


FileSystemNode.model_rebuild()


@dataclass(frozen=True)
class NodeInfo:
    """Descriptor of a directory entry returned by a listing."""

    name: str
    type: NodeType = "file"

    @property
    def is_dir(self) -> bool:
        return self.type == "directory"
