"""Arena-backed filesystem tree built from a replayed shell session.

Nodes live in a flat list and are addressed by integer handles. Ownership
flows from a directory to its children through the `children` mapping; the
`parent` handle is only a navigational back-reference.
"""

from dataclasses import dataclass, field
from enum import StrEnum

from src.errors import StructuralError, UnknownReferenceError

ROOT: int = 0


class NodeKind(StrEnum):
    FILE = "file"
    DIRECTORY = "dir"


@dataclass(slots=True)
class FileSystemNode:
    """One file or directory in the arena.

    For files `size` is set at creation. For directories it stays None
    until the size aggregation pass has seen every descendant.
    """

    name: str
    kind: NodeKind
    parent: int | None  # None only for the root
    size: int | None = None
    children: dict[str, int] = field(default_factory=dict)

    @property
    def is_directory(self) -> bool:
        return self.kind is NodeKind.DIRECTORY


class FileSystemTree:
    """Arena of FileSystemNodes rooted at handle ROOT ("/")."""

    def __init__(self) -> None:
        self.nodes: list[FileSystemNode] = [
            FileSystemNode(name="/", kind=NodeKind.DIRECTORY, parent=None)
        ]

    def __len__(self) -> int:
        return len(self.nodes)

    def node(self, handle: int) -> FileSystemNode:
        return self.nodes[handle]

    def add_child(
        self,
        parent: int,
        name: str,
        kind: NodeKind,
        size: int | None = None,
    ) -> int:
        """Attach a child under `parent` and return its handle.

        Re-listing an existing directory as a directory keeps the existing
        node (and whatever was already discovered beneath it). Any other
        duplicate name is replaced by the new entry.
        """
        owner = self.nodes[parent]
        if not owner.is_directory:
            raise StructuralError(
                f"cannot add {name!r} under file {self.path(parent)!r}"
            )
        existing = owner.children.get(name)
        if (
            existing is not None
            and kind is NodeKind.DIRECTORY
            and self.nodes[existing].is_directory
        ):
            return existing

        handle = len(self.nodes)
        self.nodes.append(
            FileSystemNode(
                name=name,
                kind=kind,
                parent=parent,
                size=size if kind is NodeKind.FILE else None,
            )
        )
        owner.children[name] = handle
        return handle

    def child(self, handle: int, name: str) -> int:
        """Handle of the named child directory of `handle`."""
        node = self.nodes[handle]
        child = node.children.get(name)
        if child is None:
            raise UnknownReferenceError(
                f"no entry {name!r} in {self.path(handle)!r}"
            )
        if not self.nodes[child].is_directory:
            raise StructuralError(
                f"{self.path(child)!r} is a file, not a directory"
            )
        return child

    def parent(self, handle: int) -> int:
        """Handle of the parent directory; the root has none."""
        parent = self.nodes[handle].parent
        if parent is None:
            raise StructuralError("cannot ascend above the root directory")
        return parent

    def path(self, handle: int) -> str:
        """Absolute slash-separated path of a node."""
        parts: list[str] = []
        current: int | None = handle
        while current is not None and current != ROOT:
            node = self.nodes[current]
            parts.append(node.name)
            current = node.parent
        return "/" + "/".join(reversed(parts))

    def size(self, handle: int) -> int:
        """Size of a node; directories must already be aggregated."""
        node = self.nodes[handle]
        if node.size is None:
            raise StructuralError(
                f"size of {self.path(handle)!r} read before aggregation"
            )
        return node.size

    def directories(self) -> list[int]:
        """Handles of every directory reachable from the root, pre-order.

        Nodes displaced by a duplicate listing stay in the arena but are
        unreachable and therefore excluded.
        """
        found: list[int] = []
        pending = [ROOT]
        while pending:
            handle = pending.pop()
            found.append(handle)
            pending.extend(
                child
                for child in reversed(self.nodes[handle].children.values())
                if self.nodes[child].is_directory
            )
        return found
