"""
Path nodes produced by relationship finding.

Each node records the pointer type that was followed to reach a synset. A
node list is the ordered path from the source synset (index 0) to the target
synset (last index).
"""
from typing import List, Dict, Any, Iterable, Iterator, Optional

from ..types import PointerType, Synset


class PointerTargetNode:
    """One step of a path: the pointer type followed and the synset reached."""

    def __init__(self, synset: Synset, pointer_type: Optional[PointerType] = None):
        self.synset = synset
        self.pointer_type = pointer_type

    def clone(self) -> "PointerTargetNode":
        # The synset is a dictionary reference, only the node itself is copied.
        return PointerTargetNode(self.synset, self.pointer_type)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "pointer_type": self.pointer_type.key if self.pointer_type else None,
            "synset": self.synset.to_dict(),
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointerTargetNode):
            return NotImplemented
        return self.synset == other.synset and self.pointer_type is other.pointer_type

    __hash__ = None

    def __repr__(self) -> str:
        return f"PointerTargetNode(synset={self.synset.key}, pointer_type={self.pointer_type!r})"

    def __str__(self) -> str:
        label = self.pointer_type.label if self.pointer_type else "source"
        return f"{label} -> {self.synset}"


class PointerTargetNodeList:
    """Ordered list of path nodes."""

    def __init__(self, nodes: Optional[Iterable[PointerTargetNode]] = None):
        self._nodes: List[PointerTargetNode] = list(nodes) if nodes is not None else []
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "PointerTargetNodeList":
        """Stop any further change to the node order or length and return this list."""
        self._frozen = True
        return self

    def _check_not_frozen(self):
        if self._frozen:
            raise TypeError("Node list is owned by a relationship and cannot be changed")

    def append(self, node: PointerTargetNode):
        self._check_not_frozen()
        self._nodes.append(node)

    def deep_clone(self) -> "PointerTargetNodeList":
        """Copy the list and every node in it.

        Changing a node of the copy never changes a node of this list.
        The copy is never frozen.
        """
        return PointerTargetNodeList(node.clone() for node in self._nodes)

    def reverse(self) -> "PointerTargetNodeList":
        """Reverse the node order in place and return this list."""
        self._check_not_frozen()
        self._nodes.reverse()
        return self

    def pointer_types(self) -> List[Optional[PointerType]]:
        return [node.pointer_type for node in self._nodes]

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, index: int) -> PointerTargetNode:
        return self._nodes[index]

    def __iter__(self) -> Iterator[PointerTargetNode]:
        return iter(self._nodes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointerTargetNodeList):
            return NotImplemented
        return self._nodes == other._nodes

    __hash__ = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"nodes": [node.to_dict() for node in self._nodes]}

    def to_string(self, indent: int = 0) -> str:
        """Render the path one node per line."""
        pad = " " * indent
        return "\n".join(f"{pad}{node}" for node in self._nodes)

    def __repr__(self) -> str:
        return f"PointerTargetNodeList({self._nodes!r})"
