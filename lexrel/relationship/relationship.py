"""
Relationships between two synsets.

A relationship is the path of pointers walked from a source synset to a target
synset. Symmetric relationships (similar-to chains, antonym chains, ...) use the
same pointer type in both directions. Asymmetric relationships (hypernym
chains, meronym chains, ...) climb from the source to a common parent and then
descend to the target, for example dog -> canine -> carnivore -> feline -> cat,
where the ancestries of "dog" and "cat" meet at "carnivore" (index 2).
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Any, Optional

from ..config import settings
from ..data.pointer_target_nodes import PointerTargetNodeList
from ..exceptions import InvalidRelationship, InvalidDivergenceIndex
from ..types import PointerType, Synset, symmetric_counterpart
from ..utils.logger import app_logger

logger = app_logger.bind(component="relationship")


class RelationshipKind(Enum):
    """Relationship variant tag."""
    SYMMETRIC = "symmetric"
    ASYMMETRIC = "asymmetric"


class Relationship(ABC):
    """A path of pointers between a source and a target synset."""

    kind: RelationshipKind

    def __init__(self, pointer_type: PointerType, node_list: PointerTargetNodeList,
                 source_synset: Synset, target_synset: Synset):
        if pointer_type is None:
            raise InvalidRelationship("Relationship requires a pointer type")
        if not isinstance(node_list, PointerTargetNodeList):
            raise InvalidRelationship(
                f"Relationship requires a PointerTargetNodeList, got {type(node_list).__name__}"
            )
        if len(node_list) == 0:
            raise InvalidRelationship("Relationship requires at least one node")
        if source_synset is None or target_synset is None:
            raise InvalidRelationship("Relationship requires a source and a target synset")

        self._pointer_type = pointer_type
        # The relationship keeps its own copy so its length can no longer change.
        self._node_list = node_list.deep_clone().freeze()
        self._source_synset = source_synset
        self._target_synset = target_synset

    @property
    def pointer_type(self) -> PointerType:
        return self._pointer_type

    @property
    def node_list(self) -> PointerTargetNodeList:
        return self._node_list

    @property
    def source_synset(self) -> Synset:
        return self._source_synset

    @property
    def target_synset(self) -> Synset:
        return self._target_synset

    @property
    def size(self) -> int:
        """Number of nodes in the path."""
        return len(self._node_list)

    @property
    def depth(self) -> int:
        """Number of pointers walked from source to target."""
        return self.size - 1

    @abstractmethod
    def reverse(self) -> "Relationship":
        """Build the relationship going from the target back to the source."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "kind": self.kind.value,
            "pointer_type": self._pointer_type.key,
            "source": self._source_synset.to_dict(),
            "target": self._target_synset.to_dict(),
            "depth": self.depth,
            "nodes": self._node_list.to_dict()["nodes"],
        }

    def __str__(self) -> str:
        header = f"[{self._pointer_type.label} relationship: {self._source_synset} -> {self._target_synset}]"
        return f"{header}\n{self._node_list.to_string(indent=2)}"


class SymmetricRelationship(Relationship):
    """Relationship whose pointers read the same in both directions."""

    kind = RelationshipKind.SYMMETRIC

    def reverse(self) -> "SymmetricRelationship":
        nodes = self.node_list.deep_clone().reverse()
        return SymmetricRelationship(self.pointer_type, nodes, self.target_synset, self.source_synset)


class AsymmetricRelationship(Relationship):
    """Relationship whose source and target lineages diverge at a common parent.

    The common parent index is the position in the node list of the synset
    where the two ancestries meet.
    """

    kind = RelationshipKind.ASYMMETRIC

    def __init__(self, pointer_type: PointerType, node_list: PointerTargetNodeList,
                 common_parent_index: int, source_synset: Synset, target_synset: Synset):
        super().__init__(pointer_type, node_list, source_synset, target_synset)
        if (isinstance(common_parent_index, bool) or not isinstance(common_parent_index, int)
                or not 0 <= common_parent_index < len(node_list)):
            raise InvalidDivergenceIndex(common_parent_index, len(node_list))
        self._common_parent_index = common_parent_index
        self._relative_target_depth: Optional[int] = None

    @property
    def common_parent_index(self) -> int:
        return self._common_parent_index

    def get_common_parent_index(self) -> int:
        return self._common_parent_index

    def get_relative_target_depth(self) -> int:
        """
        Get the depth of the target below the common parent, relative to the
        depth of the source below it.

        Returns 0 when source and target are equidistant from the common
        parent, a positive number when the target is further away and a
        negative number when the source is.
        """
        if self._relative_target_depth is None:
            source_to_parent = self._common_parent_index
            parent_to_target = (self.size - 1) - self._common_parent_index
            self._relative_target_depth = parent_to_target - source_to_parent
        return self._relative_target_depth

    def reverse(self) -> "AsymmetricRelationship":
        """
        Build the relationship from the target back to the source.

        Every pointer except the one on the common parent is replaced by its
        symmetric type, so a hypernym climb becomes a hyponym descent and the
        other way round. Raises NoSymmetricCounterpart if a pointer on either
        branch has no symmetric type; this relationship is left unchanged.
        """
        nodes = self.node_list.deep_clone().reverse()
        common_parent_index = (len(nodes) - 1) - self._common_parent_index
        for i, node in enumerate(nodes):
            if i != common_parent_index:
                node.pointer_type = symmetric_counterpart(node.pointer_type)

        if settings.log_reversals:
            logger.debug(
                f"Reversed {self.pointer_type.label} relationship {self.source_synset.key} -> "
                f"{self.target_synset.key}, common parent {self._common_parent_index} -> {common_parent_index}"
            )
        return AsymmetricRelationship(
            self.pointer_type, nodes, common_parent_index, self.target_synset, self.source_synset
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = super().to_dict()
        data["common_parent_index"] = self._common_parent_index
        data["relative_target_depth"] = self.get_relative_target_depth()
        return data
