"""Checked constructors and variant dispatch for relationships."""
from dataclasses import dataclass
from typing import Optional

from ..data.pointer_target_nodes import PointerTargetNodeList
from ..exceptions import RelationshipError
from ..types import PointerType, Synset
from ..utils.logger import app_logger
from .relationship import (
    Relationship,
    SymmetricRelationship,
    AsymmetricRelationship,
)

logger = app_logger.bind(component="relationship_factory")


@dataclass
class RelationshipResult:
    """Outcome of a checked relationship construction."""
    relationship: Optional[Relationship] = None
    error: Optional[RelationshipError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Relationship:
        """Return the relationship, or raise the construction error."""
        if self.error is not None:
            raise self.error
        return self.relationship


def create_symmetric_relationship(pointer_type: PointerType, node_list: PointerTargetNodeList,
                                  source_synset: Synset, target_synset: Synset) -> RelationshipResult:
    try:
        relationship = SymmetricRelationship(pointer_type, node_list, source_synset, target_synset)
    except RelationshipError as e:
        logger.warning(f"Rejected symmetric relationship: {e}")
        return RelationshipResult(error=e)
    return RelationshipResult(relationship=relationship)


def create_asymmetric_relationship(pointer_type: PointerType, node_list: PointerTargetNodeList,
                                   common_parent_index: int, source_synset: Synset,
                                   target_synset: Synset) -> RelationshipResult:
    try:
        relationship = AsymmetricRelationship(
            pointer_type, node_list, common_parent_index, source_synset, target_synset
        )
    except RelationshipError as e:
        logger.warning(f"Rejected asymmetric relationship: {e}")
        return RelationshipResult(error=e)
    return RelationshipResult(relationship=relationship)


def reverse_relationship(relationship: Relationship) -> Relationship:
    """Reverse a relationship of either kind."""
    return relationship.reverse()
