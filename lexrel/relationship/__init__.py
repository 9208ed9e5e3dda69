from .relationship import (
    Relationship,
    RelationshipKind,
    SymmetricRelationship,
    AsymmetricRelationship,
)
from .factory import (
    RelationshipResult,
    create_symmetric_relationship,
    create_asymmetric_relationship,
    reverse_relationship,
)
from .relationship_list import RelationshipList

__all__ = [
    "Relationship",
    "RelationshipKind",
    "SymmetricRelationship",
    "AsymmetricRelationship",
    "RelationshipResult",
    "create_symmetric_relationship",
    "create_asymmetric_relationship",
    "reverse_relationship",
    "RelationshipList",
]
