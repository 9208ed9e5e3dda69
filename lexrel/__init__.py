"""
Semantic pointer relationships between synsets of a lexical reference graph.
"""
from .types import POS, PointerType, Synset, symmetric_counterpart
from .exceptions import (
    RelationshipError,
    InvalidRelationship,
    InvalidDivergenceIndex,
    NoSymmetricCounterpart,
)
from .data import PointerTargetNode, PointerTargetNodeList
from .relationship import (
    Relationship,
    RelationshipKind,
    SymmetricRelationship,
    AsymmetricRelationship,
    RelationshipResult,
    RelationshipList,
    create_symmetric_relationship,
    create_asymmetric_relationship,
    reverse_relationship,
)

__version__ = "0.1.0"
